"""

Errors raised by the status code registry

"""


class HttpStatusException(Exception):
    pass


class UnknownStatusName(HttpStatusException, KeyError):
    def __init__(self, name: str):
        super().__init__(f"Unknown HTTP status name: {name}")
        self.name = name


class UnknownStatusCode(HttpStatusException, KeyError):
    def __init__(self, code: int):
        super().__init__(f"Unregistered HTTP status code: {code}")
        self.code = code
