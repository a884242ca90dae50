"""
### HTTP status codes ===

Every standard response status code as a named integer constant,
annotated with the RFC section defining it.

References:
https://tools.ietf.org/html/rfc1945 (HTTP/1.0)
https://tools.ietf.org/html/rfc2616 (HTTP/1.1)
https://tools.ietf.org/html/rfc2518, rfc4918, rfc5842 (WebDAV)
https://tools.ietf.org/html/rfc2295, rfc2774, rfc3229, rfc6585, rfc8297

"""
from enum import Enum, IntEnum, unique
from typing import Dict, List, Optional

from httpstatus.exceptions import UnknownStatusCode, UnknownStatusName

RFC_BASE_URL = "https://tools.ietf.org/html"


class StatusClass(str, Enum):
    informational = "informational"
    success = "success"
    redirection = "redirection"
    client_error = "client_error"
    server_error = "server_error"
    unknown = "unknown"


# leading digit -> class
BANDS: Dict[int, StatusClass] = {
    1: StatusClass.informational,
    2: StatusClass.success,
    3: StatusClass.redirection,
    4: StatusClass.client_error,
    5: StatusClass.server_error,
}


@unique
class HttpStatus(IntEnum):
    """
    Members are plain ints (HttpStatus.NOT_FOUND == 404)
    and carry the (rfc, section) that defines them
    """

    rfc: int
    section: str

    def __new__(cls, value: int, rfc: int, section: str) -> "HttpStatus":
        member = int.__new__(cls, value)
        member._value_ = value
        member.rfc = rfc
        member.section = section
        return member

    @property
    def status_class(self) -> StatusClass:
        return classify(self.value)

    @property
    def reference(self) -> str:
        return f"RFC {self.rfc}, section {self.section}"

    @property
    def reference_url(self) -> str:
        return f"{RFC_BASE_URL}/rfc{self.rfc}#section-{self.section}"

    # 1xx: Informational
    # provisional responses, terminated by the empty line after the headers
    CONTINUE = 100, 2616, "10.1.1"
    SWITCHING_PROTOCOLS = 101, 2616, "10.1.2"
    PROCESSING = 102, 2518, "10.1"
    EARLY_HINTS = 103, 8297, "2"

    # 2xx: Success
    # the request was received, understood and accepted
    OK = 200, 2616, "10.2.1"
    CREATED = 201, 2616, "10.2.2"
    ACCEPTED = 202, 2616, "10.2.3"
    NON_AUTHORITATIVE_INFORMATION = 203, 2616, "10.2.4"
    NO_CONTENT = 204, 2616, "10.2.5"
    RESET_CONTENT = 205, 2616, "10.2.6"
    PARTIAL_CONTENT = 206, 2616, "10.2.7"
    MULTI_STATUS = 207, 4918, "11.1"
    ALREADY_REPORTED = 208, 5842, "7.1"
    IM_USED = 226, 3229, "10.4.1"

    # 3xx: Redirection
    # further action is needed by the user agent to fulfill the request
    MULTIPLE_CHOICES = 300, 2616, "10.3.1"
    MOVED_PERMANENTLY = 301, 2616, "10.3.2"
    FOUND = 302, 2616, "10.3.3"
    SEE_OTHER = 303, 2616, "10.3.4"
    NOT_MODIFIED = 304, 2616, "10.3.5"
    USE_PROXY = 305, 2616, "10.3.6"
    TEMPORARY_REDIRECT = 307, 2616, "10.3.8"

    # 4xx: Client Error
    BAD_REQUEST = 400, 2616, "10.4.1"
    UNAUTHORIZED = 401, 2616, "10.4.2"
    PAYMENT_REQUIRED = 402, 2616, "10.4.3"
    FORBIDDEN = 403, 2616, "10.4.4"
    NOT_FOUND = 404, 2616, "10.4.5"
    METHOD_NOT_ALLOWED = 405, 2616, "10.4.6"
    NOT_ACCEPTABLE = 406, 2616, "10.4.7"
    PROXY_AUTHENTICATION_REQUIRED = 407, 2616, "10.4.8"
    REQUEST_TIMEOUT = 408, 2616, "10.4.9"
    CONFLICT = 409, 2616, "10.4.10"
    GONE = 410, 2616, "10.4.11"
    LENGTH_REQUIRED = 411, 2616, "10.4.12"
    PRECONDITION_FAILED = 412, 2616, "10.4.13"
    REQUEST_ENTITY_TOO_LARGE = 413, 2616, "10.4.14"
    REQUEST_URI_TOO_LONG = 414, 2616, "10.4.15"
    UNSUPPORTED_MEDIA_TYPE = 415, 2616, "10.4.16"
    REQUESTED_RANGE_NOT_SATISFIABLE = 416, 2616, "10.4.17"
    EXPECTATION_FAILED = 417, 2616, "10.4.18"

    # 5xx: Server Error
    INTERNAL_SERVER_ERROR = 500, 2616, "10.5.1"
    NOT_IMPLEMENTED = 501, 2616, "10.5.2"
    BAD_GATEWAY = 502, 2616, "10.5.3"
    SERVICE_UNAVAILABLE = 503, 2616, "10.5.4"
    GATEWAY_TIMEOUT = 504, 2616, "10.5.5"
    HTTP_VERSION_NOT_SUPPORTED = 505, 2616, "10.5.6"
    VARIANT_ALSO_NEGOTIATES = 506, 2295, "8.1"
    INSUFFICIENT_STORAGE = 507, 4918, "11.5"
    LOOP_DETECTED = 508, 5842, "7.2"
    NOT_EXTENDED = 510, 2774, "7"
    NETWORK_AUTHENTICATION_REQUIRED = 511, 6585, "6"


def classify(code: int) -> StatusClass:
    """Status class implied by the leading digit, unknown outside 100-599"""
    if code < 100 or code > 599:
        return StatusClass.unknown

    return BANDS[code // 100]


def value_of(name: str) -> int:
    try:
        return HttpStatus[name].value
    except KeyError:
        raise UnknownStatusName(name)


def lookup(code: int) -> HttpStatus:
    try:
        return HttpStatus(code)
    except ValueError:
        raise UnknownStatusCode(code)


def statuses(status_class: Optional[StatusClass] = None) -> List[HttpStatus]:
    if status_class is None:
        return list(HttpStatus)

    return [s for s in HttpStatus if s.status_class == status_class]
