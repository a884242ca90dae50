from httpstatus.codes import (
    HttpStatus,
    StatusClass,
    classify,
    lookup,
    statuses,
    value_of,
)
from httpstatus.exceptions import (
    HttpStatusException,
    UnknownStatusCode,
    UnknownStatusName,
)

__version__ = "1.0.0"

__all__ = [
    "HttpStatus",
    "StatusClass",
    "classify",
    "lookup",
    "statuses",
    "value_of",
    "HttpStatusException",
    "UnknownStatusCode",
    "UnknownStatusName",
]
