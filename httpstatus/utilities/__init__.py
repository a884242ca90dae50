import sys
from typing import NoReturn, Optional

from httpstatus.utilities.logs import log


def print_and_exit(
    message: str, *args: Optional[str], **kwargs: Optional[str]
) -> NoReturn:
    log.critical(message, *args, **kwargs)
    sys.exit(1)
