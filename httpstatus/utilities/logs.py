import sys

from loguru import logger as log

from httpstatus.config import COLORIZE_LOGS, LOG_LEVEL, PRODUCTION

log.level("INFO", color="<green>")

log.remove()


fmt = ""
fmt += "<fg #FFF>{time:YYYY-MM-DD HH:mm:ss,SSS}</fg #FFF> "
fmt += "[<level>{level}</level> "
fmt += "<fg #666>{name}:{line}</fg #666>] "
fmt += "<fg #FFF>{message}</fg #FFF>"


# Set the default logger with the given log level and save the log_id as static variable
# Further call to this function will remove the previous logger (based on saved log_id)
def set_logger(level: str) -> None:

    if hasattr(set_logger, "log_id"):
        log_id = getattr(set_logger, "log_id")
        log.remove(log_id)

    log_id = log.add(
        sys.stderr,
        level=level,
        colorize=COLORIZE_LOGS,
        format=fmt,
        # If True the exception trace is extended upward, beyond the catching point
        # to show the full stacktrace which generated the error.
        backtrace=False,
        # Display variables values in exception trace to eases the debugging.
        # Disabled in production to avoid leaking sensitive data.
        diagnose=not PRODUCTION,
    )

    setattr(set_logger, "log_id", log_id)


set_logger(LOG_LEVEL)
