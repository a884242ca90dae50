"""
Configuration variables read from the environment
"""
from httpstatus.env import Env

APP_MODE: str = Env.get("APP_MODE", "development")
PRODUCTION: bool = APP_MODE == "production"

LOG_LEVEL: str = Env.get("LOGURU_LEVEL", "INFO")
COLORIZE_LOGS: bool = Env.get_bool("COLORIZE_LOGS", True)
