import logging
import logging.config
import sys
from typing import Dict, Any, Optional, Union
from pathlib import Path

# Logger name -> level, regardless of the package level.
# httpcore logs every connection event at DEBUG.
THIRD_PARTY_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _level_name(level: Union[str, int]) -> str:
    if isinstance(level, int):
        return logging.getLevelName(level)
    return level.upper()


def setup_logging(log_level: Union[str, int] = "INFO", log_file: Optional[str] = None) -> None:
    """Configure the ``plaid_client`` loggers.

    Request and response lines are emitted at DEBUG, so ``log_level="DEBUG"``
    traces every API call. Credentials are masked before they are logged.

    Args:
        log_level: Level name or number for the package loggers
        log_file: Also write to this rotating log file
    """
    level = _level_name(log_level)
    handlers = ["console"]

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "default",
                "level": level,
            },
        },
    }

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": LOG_FILE_MAX_BYTES,
            "backupCount": LOG_FILE_BACKUPS,
            "formatter": "detailed",
            "level": level,
        }
        handlers.append("file")

    loggers = {"plaid_client": {"level": level, "handlers": list(handlers), "propagate": False}}
    for name, third_party_level in THIRD_PARTY_LEVELS.items():
        loggers[name] = {"level": third_party_level, "handlers": list(handlers), "propagate": False}

    config["loggers"] = loggers
    config["root"] = {"level": "WARNING", "handlers": list(handlers)}

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``plaid_client`` namespace."""
    if name == "plaid_client" or name.startswith("plaid_client."):
        return logging.getLogger(name)
    return logging.getLogger(f"plaid_client.{name}")


def mask_sensitive_data(data: str, mask_length: int = 4) -> str:
    """Mask all but the first and last ``mask_length`` characters.

    Values too short to keep both ends are masked entirely.
    """
    if not data or len(data) <= mask_length * 2:
        return "*" * len(data) if data else ""

    return f"{data[:mask_length]}{'*' * (len(data) - mask_length * 2)}{data[-mask_length:]}"
