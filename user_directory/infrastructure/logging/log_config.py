"""Per-category log levels for the user directory.

Each ``log_level_*`` setting controls a group of loggers, so the HTTP
client chatter can be turned down while cache and state transitions stay
visible at DEBUG.
"""

import logging
import sys

from user_directory.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Settings field -> loggers it governs
LOGGER_GROUPS: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_user_api": ("user_directory.infrastructure.user_api",),
    "log_level_state": (
        "UserRecordCache",
        "user_directory.application.state",
        "user_directory.application.services",
    ),
}


def level_from_name(name: str | int) -> int:
    """Map ``"debug"``, ``"WARNING"`` or a numeric level to a logging level.

    Unknown names fall back to INFO rather than failing startup.
    """
    if isinstance(name, int):
        return name
    candidate = logging.getLevelName(name.strip().upper())
    return candidate if isinstance(candidate, int) else logging.INFO


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name.

    The root logger gets a stderr handler only when nothing else (uvicorn,
    pytest) installed one already.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(level_from_name(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {"": root.level}
    for field_name, logger_names in LOGGER_GROUPS.items():
        level = level_from_name(getattr(settings, field_name))
        for logger_name in logger_names:
            logging.getLogger(logger_name).setLevel(level)
            applied[logger_name] = level

    logging.getLogger(__name__).debug(
        "Log levels applied to %d loggers (root=%s)",
        len(applied),
        logging.getLevelName(root.level),
    )
    return applied
