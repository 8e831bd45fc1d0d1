"""
Logging for object mapper configuration and resolution using Loguru.

The object_mapping namespace is disabled when the package is imported, so an
application that never calls configure_logger() sees no output from it.
configure_logger() enables the namespace and adds a single file sink;
remove_logger_sink() closes that sink and silences the namespace again.
"""

from pathlib import Path
from typing import Literal

from loguru import logger

LogLevel = Literal["debug", "info", "warn"]

PACKAGE_NAMESPACE = "object_mapping"

_LOG_DIR_DEFAULT = "logs"
_LOG_FILE_DEFAULT = "object_mapping.log"
_LOGURU_LEVEL: dict[str, str] = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
}
_sink_id: int | None = None


def disable_logging() -> None:
    """Silence every record emitted from the object_mapping namespace."""
    logger.disable(PACKAGE_NAMESPACE)


def configure_logger(
    log_dir: str = _LOG_DIR_DEFAULT,
    log_level: LogLevel = "info",
    log_file: str = _LOG_FILE_DEFAULT,
    replace_handlers: bool = True,
) -> None:
    """
    Turn on resolution logging and write it to log_dir/log_file.

    The file is overwritten each time (mode="w"). A sink added by an earlier
    call is always replaced.

    Args:
        log_dir: Directory for the log file (created if missing). Default "logs".
        log_level: One of "debug", "info", or "warn". Default "info".
        log_file: File name inside log_dir. Default "object_mapping.log".
        replace_handlers: Drop every other Loguru handler too, including the
            default stderr one. Pass False to keep the application's handlers.

    Raises:
        ValueError: If log_level is not "debug", "info", or "warn".
    """
    global _sink_id

    normalized = log_level.lower().strip()
    if normalized not in _LOGURU_LEVEL:
        raise ValueError(
            f"log_level must be one of 'debug', 'info', 'warn'; got {log_level!r}"
        )

    if replace_handlers:
        logger.remove(None)
    else:
        remove_logger_sink()

    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)

    _sink_id = logger.add(
        str(path / log_file),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        level=_LOGURU_LEVEL[normalized],
        mode="w",
    )
    logger.enable(PACKAGE_NAMESPACE)


def remove_logger_sink() -> None:
    """
    Close the file sink added by configure_logger() and disable the namespace.

    Idempotent if no sink is set.
    """
    global _sink_id
    if _sink_id is not None:
        try:
            logger.remove(_sink_id)
        except ValueError:
            # Already removed by another logger.remove(None)
            pass
        _sink_id = None
    disable_logging()


def get_logger():
    """Return the shared Loguru logger."""
    return logger
