from .logger import (
    PACKAGE_NAMESPACE,
    configure_logger,
    disable_logging,
    get_logger,
    remove_logger_sink,
)

__all__ = [
    "PACKAGE_NAMESPACE",
    "configure_logger",
    "disable_logging",
    "get_logger",
    "remove_logger_sink",
]
