"""wikiprobe utility functions."""
from wikiprobe.utils.logging import (
    configure_logging,
    get_logger,
    set_log_level,
    shutdown_logging,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_log_level",
    "shutdown_logging",
]
