"""
Utilities for the DAO action builder.
"""

from dao_action_builder.utils.logging import (
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)
from dao_action_builder.utils.retry import RetryConfig, calculate_delay, retry_async

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
    # Retry
    "RetryConfig",
    "calculate_delay",
    "retry_async",
]
