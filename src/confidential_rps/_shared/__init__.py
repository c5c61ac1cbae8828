# Area: Shared
"""
Shared utilities used by the engine, the session and the console host.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_round_error,
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)

__all__ = [
    "setup_logging",
    "log_round_error",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
]
