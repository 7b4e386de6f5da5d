"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used across every layer. It must
not depend on Infrastructure or Frameworks.
"""

from .consts import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

__all__ = [
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "EnumEnvironment",
    "EnumLogLevel",
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
