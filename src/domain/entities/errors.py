"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
Device management failures carry an error code and a severity level so
the presentation layer can translate them without inspecting messages.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Machine-readable reason for a device management failure."""

    INVALID_DEVICE_GROUP_TOKEN = "InvalidDeviceGroupToken"
    DUPLICATE_DEVICE_GROUP_TOKEN = "DuplicateDeviceGroupToken"
    INVALID_HARDWARE_ID = "InvalidHardwareId"
    INVALID_ASSET_REFERENCE_ID = "InvalidAssetReferenceId"
    INVALID_REQUEST = "InvalidRequest"


class ErrorLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeviceManagementError(DomainError):
    """Raised by a device management backend, or on its behalf."""

    def __init__(
        self,
        code: ErrorCode,
        level: ErrorLevel = ErrorLevel.ERROR,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.level = level
        super().__init__(message or code.value, details)


class DeviceGroupNotFoundError(DeviceManagementError):
    """Raised when a token does not resolve to an existing device group."""

    def __init__(self, token: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            ErrorCode.INVALID_DEVICE_GROUP_TOKEN,
            ErrorLevel.ERROR,
            f"Device group with token {token} not found",
            {"token": token, **(details or {})},
        )


class DuplicateDeviceGroupError(DeviceManagementError):
    """Raised when creating a group with a token that is already taken."""

    def __init__(self, token: str):
        super().__init__(
            ErrorCode.DUPLICATE_DEVICE_GROUP_TOKEN,
            ErrorLevel.ERROR,
            f"Device group token {token} is already in use",
            {"token": token},
        )
