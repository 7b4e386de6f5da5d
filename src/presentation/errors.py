"""
Error Translation - Presentation Layer

Single place where domain errors become HTTP responses. Controllers
catch ``DeviceManagementError`` and raise what ``to_http_exception``
returns, so status codes and error bodies stay consistent.
"""

from typing import Any, Dict

from fastapi import HTTPException, status

from src.domain.entities.errors import DeviceManagementError, ErrorCode
from src.shared.consts import ERROR_CODE_HEADER

_STATUS_BY_CODE: Dict[ErrorCode, int] = {
    ErrorCode.INVALID_DEVICE_GROUP_TOKEN: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_HARDWARE_ID: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ASSET_REFERENCE_ID: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_DEVICE_GROUP_TOKEN: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
}


def status_for(error: DeviceManagementError) -> int:
    return _STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST)


def error_body(error: DeviceManagementError) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "code": error.code.value,
        "level": error.level.value,
        "message": error.message,
    }
    if error.details:
        body["details"] = error.details
    return body


def to_http_exception(error: DeviceManagementError) -> HTTPException:
    """Build the HTTP error for a device management failure."""
    return HTTPException(
        status_code=status_for(error),
        detail=error_body(error),
        headers={ERROR_CODE_HEADER: error.code.value},
    )


def internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
