"""
Device Groups Router - Presentation Layer

This module defines the FastAPI router for device group endpoints.
Query parameters are defaulted here so the backend always receives a
complete search criteria.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, Path, Query, status

from src.application.dtos.base import SearchResultsDTO
from src.application.dtos.device_group_dto import (
    DeviceGroupCreateDTO,
    DeviceGroupDTO,
    DeviceGroupElementDTO,
)
from src.application.use_cases.device_group_use_cases import (
    CreateDeviceGroupUseCase,
    DeleteDeviceGroupUseCase,
    GetDeviceGroupByTokenUseCase,
    ListDeviceGroupElementsUseCase,
    ListDeviceGroupsUseCase,
    UpdateDeviceGroupUseCase,
)
from src.domain.entities.errors import DeviceManagementError
from src.presentation.errors import internal_error, to_http_exception
from src.shared import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/devicegroups", tags=["Device Groups"])


@router.post(
    "",
    response_model=DeviceGroupDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_device_group(
    request_dto: DeviceGroupCreateDTO = Body(...),
    create_use_case: CreateDeviceGroupUseCase = Depends(
        Provide["create_device_group_use_case"]
    ),
) -> DeviceGroupDTO:
    """Create a new device group."""
    logger.info("device_groups.create.requested", token=request_dto.token)
    try:
        return await create_use_case.execute(request_dto)
    except DeviceManagementError as e:
        logger.warning(
            "device_groups.create.rejected", code=e.code.value, error=e.message
        )
        raise to_http_exception(e)
    except Exception as e:
        logger.error("device_groups.create.failed", error=str(e), exc_info=e)
        raise internal_error()


@router.get("/{group_token}", response_model=DeviceGroupDTO)
@inject
async def get_device_group_by_token(
    group_token: str = Path(
        ..., description="Unique token that identifies the device group"
    ),
    get_use_case: GetDeviceGroupByTokenUseCase = Depends(
        Provide["get_device_group_by_token_use_case"]
    ),
) -> DeviceGroupDTO:
    """Get a device group by unique token."""
    try:
        return await get_use_case.execute(group_token)
    except DeviceManagementError as e:
        logger.info(
            "device_groups.get.not_found", token=group_token, code=e.code.value
        )
        raise to_http_exception(e)
    except Exception as e:
        logger.error(
            "device_groups.get.failed", token=group_token, error=str(e), exc_info=e
        )
        raise internal_error()


@router.put("/{group_token}", response_model=DeviceGroupDTO)
@inject
async def update_device_group(
    group_token: str = Path(
        ..., description="Unique token that identifies the device group"
    ),
    request_dto: DeviceGroupCreateDTO = Body(...),
    update_use_case: UpdateDeviceGroupUseCase = Depends(
        Provide["update_device_group_use_case"]
    ),
) -> DeviceGroupDTO:
    """Update an existing device group."""
    try:
        return await update_use_case.execute(group_token, request_dto)
    except DeviceManagementError as e:
        logger.warning(
            "device_groups.update.rejected",
            token=group_token,
            code=e.code.value,
            error=e.message,
        )
        raise to_http_exception(e)
    except Exception as e:
        logger.error(
            "device_groups.update.failed",
            token=group_token,
            error=str(e),
            exc_info=e,
        )
        raise internal_error()


@router.delete("/{group_token}", response_model=DeviceGroupDTO)
@inject
async def delete_device_group(
    group_token: str = Path(
        ..., description="Unique token that identifies the device group"
    ),
    force: bool = Query(False, description="Delete permanently"),
    delete_use_case: DeleteDeviceGroupUseCase = Depends(
        Provide["delete_device_group_use_case"]
    ),
) -> DeviceGroupDTO:
    """Delete a device group by unique token."""
    try:
        return await delete_use_case.execute(group_token, force=force)
    except DeviceManagementError as e:
        logger.warning(
            "device_groups.delete.rejected",
            token=group_token,
            force=force,
            code=e.code.value,
        )
        raise to_http_exception(e)
    except Exception as e:
        logger.error(
            "device_groups.delete.failed",
            token=group_token,
            force=force,
            error=str(e),
            exc_info=e,
        )
        raise internal_error()


@router.get("", response_model=SearchResultsDTO[DeviceGroupDTO])
@inject
async def list_device_groups(
    include_deleted: bool = Query(
        False, alias="includeDeleted", description="Include deleted groups"
    ),
    page: int = Query(
        DEFAULT_PAGE_NUMBER, description="Page number (first page is 1)"
    ),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE,
        alias="pageSize",
        ge=0,
        description="Page size, 0 returns every result",
    ),
    list_use_case: ListDeviceGroupsUseCase = Depends(
        Provide["list_device_groups_use_case"]
    ),
) -> SearchResultsDTO[DeviceGroupDTO]:
    """List all device groups."""
    try:
        return await list_use_case.execute(
            include_deleted=include_deleted, page=page, page_size=page_size
        )
    except DeviceManagementError as e:
        logger.warning("device_groups.list.rejected", code=e.code.value)
        raise to_http_exception(e)
    except Exception as e:
        logger.error("device_groups.list.failed", error=str(e), exc_info=e)
        raise internal_error()


@router.get(
    "/{group_token}/elements",
    response_model=SearchResultsDTO[DeviceGroupElementDTO],
)
@inject
async def list_device_group_elements(
    group_token: str = Path(
        ..., description="Unique token that identifies the device group"
    ),
    include_details: bool = Query(
        False,
        alias="includeDetails",
        description="Include detailed element information",
    ),
    page: int = Query(
        DEFAULT_PAGE_NUMBER, description="Page number (first page is 1)"
    ),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE,
        alias="pageSize",
        ge=0,
        description="Page size, 0 returns every result",
    ),
    list_elements_use_case: ListDeviceGroupElementsUseCase = Depends(
        Provide["list_device_group_elements_use_case"]
    ),
) -> SearchResultsDTO[DeviceGroupElementDTO]:
    """List elements from a device group."""
    try:
        return await list_elements_use_case.execute(
            group_token,
            include_details=include_details,
            page=page,
            page_size=page_size,
        )
    except DeviceManagementError as e:
        logger.warning(
            "device_groups.elements.rejected",
            token=group_token,
            code=e.code.value,
        )
        raise to_http_exception(e)
    except Exception as e:
        logger.error(
            "device_groups.elements.failed",
            token=group_token,
            error=str(e),
            exc_info=e,
        )
        raise internal_error()
