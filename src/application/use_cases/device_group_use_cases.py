"""
Device Group Use Cases - Application Layer

One use case per device group endpoint. Each use case delegates to the
device management backend and copies whatever comes back into DTOs, so
backend objects never reach the presentation layer.
"""

from src.application.dtos.base import SearchResultsDTO
from src.application.dtos.device_group_dto import (
    DeviceGroupCreateDTO,
    DeviceGroupDTO,
    DeviceGroupElementDTO,
)
from src.application.mappers import DeviceGroupElementMarshaller
from src.domain.entities.device_group import DeviceGroupCreateRequest
from src.domain.entities.errors import DeviceGroupNotFoundError
from src.domain.entities.search import SearchCriteria
from src.domain.ports.asset_module_manager import IAssetModuleManager
from src.domain.ports.device_management import IDeviceManagement
from src.shared import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, get_logger

logger = get_logger(__name__)


def _to_create_request(dto: DeviceGroupCreateDTO) -> DeviceGroupCreateRequest:
    return DeviceGroupCreateRequest(
        token=dto.token,
        name=dto.name,
        description=dto.description,
        roles=list(dto.roles),
        metadata=dict(dto.metadata),
    )


class CreateDeviceGroupUseCase:
    """Use case for creating a device group."""

    def __init__(self, device_management: IDeviceManagement) -> None:
        self._device_management = device_management

    async def execute(self, request_dto: DeviceGroupCreateDTO) -> DeviceGroupDTO:
        group = await self._device_management.create_device_group(
            _to_create_request(request_dto)
        )
        logger.info("device_groups.created", token=group.token)
        return DeviceGroupDTO.from_domain(group)


class GetDeviceGroupByTokenUseCase:
    """Use case for retrieving a device group by its unique token."""

    def __init__(self, device_management: IDeviceManagement) -> None:
        self._device_management = device_management

    async def execute(self, token: str) -> DeviceGroupDTO:
        """
        Retrieve a device group.

        Args:
            token: Unique token that identifies the group

        Returns:
            DeviceGroupDTO: Copy of the group held by the backend

        Raises:
            DeviceGroupNotFoundError: If the backend has no group with this token
        """
        group = await self._device_management.get_device_group(token)
        if group is None:
            raise DeviceGroupNotFoundError(token)
        return DeviceGroupDTO.from_domain(group)


class UpdateDeviceGroupUseCase:
    """Use case for updating an existing device group."""

    def __init__(self, device_management: IDeviceManagement) -> None:
        self._device_management = device_management

    async def execute(
        self, token: str, request_dto: DeviceGroupCreateDTO
    ) -> DeviceGroupDTO:
        group = await self._device_management.update_device_group(
            token, _to_create_request(request_dto)
        )
        logger.info("device_groups.updated", token=group.token)
        return DeviceGroupDTO.from_domain(group)


class DeleteDeviceGroupUseCase:
    """Use case for deleting a device group."""

    def __init__(self, device_management: IDeviceManagement) -> None:
        self._device_management = device_management

    async def execute(self, token: str, force: bool = False) -> DeviceGroupDTO:
        """
        Delete a device group.

        Args:
            token: Unique token that identifies the group
            force: Passed through to the backend as a permanent delete request

        Returns:
            DeviceGroupDTO: Copy of the deleted group
        """
        group = await self._device_management.delete_device_group(token, force)
        logger.info("device_groups.deleted", token=group.token, force=force)
        return DeviceGroupDTO.from_domain(group)


class ListDeviceGroupsUseCase:
    """Use case for listing device groups a page at a time."""

    def __init__(self, device_management: IDeviceManagement) -> None:
        self._device_management = device_management

    async def execute(
        self,
        include_deleted: bool = False,
        page: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> SearchResultsDTO[DeviceGroupDTO]:
        criteria = SearchCriteria(page_number=page, page_size=page_size)
        results = await self._device_management.list_device_groups(
            include_deleted, criteria
        )
        items = [DeviceGroupDTO.from_domain(group) for group in results.results]
        logger.debug(
            "device_groups.listed",
            page=criteria.page_number,
            page_size=criteria.page_size,
            returned=len(items),
            total=results.num_results,
        )
        return SearchResultsDTO[DeviceGroupDTO](
            items=items, total_count=results.num_results
        )


class ListDeviceGroupElementsUseCase:
    """Use case for listing the elements of a device group."""

    def __init__(
        self,
        device_management: IDeviceManagement,
        asset_module_manager: IAssetModuleManager,
    ) -> None:
        self._device_management = device_management
        self._asset_module_manager = asset_module_manager

    async def execute(
        self,
        token: str,
        include_details: bool = False,
        page: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> SearchResultsDTO[DeviceGroupElementDTO]:
        """
        List elements of a group, optionally expanded with device details.

        Args:
            token: Unique token that identifies the group
            include_details: Attach the referenced device (with its asset) or
                nested group to every element
            page: Page number, first page is 1
            page_size: Maximum elements per page, 0 for all

        Returns:
            SearchResultsDTO: Converted elements and the total element count
        """
        marshaller = DeviceGroupElementMarshaller(
            self._device_management,
            self._asset_module_manager,
            include_details=include_details,
        )
        criteria = SearchCriteria(page_number=page, page_size=page_size)
        results = await self._device_management.list_device_group_elements(
            token, criteria
        )
        items = [await marshaller.convert(element) for element in results.results]
        logger.debug(
            "device_groups.elements.listed",
            token=token,
            include_details=include_details,
            returned=len(items),
            total=results.num_results,
        )
        return SearchResultsDTO[DeviceGroupElementDTO](
            items=items, total_count=results.num_results
        )
