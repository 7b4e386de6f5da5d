"""
Device Group Element Marshaller - Application Layer

Converts backend group elements into wire DTOs, optionally expanding
each element with the device (and its asset) or nested group it points
to.
"""

from typing import Optional

from src.application.dtos.device_group_dto import (
    DeviceDTO,
    DeviceGroupDTO,
    DeviceGroupElementDTO,
)
from src.domain.entities.device import Device
from src.domain.entities.device_group import DeviceGroupElement, DeviceGroupElementType
from src.domain.ports.asset_module_manager import IAssetModuleManager
from src.domain.ports.device_management import IDeviceManagement
from src.shared import get_logger

logger = get_logger(__name__)


class DeviceGroupElementMarshaller:
    """Per-request helper that copies elements, with optional details."""

    def __init__(
        self,
        device_management: IDeviceManagement,
        asset_module_manager: IAssetModuleManager,
        include_details: bool = False,
    ) -> None:
        self._device_management = device_management
        self._asset_module_manager = asset_module_manager
        self.include_details = include_details

    async def convert(self, element: DeviceGroupElement) -> DeviceGroupElementDTO:
        result = DeviceGroupElementDTO(
            group_token=element.group_token,
            index=element.index,
            type=element.type,
            element_id=element.element_id,
            roles=list(element.roles),
        )
        if not self.include_details:
            return result

        if element.type == DeviceGroupElementType.DEVICE:
            result.device = await self._device_details(element)
        elif element.type == DeviceGroupElementType.GROUP:
            result.device_group = await self._group_details(element)
        return result

    async def _device_details(self, element: DeviceGroupElement) -> Optional[DeviceDTO]:
        device = await self._device_management.get_device_by_hardware_id(
            element.element_id
        )
        if device is None:
            logger.warning(
                "device_groups.elements.device_missing",
                group_token=element.group_token,
                hardware_id=element.element_id,
            )
            return None
        return await self._to_device_dto(device)

    async def _group_details(
        self, element: DeviceGroupElement
    ) -> Optional[DeviceGroupDTO]:
        group = await self._device_management.get_device_group(element.element_id)
        if group is None:
            logger.warning(
                "device_groups.elements.group_missing",
                group_token=element.group_token,
                nested_token=element.element_id,
            )
            return None
        return DeviceGroupDTO.from_domain(group)

    async def _to_device_dto(self, device: Device) -> DeviceDTO:
        dto = DeviceDTO(
            hardware_id=device.hardware_id,
            specification_token=device.specification_token,
            site_token=device.site_token,
            comments=device.comments,
            metadata=dict(device.metadata),
            asset_module_id=device.asset_module_id,
            asset_id=device.asset_id,
        )
        if not (device.asset_module_id and device.asset_id):
            return dto

        asset = await self._asset_module_manager.get_asset(
            device.asset_module_id, device.asset_id
        )
        if asset is None:
            logger.warning(
                "device_groups.elements.asset_missing",
                hardware_id=device.hardware_id,
                asset_module_id=device.asset_module_id,
                asset_id=device.asset_id,
            )
            return dto

        dto.asset_name = asset.name
        dto.asset_image_url = asset.image_url
        return dto
