from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from src.domain.entities.device import Asset, Device
from src.domain.entities.device_group import (
    DeviceGroup,
    DeviceGroupCreateRequest,
    DeviceGroupElement,
    DeviceGroupElementCreateRequest,
    DeviceGroupElementType,
)
from src.domain.entities.errors import DeviceGroupNotFoundError
from src.domain.entities.search import SearchCriteria, SearchResults
from src.domain.ports.asset_module_manager import IAssetModuleManager
from src.domain.ports.device_management import IDeviceManagement
from src.infrastructure.backends import (
    InMemoryAssetModuleManager,
    InMemoryDeviceManagement,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_group(token: str = "group-1", **overrides: Any) -> DeviceGroup:
    values: Dict[str, Any] = {
        "token": token,
        "name": f"Group {token}",
        "description": "Unit test group",
        "roles": ["monitoring"],
        "metadata": {"site": "b7"},
        "created_date": datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc),
        "created_by": "admin",
    }
    values.update(overrides)
    return DeviceGroup(**values)


class RecordingDeviceManagement(IDeviceManagement):
    """Stub backend that records every call and returns canned values."""

    def __init__(
        self,
        groups: Optional[List[DeviceGroup]] = None,
        elements: Optional[List[DeviceGroupElement]] = None,
        devices: Optional[List[Device]] = None,
        total: Optional[int] = None,
    ) -> None:
        self.groups = {group.token: group for group in groups or []}
        self.elements = list(elements or [])
        self.devices = {device.hardware_id: device for device in devices or []}
        self.total = total
        self.calls: List[tuple] = []

    async def create_device_group(
        self, request: DeviceGroupCreateRequest
    ) -> DeviceGroup:
        self.calls.append(("create", request))
        return make_group(
            request.token or "generated",
            name=request.name,
            description=request.description,
            roles=request.roles,
            metadata=request.metadata,
        )

    async def get_device_group(self, token: str) -> Optional[DeviceGroup]:
        self.calls.append(("get", token))
        return self.groups.get(token)

    async def update_device_group(
        self, token: str, request: DeviceGroupCreateRequest
    ) -> DeviceGroup:
        self.calls.append(("update", token, request))
        if token not in self.groups:
            raise DeviceGroupNotFoundError(token)
        return make_group(token, name=request.name, updated_by="admin")

    async def delete_device_group(self, token: str, force: bool) -> DeviceGroup:
        self.calls.append(("delete", token, force))
        if token not in self.groups:
            raise DeviceGroupNotFoundError(token)
        return make_group(token, deleted=not force)

    async def list_device_groups(
        self, include_deleted: bool, criteria: SearchCriteria
    ) -> SearchResults[DeviceGroup]:
        self.calls.append(("list", include_deleted, criteria))
        groups = list(self.groups.values())
        return SearchResults(
            results=criteria.apply(groups),
            num_results=self.total if self.total is not None else len(groups),
        )

    async def list_device_group_elements(
        self, token: str, criteria: SearchCriteria
    ) -> SearchResults[DeviceGroupElement]:
        self.calls.append(("list_elements", token, criteria))
        return SearchResults(
            results=criteria.apply(self.elements),
            num_results=len(self.elements),
        )

    async def add_device_group_elements(
        self, token: str, elements: List[DeviceGroupElementCreateRequest]
    ) -> List[DeviceGroupElement]:
        self.calls.append(("add_elements", token, elements))
        return []

    async def get_device_by_hardware_id(self, hardware_id: str) -> Optional[Device]:
        self.calls.append(("get_device", hardware_id))
        return self.devices.get(hardware_id)

    async def ping(self) -> Dict[str, int]:
        return {"device_groups": len(self.groups)}


class StaticAssetModuleManager(IAssetModuleManager):
    def __init__(self, assets: Optional[List[Asset]] = None) -> None:
        self.assets = {(a.asset_module_id, a.id): a for a in assets or []}
        self.lookups: List[tuple[str, str]] = []

    async def get_asset(self, asset_module_id: str, asset_id: str) -> Optional[Asset]:
        self.lookups.append((asset_module_id, asset_id))
        return self.assets.get((asset_module_id, asset_id))

    async def ping(self) -> Dict[str, int]:
        return {"assets": len(self.assets)}


@pytest.fixture()
def sample_group() -> DeviceGroup:
    return make_group("building-7")


@pytest.fixture()
def sample_asset() -> Asset:
    return Asset(
        id="esp32",
        name="ESP32 temperature node",
        asset_module_id="devices",
        image_url="https://assets.example.com/esp32.png",
    )


@pytest.fixture()
def sample_device() -> Device:
    return Device(
        hardware_id="esp32-001",
        specification_token="esp32-temp",
        site_token="b7",
        asset_module_id="devices",
        asset_id="esp32",
    )


@pytest.fixture()
def sample_elements() -> List[DeviceGroupElement]:
    return [
        DeviceGroupElement(
            group_token="building-7",
            index=0,
            type=DeviceGroupElementType.DEVICE,
            element_id="esp32-001",
        ),
        DeviceGroupElement(
            group_token="building-7",
            index=1,
            type=DeviceGroupElementType.GROUP,
            element_id="floor-1",
            roles=["child"],
        ),
    ]


@pytest.fixture()
def memory_device_management() -> InMemoryDeviceManagement:
    return InMemoryDeviceManagement(default_user="tester")


@pytest.fixture()
def memory_asset_module_manager() -> InMemoryAssetModuleManager:
    return InMemoryAssetModuleManager()
