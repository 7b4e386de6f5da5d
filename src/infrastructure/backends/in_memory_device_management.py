"""
In-Memory Device Management - Infrastructure Layer

This module implements the IDeviceManagement interface with plain
dictionaries. It backs local development and end-to-end tests; nothing
is persisted across restarts.
"""

import asyncio
import copy
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import uuid4

from src.domain.entities.device import Device
from src.domain.entities.device_group import (
    DeviceGroup,
    DeviceGroupCreateRequest,
    DeviceGroupElement,
    DeviceGroupElementCreateRequest,
)
from src.domain.entities.errors import (
    DeviceGroupNotFoundError,
    DeviceManagementError,
    DuplicateDeviceGroupError,
    ErrorCode,
)
from src.domain.entities.search import SearchCriteria, SearchResults
from src.domain.ports.device_management import IDeviceManagement
from src.shared import get_logger

logger = get_logger(__name__)


class InMemoryDeviceManagement(IDeviceManagement):
    """Dictionary-backed implementation of the device management backend."""

    def __init__(self, default_user: Optional[str] = None):
        """
        Initialize an empty backend.

        Args:
            default_user: Username recorded in created/updated stamps
        """
        self._default_user = default_user
        self._groups: Dict[str, DeviceGroup] = {}
        self._elements: Dict[str, List[DeviceGroupElement]] = {}
        self._devices: Dict[str, Device] = {}
        self._lock = asyncio.Lock()

    async def create_device_group(
        self, request: DeviceGroupCreateRequest
    ) -> DeviceGroup:
        self._validate_request(request)
        async with self._lock:
            token = request.token or uuid4().hex
            if token in self._groups:
                raise DuplicateDeviceGroupError(token)

            group = DeviceGroup(
                token=token,
                name=request.name,
                description=request.description,
                roles=list(request.roles),
                metadata=dict(request.metadata),
                created_date=datetime.now(timezone.utc),
                created_by=self._default_user,
            )
            self._groups[token] = group
            self._elements[token] = []
            logger.debug("memory.device_group.created", token=token)
            return copy.deepcopy(group)

    async def get_device_group(self, token: str) -> Optional[DeviceGroup]:
        group = self._groups.get(token)
        return copy.deepcopy(group) if group is not None else None

    async def update_device_group(
        self, token: str, request: DeviceGroupCreateRequest
    ) -> DeviceGroup:
        async with self._lock:
            group = self._require_group(token)
            self._validate_request(request)
            group.name = request.name
            group.description = request.description
            group.roles = list(request.roles)
            group.metadata = dict(request.metadata)
            group.updated_date = datetime.now(timezone.utc)
            group.updated_by = self._default_user
            logger.debug("memory.device_group.updated", token=token)
            return copy.deepcopy(group)

    async def delete_device_group(self, token: str, force: bool) -> DeviceGroup:
        async with self._lock:
            group = self._require_group(token)
            if force:
                del self._groups[token]
                self._elements.pop(token, None)
            else:
                group.deleted = True
                group.updated_date = datetime.now(timezone.utc)
                group.updated_by = self._default_user
            logger.debug("memory.device_group.deleted", token=token, force=force)
            return copy.deepcopy(group)

    async def list_device_groups(
        self, include_deleted: bool, criteria: SearchCriteria
    ) -> SearchResults[DeviceGroup]:
        matches = [
            group
            for group in self._groups.values()
            if include_deleted or not group.deleted
        ]
        return SearchResults(
            results=copy.deepcopy(criteria.apply(matches)),
            num_results=len(matches),
        )

    async def list_device_group_elements(
        self, token: str, criteria: SearchCriteria
    ) -> SearchResults[DeviceGroupElement]:
        self._require_group(token)
        elements = self._elements.get(token, [])
        return SearchResults(
            results=copy.deepcopy(criteria.apply(elements)),
            num_results=len(elements),
        )

    async def add_device_group_elements(
        self, token: str, elements: List[DeviceGroupElementCreateRequest]
    ) -> List[DeviceGroupElement]:
        async with self._lock:
            self._require_group(token)
            existing = self._elements.setdefault(token, [])
            added: List[DeviceGroupElement] = []
            for request in elements:
                element = DeviceGroupElement(
                    group_token=token,
                    index=len(existing),
                    type=request.type,
                    element_id=request.element_id,
                    roles=list(request.roles),
                )
                existing.append(element)
                added.append(element)
            return copy.deepcopy(added)

    async def get_device_by_hardware_id(self, hardware_id: str) -> Optional[Device]:
        device = self._devices.get(hardware_id)
        return copy.deepcopy(device) if device is not None else None

    async def add_device(self, device: Device) -> Device:
        """Register a device so group elements can resolve it."""
        async with self._lock:
            if device.hardware_id in self._devices:
                raise DeviceManagementError(
                    ErrorCode.INVALID_HARDWARE_ID,
                    message=f"Hardware id {device.hardware_id} is already in use",
                    details={"hardware_id": device.hardware_id},
                )
            self._devices[device.hardware_id] = copy.deepcopy(device)
            return copy.deepcopy(device)

    async def ping(self) -> Dict[str, int]:
        return {
            "device_groups": len(self._groups),
            "devices": len(self._devices),
        }

    def _require_group(self, token: str) -> DeviceGroup:
        group = self._groups.get(token)
        if group is None:
            raise DeviceGroupNotFoundError(token)
        return group

    @staticmethod
    def _validate_request(request: DeviceGroupCreateRequest) -> None:
        if not request.name or not request.name.strip():
            raise DeviceManagementError(
                ErrorCode.INVALID_REQUEST,
                message="Device group name is required",
            )
