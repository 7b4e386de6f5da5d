"""
Device Management Port - Domain Layer

This module defines the interface of the device management backend.
Every device group operation exposed over HTTP is delegated to an
implementation of this interface.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from src.domain.entities.device import Device
from src.domain.entities.device_group import (
    DeviceGroup,
    DeviceGroupCreateRequest,
    DeviceGroupElement,
    DeviceGroupElementCreateRequest,
)
from src.domain.entities.search import SearchCriteria, SearchResults


class IDeviceManagement(ABC):
    """Interface for the device management backend."""

    @abstractmethod
    async def create_device_group(
        self, request: DeviceGroupCreateRequest
    ) -> DeviceGroup:
        """
        Create a device group.

        Raises:
            DeviceManagementError: If the request is rejected, for instance
                because the requested token is already in use
        """
        pass

    @abstractmethod
    async def get_device_group(self, token: str) -> Optional[DeviceGroup]:
        """Return the group identified by ``token``, or None when unknown."""
        pass

    @abstractmethod
    async def update_device_group(
        self, token: str, request: DeviceGroupCreateRequest
    ) -> DeviceGroup:
        """
        Update an existing device group.

        Raises:
            DeviceManagementError: If the token is unknown or the request is invalid
        """
        pass

    @abstractmethod
    async def delete_device_group(self, token: str, force: bool) -> DeviceGroup:
        """
        Delete a device group.

        Args:
            token: Token of the group to delete
            force: Delete permanently instead of flagging the group as deleted

        Returns:
            DeviceGroup: The group as it was when deleted
        """
        pass

    @abstractmethod
    async def list_device_groups(
        self, include_deleted: bool, criteria: SearchCriteria
    ) -> SearchResults[DeviceGroup]:
        """List device groups, one page at a time."""
        pass

    @abstractmethod
    async def list_device_group_elements(
        self, token: str, criteria: SearchCriteria
    ) -> SearchResults[DeviceGroupElement]:
        """List the elements of a device group, one page at a time."""
        pass

    @abstractmethod
    async def add_device_group_elements(
        self, token: str, elements: List[DeviceGroupElementCreateRequest]
    ) -> List[DeviceGroupElement]:
        """Append elements to a device group."""
        pass

    @abstractmethod
    async def get_device_by_hardware_id(self, hardware_id: str) -> Optional[Device]:
        """Return the device with ``hardware_id``, or None when unknown."""
        pass

    @abstractmethod
    async def ping(self) -> Dict[str, int]:
        """Ping the backend and return its entity counters."""
        pass
