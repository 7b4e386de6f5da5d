"""
Device Group DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for device groups and
their elements. Domain objects are always copied into these models
before leaving the application layer.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from src.domain.entities.device_group import DeviceGroup, DeviceGroupElementType

from .base import CamelModel


class DeviceGroupCreateDTO(CamelModel):
    """Request body for creating or updating a device group."""

    token: Optional[str] = Field(
        default=None,
        description="Unique token; generated by the backend when omitted",
    )
    name: Optional[str] = Field(
        default=None, description="Group name; the backend rejects a missing name"
    )
    description: str = Field(default="", description="Group description")
    roles: List[str] = Field(default_factory=list, description="Group roles")
    metadata: Dict[str, str] = Field(
        default_factory=dict, description="Free-form metadata"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "token": "building-7-sensors",
                "name": "Building 7 sensors",
                "description": "Temperature sensors on every floor",
                "roles": ["monitoring"],
                "metadata": {"site": "b7"},
            }
        }
    }


class DeviceGroupDTO(CamelModel):
    """Wire copy of a device group."""

    token: str = Field(description="Unique token that identifies the group")
    name: str = Field(description="Group name")
    description: str = Field(default="", description="Group description")
    roles: List[str] = Field(default_factory=list, description="Group roles")
    metadata: Dict[str, str] = Field(
        default_factory=dict, description="Free-form metadata"
    )
    created_date: datetime = Field(description="Creation timestamp")
    created_by: Optional[str] = Field(default=None, description="Creator")
    updated_date: Optional[datetime] = Field(
        default=None, description="Last update timestamp"
    )
    updated_by: Optional[str] = Field(default=None, description="Last updater")
    deleted: bool = Field(default=False, description="Soft-deleted flag")

    @classmethod
    def from_domain(cls, group: DeviceGroup) -> "DeviceGroupDTO":
        return cls(
            token=group.token,
            name=group.name,
            description=group.description,
            roles=list(group.roles),
            metadata=dict(group.metadata),
            created_date=group.created_date,
            created_by=group.created_by,
            updated_date=group.updated_date,
            updated_by=group.updated_by,
            deleted=group.deleted,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "token": "building-7-sensors",
                "name": "Building 7 sensors",
                "description": "Temperature sensors on every floor",
                "roles": ["monitoring"],
                "metadata": {"site": "b7"},
                "createdDate": "2024-09-09T12:00:00Z",
                "createdBy": "admin",
                "updatedDate": None,
                "updatedBy": None,
                "deleted": False,
            }
        }
    }


class DeviceDTO(CamelModel):
    """Device details attached to a group element, with its asset."""

    hardware_id: str = Field(description="Hardware id of the device")
    specification_token: Optional[str] = Field(
        default=None, description="Device specification token"
    )
    site_token: Optional[str] = Field(default=None, description="Site token")
    comments: str = Field(default="", description="Device comments")
    metadata: Dict[str, str] = Field(default_factory=dict)
    asset_module_id: Optional[str] = Field(default=None)
    asset_id: Optional[str] = Field(default=None)
    asset_name: Optional[str] = Field(
        default=None, description="Name of the asset the device represents"
    )
    asset_image_url: Optional[str] = Field(
        default=None, description="Image of the asset the device represents"
    )


class DeviceGroupElementDTO(CamelModel):
    """Wire copy of a device group element."""

    group_token: str = Field(description="Token of the owning group")
    index: int = Field(description="Position of the element in the group")
    type: DeviceGroupElementType = Field(description="Element kind")
    element_id: str = Field(
        description="Hardware id for devices, token for nested groups"
    )
    roles: List[str] = Field(default_factory=list, description="Element roles")
    device: Optional[DeviceDTO] = Field(
        default=None, description="Device details, when requested"
    )
    device_group: Optional[DeviceGroupDTO] = Field(
        default=None, description="Nested group details, when requested"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "groupToken": "building-7-sensors",
                "index": 0,
                "type": "Device",
                "elementId": "esp32-b7-001",
                "roles": [],
                "device": {
                    "hardwareId": "esp32-b7-001",
                    "specificationToken": "esp32-temp",
                    "siteToken": "b7",
                    "comments": "",
                    "metadata": {},
                    "assetModuleId": "devices",
                    "assetId": "esp32",
                    "assetName": "ESP32 temperature node",
                    "assetImageUrl": None,
                },
                "deviceGroup": None,
            }
        }
    }

