"""Domain entities for devices and the assets they represent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class AssetType(str, Enum):
    DEVICE = "Device"
    HARDWARE = "Hardware"
    PERSON = "Person"
    LOCATION = "Location"


@dataclass(slots=True)
class Device:
    """A registered device, addressed by its hardware id."""

    hardware_id: str
    specification_token: Optional[str] = None
    site_token: Optional[str] = None
    asset_module_id: Optional[str] = None
    asset_id: Optional[str] = None
    comments: str = ""
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Asset:
    """Asset record supplied by an asset module."""

    id: str
    name: str
    asset_module_id: str
    type: AssetType = AssetType.DEVICE
    image_url: Optional[str] = None
    properties: Dict[str, str] = field(default_factory=dict)
