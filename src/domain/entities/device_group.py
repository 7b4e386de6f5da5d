"""
Device group domain entities.

A device group is a named collection whose elements reference either a
device (by hardware id) or another device group (by token).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional


class DeviceGroupElementType(str, Enum):
    """Kind of entity a group element points to."""

    DEVICE = "Device"
    GROUP = "Group"


@dataclass(slots=True)
class DeviceGroup:
    """A named collection of devices managed as a unit."""

    token: str
    name: str
    description: str = ""
    roles: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)
    created_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_by: Optional[str] = None
    updated_date: Optional[datetime] = None
    updated_by: Optional[str] = None
    deleted: bool = False


@dataclass(slots=True)
class DeviceGroupElement:
    """Membership entry linking a device or nested group to a group."""

    group_token: str
    index: int
    type: DeviceGroupElementType
    element_id: str
    roles: List[str] = field(default_factory=list)


@dataclass(slots=True)
class DeviceGroupCreateRequest:
    """Attributes requested when creating or updating a device group."""

    name: Optional[str] = None
    token: Optional[str] = None
    description: str = ""
    roles: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class DeviceGroupElementCreateRequest:
    """Element to append to a device group."""

    type: DeviceGroupElementType
    element_id: str
    roles: List[str] = field(default_factory=list)
