from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from src.domain.entities.device_group import DeviceGroupElementType
from src.domain.entities.search import SearchCriteria
from src.infrastructure.backends import load_seed_file


def _write_seed(tmp_path, document) -> str:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


@pytest.mark.asyncio
async def test_load_seed_file_populates_backends(
    tmp_path, memory_device_management, memory_asset_module_manager
) -> None:
    path = _write_seed(
        tmp_path,
        {
            "assets": [
                {"id": "esp32", "name": "ESP32 node", "asset_module_id": "devices"}
            ],
            "devices": [
                {
                    "hardware_id": "esp32-001",
                    "asset_module_id": "devices",
                    "asset_id": "esp32",
                }
            ],
            "device_groups": [
                {"token": "floor-1", "name": "Floor 1"},
                {
                    "token": "building-7",
                    "name": "Building 7",
                    "roles": ["monitoring"],
                    "elements": [
                        {"type": "Device", "element_id": "esp32-001"},
                        {"type": "Group", "element_id": "floor-1", "roles": ["child"]},
                    ],
                },
            ],
        },
    )

    document = await load_seed_file(
        path, memory_device_management, memory_asset_module_manager
    )

    assert len(document.device_groups) == 2
    asset = await memory_asset_module_manager.get_asset("devices", "esp32")
    assert asset is not None and asset.name == "ESP32 node"
    device = await memory_device_management.get_device_by_hardware_id("esp32-001")
    assert device is not None and device.asset_id == "esp32"

    group = await memory_device_management.get_device_group("building-7")
    assert group is not None
    assert group.roles == ["monitoring"]
    assert group.created_by == "tester"

    elements = await memory_device_management.list_device_group_elements(
        "building-7", SearchCriteria(page_size=0)
    )
    assert [(e.index, e.type) for e in elements.results] == [
        (0, DeviceGroupElementType.DEVICE),
        (1, DeviceGroupElementType.GROUP),
    ]
    assert elements.results[1].roles == ["child"]


@pytest.mark.asyncio
async def test_load_empty_seed_file(
    tmp_path, memory_device_management, memory_asset_module_manager
) -> None:
    path = _write_seed(tmp_path, {})

    document = await load_seed_file(
        path, memory_device_management, memory_asset_module_manager
    )

    assert document.device_groups == []
    assert await memory_device_management.ping() == {
        "device_groups": 0,
        "devices": 0,
    }


@pytest.mark.asyncio
async def test_load_seed_file_rejects_invalid_document(
    tmp_path, memory_device_management, memory_asset_module_manager
) -> None:
    path = _write_seed(tmp_path, {"device_groups": [{"token": "no-name"}]})

    with pytest.raises(ValidationError):
        await load_seed_file(path, memory_device_management, memory_asset_module_manager)


@pytest.mark.asyncio
async def test_load_missing_seed_file_raises(
    tmp_path, memory_device_management, memory_asset_module_manager
) -> None:
    with pytest.raises(FileNotFoundError):
        await load_seed_file(
            str(tmp_path / "missing.json"),
            memory_device_management,
            memory_asset_module_manager,
        )
