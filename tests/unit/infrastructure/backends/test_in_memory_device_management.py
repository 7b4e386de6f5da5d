from __future__ import annotations

import pytest

from src.domain.entities.device import Device
from src.domain.entities.device_group import (
    DeviceGroupCreateRequest,
    DeviceGroupElementCreateRequest,
    DeviceGroupElementType,
)
from src.domain.entities.errors import (
    DeviceGroupNotFoundError,
    DeviceManagementError,
    DuplicateDeviceGroupError,
    ErrorCode,
)
from src.domain.entities.search import SearchCriteria
from src.infrastructure.backends import InMemoryDeviceManagement


async def _create(
    backend: InMemoryDeviceManagement, token: str | None = None, name: str = "Group"
):
    return await backend.create_device_group(
        DeviceGroupCreateRequest(token=token, name=name)
    )


@pytest.mark.asyncio
async def test_create_uses_requested_token_and_stamps_creator(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    group = await memory_device_management.create_device_group(
        DeviceGroupCreateRequest(
            token="floor-1",
            name="Floor 1",
            roles=["monitoring"],
            metadata={"floor": "1"},
        )
    )

    assert group.token == "floor-1"
    assert group.created_by == "tester"
    assert group.roles == ["monitoring"]
    assert group.deleted is False


@pytest.mark.asyncio
async def test_create_generates_token_when_missing(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    group = await _create(memory_device_management)
    assert group.token
    assert await memory_device_management.get_device_group(group.token) is not None


@pytest.mark.asyncio
async def test_create_rejects_duplicate_token(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    await _create(memory_device_management, "dup")
    with pytest.raises(DuplicateDeviceGroupError):
        await _create(memory_device_management, "dup")


@pytest.mark.asyncio
async def test_create_rejects_blank_name(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    with pytest.raises(DeviceManagementError) as exc:
        await _create(memory_device_management, "blank", name="  ")
    assert exc.value.code is ErrorCode.INVALID_REQUEST


@pytest.mark.asyncio
async def test_returned_groups_are_copies(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    group = await _create(memory_device_management, "copy")
    group.name = "mutated"
    group.roles.append("intruder")

    stored = await memory_device_management.get_device_group("copy")
    assert stored is not None
    assert stored.name == "Group"
    assert stored.roles == []


@pytest.mark.asyncio
async def test_get_unknown_group_returns_none(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    assert await memory_device_management.get_device_group("ABC123") is None


@pytest.mark.asyncio
async def test_update_replaces_attributes(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    await _create(memory_device_management, "upd")

    updated = await memory_device_management.update_device_group(
        "upd",
        DeviceGroupCreateRequest(name="Renamed", description="new", roles=["x"]),
    )

    assert updated.name == "Renamed"
    assert updated.description == "new"
    assert updated.updated_by == "tester"
    assert updated.updated_date is not None


@pytest.mark.asyncio
async def test_update_unknown_group_raises(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    with pytest.raises(DeviceGroupNotFoundError):
        await memory_device_management.update_device_group(
            "missing", DeviceGroupCreateRequest(name="x")
        )


@pytest.mark.asyncio
async def test_soft_delete_keeps_group_flagged(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    await _create(memory_device_management, "soft")

    deleted = await memory_device_management.delete_device_group("soft", force=False)

    assert deleted.deleted is True
    stored = await memory_device_management.get_device_group("soft")
    assert stored is not None and stored.deleted is True


@pytest.mark.asyncio
async def test_forced_delete_removes_group_and_elements(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    await _create(memory_device_management, "XYZ")
    await memory_device_management.add_device_group_elements(
        "XYZ",
        [DeviceGroupElementCreateRequest(DeviceGroupElementType.DEVICE, "hw-1")],
    )

    deleted = await memory_device_management.delete_device_group("XYZ", force=True)

    assert deleted.token == "XYZ"
    assert await memory_device_management.get_device_group("XYZ") is None
    with pytest.raises(DeviceGroupNotFoundError):
        await memory_device_management.list_device_group_elements(
            "XYZ", SearchCriteria()
        )


@pytest.mark.asyncio
async def test_delete_unknown_group_raises(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    with pytest.raises(DeviceGroupNotFoundError):
        await memory_device_management.delete_device_group("missing", force=True)


@pytest.mark.asyncio
async def test_list_pages_in_creation_order(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    for number in range(1, 26):
        await _create(memory_device_management, f"g{number:02d}")

    results = await memory_device_management.list_device_groups(
        False, SearchCriteria(page_number=2, page_size=10)
    )

    assert [group.token for group in results.results] == [
        f"g{number:02d}" for number in range(11, 21)
    ]
    assert results.num_results == 25


@pytest.mark.asyncio
async def test_list_filters_deleted_unless_requested(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    await _create(memory_device_management, "live")
    await _create(memory_device_management, "gone")
    await memory_device_management.delete_device_group("gone", force=False)

    active = await memory_device_management.list_device_groups(False, SearchCriteria())
    everything = await memory_device_management.list_device_groups(
        True, SearchCriteria()
    )

    assert [group.token for group in active.results] == ["live"]
    assert active.num_results == 1
    assert everything.num_results == 2


@pytest.mark.asyncio
async def test_elements_are_indexed_and_paged(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    await _create(memory_device_management, "grp")
    added = await memory_device_management.add_device_group_elements(
        "grp",
        [
            DeviceGroupElementCreateRequest(DeviceGroupElementType.DEVICE, f"hw-{n}")
            for n in range(5)
        ],
    )
    assert [element.index for element in added] == [0, 1, 2, 3, 4]

    page = await memory_device_management.list_device_group_elements(
        "grp", SearchCriteria(page_number=2, page_size=2)
    )

    assert [element.element_id for element in page.results] == ["hw-2", "hw-3"]
    assert page.num_results == 5


@pytest.mark.asyncio
async def test_list_elements_of_unknown_group_raises(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    with pytest.raises(DeviceGroupNotFoundError):
        await memory_device_management.list_device_group_elements(
            "missing", SearchCriteria()
        )


@pytest.mark.asyncio
async def test_devices_are_registered_once(
    memory_device_management: InMemoryDeviceManagement, sample_device: Device
) -> None:
    await memory_device_management.add_device(sample_device)

    found = await memory_device_management.get_device_by_hardware_id("esp32-001")
    assert found == sample_device

    with pytest.raises(DeviceManagementError) as exc:
        await memory_device_management.add_device(sample_device)
    assert exc.value.code is ErrorCode.INVALID_HARDWARE_ID


@pytest.mark.asyncio
async def test_ping_reports_counts(
    memory_device_management: InMemoryDeviceManagement, sample_device: Device
) -> None:
    await _create(memory_device_management, "one")
    await memory_device_management.add_device(sample_device)

    assert await memory_device_management.ping() == {
        "device_groups": 1,
        "devices": 1,
    }


@pytest.mark.asyncio
async def test_update_without_name_is_rejected(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    await _create(memory_device_management, "keep", name="Original")

    with pytest.raises(DeviceManagementError) as exc:
        await memory_device_management.update_device_group(
            "keep", DeviceGroupCreateRequest(description="only")
        )

    assert exc.value.code is ErrorCode.INVALID_REQUEST
    stored = await memory_device_management.get_device_group("keep")
    assert stored is not None and stored.name == "Original"


@pytest.mark.asyncio
async def test_update_unknown_group_is_reported_before_validation(
    memory_device_management: InMemoryDeviceManagement,
) -> None:
    with pytest.raises(DeviceGroupNotFoundError):
        await memory_device_management.update_device_group(
            "missing", DeviceGroupCreateRequest()
        )
