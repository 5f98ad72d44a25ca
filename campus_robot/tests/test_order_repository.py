import json

import pytest

from campus_robot.errors import MissingEndpoint, OrderNotFound, PlanUnresolved
from campus_robot.models import Command, Coordinate, OrderStatus
from campus_robot.repositories import CAMPUS_LOCATIONS, LocationRepository, OrderRepository
from campus_robot.services.path_planner import PathPlanner


def make_repo(changes=None):
    on_change = (lambda: changes.append(1)) if changes is not None else None
    return OrderRepository(
        LocationRepository(CAMPUS_LOCATIONS),
        PathPlanner(forward_ms=800, turn_ms=500),
        on_change=on_change,
    )


@pytest.mark.asyncio
async def test_create_assigns_monotonic_ids_and_plans():
    repo = make_repo()

    first = await repo.create("Library", "Student Center")
    second = await repo.create("Dining Hall", "Parking Lot")

    assert (first.id, second.id) == ("1", "2")
    assert first.status == OrderStatus.QUEUED
    assert first.distance == 20
    assert first.estimated_time == 17000
    assert first.plan[0].command == Command.LEFT
    assert [o.id for o in repo.list()] == ["1", "2"]


@pytest.mark.asyncio
async def test_create_requires_both_endpoints():
    repo = make_repo()

    for from_location, to_location in [("", "Library"), ("Library", None), (None, None)]:
        with pytest.raises(MissingEndpoint):
            await repo.create(from_location, to_location)
    assert repo.list() == []


@pytest.mark.asyncio
async def test_unknown_location_is_recorded_with_empty_plan():
    repo = make_repo()

    order = await repo.create("Library", "Moon Base")

    assert order.status == OrderStatus.QUEUED
    assert order.plan == []
    assert (order.distance, order.estimated_time) == (0, 0)


@pytest.mark.asyncio
async def test_set_status_and_missing_order():
    changes = []
    repo = make_repo(changes)
    order = await repo.create("Library", "Admin Building")

    updated = await repo.set_status(order.id, OrderStatus.FAILED)
    assert updated.status == OrderStatus.FAILED
    assert repo.get(order.id).status == OrderStatus.FAILED
    assert len(changes) == 2

    with pytest.raises(OrderNotFound):
        await repo.set_status("42", OrderStatus.COMPLETED)
    with pytest.raises(OrderNotFound):
        repo.get("42")


@pytest.mark.asyncio
async def test_reads_are_copies():
    repo = make_repo()
    order = await repo.create("Library", "Lab Building")

    copy = repo.get(order.id)
    copy.status = OrderStatus.COMPLETED
    copy.plan.clear()

    stored = repo.get(order.id)
    assert stored.status == OrderStatus.QUEUED
    assert len(stored.plan) == order.distance + 1


def test_location_lookup():
    locations = LocationRepository(CAMPUS_LOCATIONS)

    assert locations.resolve("Library") == Coordinate(x=10, y=15)
    assert len(locations.all()) == 11
    with pytest.raises(PlanUnresolved):
        locations.resolve("Nowhere")


def test_locations_from_file(tmp_path, monkeypatch):
    path = tmp_path / "locations.json"
    path.write_text(json.dumps({"Gate": {"x": 1, "y": 2}, "Dock": {"x": -3, "y": 0}}))
    monkeypatch.setenv("CAMPUS_LOCATIONS_PATH", str(path))

    locations = LocationRepository()
    assert set(locations.all()) == {"Gate", "Dock"}
    assert locations.resolve("Dock") == Coordinate(x=-3, y=0)


def test_invalid_locations_file_falls_back(tmp_path, monkeypatch):
    path = tmp_path / "locations.json"
    path.write_text("{not json")
    monkeypatch.setenv("CAMPUS_LOCATIONS_PATH", str(path))

    assert "Library" in LocationRepository().all()

    monkeypatch.setenv("CAMPUS_LOCATIONS_PATH", str(tmp_path / "missing.json"))
    assert "Library" in LocationRepository().all()
