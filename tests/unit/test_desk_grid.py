"""Unit tests for DeskGridLayoutEngine."""

import pytest

from classrooms.domain import (
    DeskGridLayoutEngine,
    GridSpec,
    LayoutWarning,
    RoomSpec,
)


@pytest.fixture
def engine() -> DeskGridLayoutEngine:
    return DeskGridLayoutEngine()


class TestGenerate:
    """Tests for desk grid generation."""

    def test_desk_count_and_order(
        self, engine: DeskGridLayoutEngine, room: RoomSpec, grid: GridSpec
    ) -> None:
        desks = engine.generate(room, grid)
        assert [d.desk_id for d in desks] == [
            "Desk_0_0",
            "Desk_0_1",
            "Desk_0_2",
            "Desk_1_0",
            "Desk_1_1",
            "Desk_1_2",
        ]

    def test_positions_centered_with_aisle(
        self, engine: DeskGridLayoutEngine, room: RoomSpec, grid: GridSpec
    ) -> None:
        desks = {d.desk_id: d for d in engine.generate(room, grid)}

        assert desks["Desk_0_0"].position.x == pytest.approx(-2.0)
        assert desks["Desk_0_0"].position.z == pytest.approx(-2.0)
        assert desks["Desk_0_2"].position.x == pytest.approx(2.0)
        assert desks["Desk_1_1"].position.x == pytest.approx(0.0)
        assert desks["Desk_1_1"].position.z == pytest.approx(2.0)

    def test_rows_separated_by_spacing_plus_aisle(
        self, engine: DeskGridLayoutEngine, room: RoomSpec
    ) -> None:
        grid = GridSpec(occupant_count=4, spacing_z=2.0, aisle_width=1.0)
        desks = engine.generate(room, grid)
        assert desks[2].position.z - desks[0].position.z == pytest.approx(3.0)

    def test_desks_on_floor(
        self, engine: DeskGridLayoutEngine, room: RoomSpec, grid: GridSpec
    ) -> None:
        assert all(d.position.y == 0.0 for d in engine.generate(room, grid))

    def test_deterministic(
        self, engine: DeskGridLayoutEngine, room: RoomSpec, grid: GridSpec
    ) -> None:
        assert engine.generate(room, grid) == engine.generate(room, grid)

    def test_out_of_bounds_desks_reported_not_moved(
        self, engine: DeskGridLayoutEngine, room: RoomSpec
    ) -> None:
        grid = GridSpec(occupant_count=10, spacing_x=5.0)
        warnings: list[LayoutWarning] = []

        desks = engine.generate(room, grid, warnings)

        assert len(desks) == 10
        assert {w.subject for w in warnings} == {
            "Desk_0_0",
            "Desk_0_4",
            "Desk_1_0",
            "Desk_1_4",
        }
        assert desks[0].position.x == pytest.approx(-10.0)


    @pytest.mark.parametrize("occupants", [4, 6, 8, 10])
    def test_two_rows_symmetric_about_center(
        self, engine: DeskGridLayoutEngine, room: RoomSpec, occupants: int
    ) -> None:
        desks = engine.generate(room, GridSpec(occupant_count=occupants))

        assert len(desks) == occupants
        assert {d.row for d in desks} == {0, 1}
        assert {d.column for d in desks} == set(range(occupants // 2))
        for row in (0, 1):
            xs = sorted(d.position.x for d in desks if d.row == row)
            assert xs == pytest.approx([-x for x in reversed(xs)])


class TestGridBounds:
    """Tests for the grid Z range query."""

    def test_bounds_include_aisle(
        self, engine: DeskGridLayoutEngine, room: RoomSpec, grid: GridSpec
    ) -> None:
        front_z, back_z = engine.grid_bounds(room, grid)
        assert front_z == pytest.approx(-2.0)
        assert back_z == pytest.approx(2.0)

    def test_bounds_match_generated_rows(
        self, engine: DeskGridLayoutEngine, room: RoomSpec
    ) -> None:
        grid = GridSpec(occupant_count=4, spacing_z=3.0, aisle_width=2.0)
        desks = engine.generate(room, grid)
        front_z, back_z = engine.grid_bounds(room, grid)
        assert front_z == pytest.approx(desks[0].position.z)
        assert back_z == pytest.approx(desks[-1].position.z)
        assert front_z <= back_z
