"""Unit tests for AnchorPositionResolver."""

import pytest

from classrooms.domain import (
    AnchorPositionResolver,
    GridSpec,
    LayoutWarning,
    Position3D,
    RoomSpec,
)


@pytest.fixture
def resolver() -> AnchorPositionResolver:
    return AnchorPositionResolver()


class TestResolveDoor:
    """Tests for door resolution."""

    def test_default_on_back_wall(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        door = resolver.resolve_door(room, grid)
        assert door.x == pytest.approx(1.0)
        assert door.y == 0.0
        assert door.z == pytest.approx(4.0)

    def test_manual_door_used_verbatim(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        manual = Position3D(-3.0, 0.0, 4.0)
        assert resolver.resolve_door(room, grid, manual) == manual

    def test_out_of_bounds_door_rejected_entirely(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        warnings: list[LayoutWarning] = []
        door = resolver.resolve_door(room, grid, Position3D(2.0, 0.0, 9.0), warnings)
        # The in-range X is not kept; the whole default is used.
        assert door.x == pytest.approx(1.0)
        assert door.z == pytest.approx(4.0)
        assert len(warnings) == 1

    def test_zero_vector_means_not_set(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        door = resolver.resolve_door(room, grid, Position3D(0.0, 0.0, 0.0))
        assert door.x == pytest.approx(1.0)


class TestResolveBoard:
    """Tests for board resolution."""

    def test_default_board_offset_by_half_depth(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        board = resolver.resolve_board(room, grid)
        assert board.x == 0.0
        assert board.y == pytest.approx(1.5)
        assert board.z == pytest.approx(-3.95)

    def test_explicit_depth_takes_priority(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        board = resolver.resolve_board(
            room,
            grid,
            explicit_size=Position3D(4.0, 2.0, 0.2),
            detected_depth=0.4,
        )
        assert board.z == pytest.approx(-4.0)

    def test_detected_depth_when_size_has_no_depth(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        board = resolver.resolve_board(
            room,
            grid,
            explicit_size=Position3D(4.0, 2.0, 0.0),
            detected_depth=0.04,
        )
        assert board.z == pytest.approx(-3.92)

    def test_manual_board_too_close_is_corrected(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        warnings: list[LayoutWarning] = []
        board = resolver.resolve_board(
            room, grid, manual=Position3D(0.5, 2.0, -2.5), warnings=warnings
        )
        assert board.z == pytest.approx(-3.5)
        assert board.x == 0.5
        assert board.y == 2.0
        assert [w.subject for w in warnings] == ["board"]

    def test_board_kept_inside_front_wall(
        self, resolver: AnchorPositionResolver
    ) -> None:
        room = RoomSpec(width=10.0, depth=5.0, height=3.0)
        grid = GridSpec(occupant_count=4)
        board = resolver.resolve_board(room, grid)
        assert board.z == pytest.approx(-2.4)
        assert board.z > room.front_wall_z


class TestResolveOutside:
    """Tests for outside point resolution."""

    def test_back_wall_door_opens_outward(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        outside = resolver.resolve_outside(room, grid)
        assert outside.x == pytest.approx(1.0)
        assert outside.z == pytest.approx(6.0)

    def test_front_wall_door_opens_toward_minus_z(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        outside = resolver.resolve_outside(room, grid, manual_door=Position3D(2.0, 0.0, -3.95))
        assert outside.z == pytest.approx(-5.95)

    def test_side_door_falls_back_to_plus_z(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        outside = resolver.resolve_outside(room, grid, door=Position3D(5.0, 0.0, 1.0))
        assert outside.z == pytest.approx(3.0)


class TestResolveAll:
    """Tests for resolving the full anchor set."""

    def test_resolve_consistent_with_individual_calls(
        self, resolver: AnchorPositionResolver, room: RoomSpec, grid: GridSpec
    ) -> None:
        anchors = resolver.resolve(room, grid)
        assert anchors.door == resolver.resolve_door(room, grid)
        assert anchors.board == resolver.resolve_board(room, grid)
        assert anchors.outside == resolver.resolve_outside(room, grid)
