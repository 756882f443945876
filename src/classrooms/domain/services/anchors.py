"""Door, board, and outside anchor resolution.

Anchors are computed once per layout and shared read-only by route
generation. Manual overrides are validated against the room: the door
uses the hard boundary policy and the board the clearance policy.
"""

from __future__ import annotations

import logging

from ..value_objects import AnchorSet, GridSpec, LayoutWarning, Position3D, RoomSpec
from .boundary import BoundaryValidator
from .desk_grid import DeskGridLayoutEngine

logger = logging.getLogger(__name__)

__all__ = [
    "AnchorPositionResolver",
    "DEFAULT_BOARD_DEPTH",
    "DEFAULT_BOARD_HEIGHT",
    "DOOR_WIDTH_RATIO",
    "OUTSIDE_OFFSET",
]

# Door sits this fraction of the room width from the left edge.
DOOR_WIDTH_RATIO: float = 0.6

# Default board center height above the floor.
DEFAULT_BOARD_HEIGHT: float = 1.5

# Board depth used when no size is provided or detected.
DEFAULT_BOARD_DEPTH: float = 0.1

# Smallest depth treated as a real measurement.
_MIN_MEASURED_DEPTH: float = 0.01

# Distance from the door to the outside gathering point.
OUTSIDE_OFFSET: float = 2.0


def _provided(position: Position3D | None) -> bool:
    # A zero vector is how importers express "not set".
    return position is not None and not position.is_zero


class AnchorPositionResolver:
    """Resolves the classroom anchor points.

    Args:
        grid_engine: Engine used for the desk grid bounds query.
    """

    def __init__(self, grid_engine: DeskGridLayoutEngine | None = None) -> None:
        self.grid_engine = grid_engine or DeskGridLayoutEngine()

    def resolve_door(
        self,
        room: RoomSpec,
        grid: GridSpec,
        manual: Position3D | None = None,
        warnings: list[LayoutWarning] | None = None,
    ) -> Position3D:
        """Resolve the door position.

        A manual position inside the room is used verbatim. Otherwise the
        door defaults to the back wall at 60% of the width from the left
        edge.
        """
        validator = BoundaryValidator(room)
        if _provided(manual):
            assert manual is not None
            if validator.accept_manual_door(manual, warnings):
                logger.info(f"Using manual door position {manual}")
                return manual

        door_x = -room.half_width + room.width * DOOR_WIDTH_RATIO
        door = Position3D(door_x, 0.0, room.back_wall_z)
        logger.info(f"Calculated door position {door} (classroom width={room.width})")
        return door

    def resolve_board(
        self,
        room: RoomSpec,
        grid: GridSpec,
        manual: Position3D | None = None,
        explicit_size: Position3D | None = None,
        detected_depth: float | None = None,
        warnings: list[LayoutWarning] | None = None,
    ) -> Position3D:
        """Resolve the board center position.

        The manual or default position is the line where the board's front
        face should sit. The center is shifted toward the front wall by
        half the board depth, then the clearance policy is applied.

        Args:
            room: Room dimensions.
            grid: Desk grid parameters, used for the clearance check.
            manual: Target surface line, or None for the front wall center.
            explicit_size: Board size; only its Z (depth) is used.
            detected_depth: Depth measured from the board asset, if known.
            warnings: Optional collector for correction warnings.
        """
        if _provided(manual):
            assert manual is not None
            target = manual
            logger.info(f"Using manual board position {target}")
        else:
            target = Position3D(0.0, DEFAULT_BOARD_HEIGHT, room.front_wall_z + 0.1)
            logger.info(f"Calculated board position {target} (classroom depth={room.depth})")

        depth, source = self._board_depth(explicit_size, detected_depth)
        # The board faces into the room, so its front face is at center.z + depth / 2.
        centered = target.offset(dz=-depth / 2)
        logger.debug(
            f"Board offset {-depth / 2:.3f} in Z (depth {depth} from {source}): "
            f"{target} -> {centered}"
        )

        front_z, _ = self.grid_engine.grid_bounds(room, grid)
        board = BoundaryValidator(room).enforce_board_clearance(centered, front_z, warnings)
        logger.info(f"Final board position {board}")
        return board

    def resolve_outside(
        self,
        room: RoomSpec,
        grid: GridSpec,
        manual_door: Position3D | None = None,
        door: Position3D | None = None,
    ) -> Position3D:
        """Resolve the point outside the door where escaping occupants gather.

        The offset points away from the wall the door is on. A door on
        neither the back nor the front wall is assumed to open toward +Z.

        Args:
            room: Room dimensions.
            grid: Desk grid parameters.
            manual_door: Manual door override, used when ``door`` is None.
            door: Already-resolved door position.
        """
        if door is None:
            door = self.resolve_door(room, grid, manual_door)

        validator = BoundaryValidator(room)
        if validator.is_on_back_wall(door.z):
            outside = door.offset(dz=OUTSIDE_OFFSET)
            logger.info(f"Door at back wall, outside position {outside}")
        elif validator.is_on_front_wall(door.z):
            outside = door.offset(dz=-OUTSIDE_OFFSET)
            logger.info(f"Door at front wall, outside position {outside}")
        else:
            outside = door.offset(dz=OUTSIDE_OFFSET)
            logger.warning(f"Door at custom position {door}, assuming +Z outward: {outside}")
        return outside

    def resolve(
        self,
        room: RoomSpec,
        grid: GridSpec,
        manual_door: Position3D | None = None,
        manual_board: Position3D | None = None,
        board_size: Position3D | None = None,
        detected_board_depth: float | None = None,
        warnings: list[LayoutWarning] | None = None,
    ) -> AnchorSet:
        """Resolve all anchors, computing the door once."""
        door = self.resolve_door(room, grid, manual_door, warnings)
        board = self.resolve_board(
            room,
            grid,
            manual_board,
            explicit_size=board_size,
            detected_depth=detected_board_depth,
            warnings=warnings,
        )
        outside = self.resolve_outside(room, grid, door=door)
        return AnchorSet(door=door, board=board, outside=outside)

    def _board_depth(
        self,
        explicit_size: Position3D | None,
        detected_depth: float | None,
    ) -> tuple[float, str]:
        if explicit_size is not None and explicit_size.z > _MIN_MEASURED_DEPTH:
            return explicit_size.z, "explicit size"
        if detected_depth is not None and detected_depth > _MIN_MEASURED_DEPTH:
            return detected_depth, "detected extent"
        return DEFAULT_BOARD_DEPTH, "default"
