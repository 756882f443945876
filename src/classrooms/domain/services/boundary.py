"""Room boundary checks and clamping policies.

Three policies are applied by different callers and are deliberately kept
as separate operations:

- soft: out-of-bounds desks are only reported.
- hard: an out-of-bounds manual door is rejected as a whole.
- clearance: the board is kept away from the desk grid and inside the
  front wall.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import LayoutWarning, Position3D, RoomSpec

if TYPE_CHECKING:
    from ..value_objects import DeskSlot

logger = logging.getLogger(__name__)

__all__ = [
    "BOARD_CORRECTION_DISTANCE",
    "BOARD_MIN_CLEARANCE",
    "BoundaryValidator",
    "WALL_EPSILON",
    "WALL_INSET",
]

# Tolerance used whenever a coordinate is compared against a wall.
WALL_EPSILON: float = 0.1

# Inset from the front wall when the board is pushed into or behind it.
WALL_INSET: float = 0.1

# Minimum gap between the board and the front desk row.
BOARD_MIN_CLEARANCE: float = 1.0

# Distance in front of the front desk row used when clearance is violated.
BOARD_CORRECTION_DISTANCE: float = 1.5


@dataclass(frozen=True)
class BoundaryValidator:
    """Bounds predicates and corrective policies for a single room."""

    room: RoomSpec
    epsilon: float = WALL_EPSILON

    def is_within_bounds(self, x: float, z: float) -> bool:
        """Whether the floor point (x, z) lies inside the room footprint.

        Points exactly on a wall count as inside.
        """
        return abs(x) <= self.room.half_width and abs(z) <= self.room.half_depth

    def is_on_wall(self, z: float, wall_z: float) -> bool:
        """Epsilon comparison of a Z coordinate against a wall plane."""
        return abs(z - wall_z) < self.epsilon

    def is_on_back_wall(self, z: float) -> bool:
        return self.is_on_wall(z, self.room.back_wall_z)

    def is_on_front_wall(self, z: float) -> bool:
        return self.is_on_wall(z, self.room.front_wall_z)

    def report_desks(self, desks: list[DeskSlot]) -> list[LayoutWarning]:
        """Soft policy: report desks outside the room without moving them."""
        warnings: list[LayoutWarning] = []
        for desk in desks:
            if not self.is_within_bounds(desk.position.x, desk.position.z):
                message = f"Desk at {desk.position} is outside classroom bounds"
                logger.warning(f"{desk.desk_id}: {message}")
                warnings.append(LayoutWarning("desk_grid", message, desk.desk_id))

        if warnings:
            logger.warning(
                f"{len(warnings)} desks are outside classroom bounds. "
                "Consider adjusting spacing or classroom size."
            )
        return warnings

    def accept_manual_door(
        self,
        manual: Position3D,
        warnings: list[LayoutWarning] | None = None,
    ) -> bool:
        """Hard policy: whether a manual door position may be used verbatim.

        A rejected position is discarded entirely by the caller, never
        clamped.
        """
        problems: list[str] = []
        if abs(manual.x) > self.room.half_width:
            problems.append(
                f"x={manual.x} outside classroom width (half={self.room.half_width})"
            )
        if abs(manual.z) > self.room.half_depth:
            problems.append(
                f"z={manual.z} outside classroom depth (half={self.room.half_depth})"
            )

        if not problems:
            return True

        message = (
            f"Manual door position {manual} is out of bounds ({'; '.join(problems)}); "
            "using the computed default instead"
        )
        logger.warning(message)
        if warnings is not None:
            warnings.append(LayoutWarning("anchors", message, "door"))
        return False

    def enforce_board_clearance(
        self,
        position: Position3D,
        front_desk_z: float,
        warnings: list[LayoutWarning] | None = None,
    ) -> Position3D:
        """Clearance policy for the board.

        A board closer than ``BOARD_MIN_CLEARANCE`` to the front desk row
        (or behind it) is moved to ``BOARD_CORRECTION_DISTANCE`` in front
        of that row. Afterwards a board driven into or behind the front
        wall is placed ``WALL_INSET`` inside it.
        """
        result = position

        if result.z > front_desk_z - BOARD_MIN_CLEARANCE:
            corrected_z = front_desk_z - BOARD_CORRECTION_DISTANCE
            message = (
                f"Board Z={result.z:.2f} is too close to desks "
                f"(front desk Z={front_desk_z:.2f}); moved to Z={corrected_z:.2f}"
            )
            logger.warning(message)
            if warnings is not None:
                warnings.append(LayoutWarning("anchors", message, "board"))
            result = result.with_z(corrected_z)

        front_wall_z = self.room.front_wall_z
        if result.z < front_wall_z:
            clamped_z = front_wall_z + WALL_INSET
            message = (
                f"Board Z={result.z:.2f} is behind the front wall "
                f"({front_wall_z:.2f}); clamped to Z={clamped_z:.2f}"
            )
            logger.warning(message)
            if warnings is not None:
                warnings.append(LayoutWarning("anchors", message, "board"))
            result = result.with_z(clamped_z)

        return result
