"""Desk grid layout engine.

Lays out a 2-row desk grid centered at the room origin with an aisle
between the rows. Output is deterministic and ordered row-major (front
row first, columns left to right).
"""

from __future__ import annotations

import logging

from ..value_objects import (
    DeskSlot,
    GridSpec,
    LayoutWarning,
    Position3D,
    RoomSpec,
)
from .boundary import BoundaryValidator

logger = logging.getLogger(__name__)

__all__ = ["DeskGridLayoutEngine", "desk_id"]


def desk_id(row: int, column: int) -> str:
    """Identifier of the desk at the given grid cell."""
    return f"Desk_{row}_{column}"


class DeskGridLayoutEngine:
    """Computes desk slots for a classroom.

    The engine holds no state; every call is a pure function of its
    arguments.
    """

    def generate(
        self,
        room: RoomSpec,
        grid: GridSpec,
        warnings: list[LayoutWarning] | None = None,
    ) -> list[DeskSlot]:
        """Generate the desk grid.

        Args:
            room: Room dimensions, used only for the bounds report.
            grid: Grid parameters.
            warnings: Optional collector for out-of-bounds desk warnings.

        Returns:
            ``grid.occupant_count`` desk slots, row-major.
        """
        logger.info(
            f"Generating desk grid: {grid.rows} rows x {grid.columns} columns "
            f"for {grid.occupant_count} occupants"
        )

        start_x = -grid.grid_width / 2
        start_z = -grid.grid_depth / 2
        aisle_offset = grid.aisle_width / 2

        desks: list[DeskSlot] = []
        for row in range(grid.rows):
            for column in range(grid.columns):
                x = start_x + column * grid.spacing_x
                z = start_z + row * grid.spacing_z
                # The aisle separates the rows; it is not added at the grid edges.
                if row == 0:
                    z -= aisle_offset
                else:
                    z += aisle_offset

                desk = DeskSlot(
                    desk_id=desk_id(row, column),
                    row=row,
                    column=column,
                    position=Position3D(x, 0.0, z),
                )
                logger.debug(f"Placed {desk.desk_id} at {desk.position}")
                desks.append(desk)

        out_of_bounds = BoundaryValidator(room).report_desks(desks)
        if warnings is not None:
            warnings.extend(out_of_bounds)

        logger.info(f"Generated {len(desks)} desks")
        return desks

    def grid_bounds(self, room: RoomSpec, grid: GridSpec) -> tuple[float, float]:
        """Z range spanned by the desk rows, aisle included.

        Returns:
            ``(front_z, back_z)`` with ``front_z <= back_z``.
        """
        aisle_offset = grid.aisle_width / 2
        front_z = -grid.grid_depth / 2 - aisle_offset
        back_z = -grid.grid_depth / 2 + (grid.rows - 1) * grid.spacing_z + aisle_offset

        if front_z > back_z:
            front_z, back_z = back_z, front_z

        logger.debug(f"Desk grid bounds: front Z={front_z}, back Z={back_z}")
        return front_z, back_z
