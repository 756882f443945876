"""Value objects for the classroom layout domain.

All geometry uses a room-centered frame: the origin sits at the floor
center of the room, +X runs to the right, +Y up, and +Z toward the back
wall (where the door sits by default). The front wall (board side) is at
``-depth / 2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Fixed by the 2-row classroom layout rule.
GRID_ROWS: int = 2

# Offsets of the occupant stand point and desk surface anchor from the desk center.
STAND_OFFSET_Z: float = -0.3
SURFACE_OFFSET_Y: float = 0.8


class RouteType(str, Enum):
    """Kinds of generated occupant routes."""

    ESCAPE = "escape"
    RETURN = "return"

    @property
    def label(self) -> str:
        """Capitalized label used in waypoint and route names."""
        return self.value.capitalize()


class WaypointLabel(str, Enum):
    """Semantic labels of the points visited by a route."""

    DESK = "Desk"
    AISLE = "Aisle"
    DOOR = "Door"
    OUTSIDE = "Outside"


@dataclass(frozen=True)
class Position3D:
    """3D position in the room frame (origin at the room floor center).

    Unlike most value objects here, coordinates may be negative.
    """

    x: float
    y: float
    z: float

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Position3D:
        """Return a new position translated by the given deltas."""
        return Position3D(self.x + dx, self.y + dy, self.z + dz)

    def with_z(self, z: float) -> Position3D:
        """Return a copy with the Z coordinate replaced."""
        return Position3D(self.x, self.y, z)

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"


@dataclass(frozen=True)
class RoomSpec:
    """Rectangular room dimensions in meters.

    Attributes:
        width: Extent along X.
        depth: Extent along Z.
        height: Extent along Y.
    """

    width: float
    depth: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.height <= 0:
            raise ValueError("Room dimensions must be positive")

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_depth(self) -> float:
        return self.depth / 2

    @property
    def back_wall_z(self) -> float:
        """Z of the back wall (door side by default)."""
        return self.half_depth

    @property
    def front_wall_z(self) -> float:
        """Z of the front wall (board side)."""
        return -self.half_depth


@dataclass(frozen=True)
class GridSpec:
    """Desk grid parameters.

    The column count is always derived from the occupant count and is
    never stored independently.

    Attributes:
        occupant_count: Number of desks to lay out (even).
        spacing_x: Center distance between adjacent columns.
        spacing_z: Center distance between the two rows before the aisle.
        aisle_width: Gap inserted between the front and back rows.
        rows: Row count, fixed at 2.
    """

    occupant_count: int
    spacing_x: float = 2.0
    spacing_z: float = 2.5
    aisle_width: float = 1.5
    rows: int = GRID_ROWS

    def __post_init__(self) -> None:
        if self.rows != GRID_ROWS:
            raise ValueError(f"Desk grid must have exactly {GRID_ROWS} rows")
        if self.occupant_count <= 0:
            raise ValueError("Occupant count must be positive")
        if self.occupant_count % self.rows != 0:
            raise ValueError("Occupant count must be divisible by the row count")
        if self.spacing_x <= 0 or self.spacing_z <= 0:
            raise ValueError("Desk spacing must be positive")
        if self.aisle_width < 0:
            raise ValueError("Aisle width must be non-negative")

    @property
    def columns(self) -> int:
        return self.occupant_count // self.rows

    @property
    def grid_width(self) -> float:
        """Distance between the outermost column centers."""
        return (self.columns - 1) * self.spacing_x

    @property
    def grid_depth(self) -> float:
        """Distance between row centers, excluding the aisle."""
        return (self.rows - 1) * self.spacing_z


@dataclass(frozen=True)
class DeskSlot:
    """A single desk placed in the grid.

    Attributes:
        desk_id: Deterministic identifier ``Desk_{row}_{col}``.
        row: Row index (0 is the front row, nearest the board).
        column: Column index from left to right.
        position: Desk center on the floor.
    """

    desk_id: str
    row: int
    column: int
    position: Position3D

    @property
    def stand_position(self) -> Position3D:
        """Where the occupant stands, slightly in front of the desk."""
        return self.position.offset(dz=STAND_OFFSET_Z)

    @property
    def surface_anchor(self) -> Position3D:
        """Anchor on top of the desk surface."""
        return self.position.offset(dy=SURFACE_OFFSET_Y)


@dataclass(frozen=True)
class AnchorSet:
    """Resolved reference points shared read-only by route generation."""

    door: Position3D
    board: Position3D
    outside: Position3D


@dataclass(frozen=True)
class AgentAssignment:
    """An occupant bound to exactly one desk.

    Attributes:
        agent_id: Identifier used as the prefix of waypoint names.
        agent_name: Display name of the occupant.
        desk: The desk the occupant is assigned to.
    """

    agent_id: str
    agent_name: str
    desk: DeskSlot

    def __post_init__(self) -> None:
        if not self.agent_id:
            raise ValueError("agent_id must not be empty")


@dataclass(frozen=True)
class Waypoint:
    """A named point along a route.

    Attributes:
        name: ``{agentId}_{routeType}_{index:02d}_{label}``.
        position: Absolute position in the room frame.
        label: Which reference point this waypoint stands for.
        wait_duration: Seconds to wait on arrival.
    """

    name: str
    position: Position3D
    label: WaypointLabel
    wait_duration: float = 0.0

    def __post_init__(self) -> None:
        if self.wait_duration < 0:
            raise ValueError("wait_duration must be non-negative")


@dataclass(frozen=True)
class RouteSettings:
    """Movement settings applied to generated routes.

    Escape routes default to a faster pace than return routes.
    """

    escape_speed: float = 3.0
    return_speed: float = 2.0
    rotation_speed: float = 180.0
    is_running: bool = False
    is_looping: bool = False
    is_ping_pong: bool = False

    def __post_init__(self) -> None:
        if self.escape_speed <= 0 or self.return_speed <= 0:
            raise ValueError("Route speeds must be positive")
        if self.rotation_speed <= 0:
            raise ValueError("rotation_speed must be positive")

    def speed_for(self, route_type: RouteType) -> float:
        if route_type is RouteType.ESCAPE:
            return self.escape_speed
        return self.return_speed


@dataclass(frozen=True)
class Route:
    """An ordered waypoint sequence for one occupant.

    Waypoint order is traversal order. Downstream consumers identify the
    route kind only through its name, so ``name`` must contain
    ``Escape`` or ``Return``. Generated routes also record their kind,
    since an agent id can itself contain either word.
    """

    name: str
    agent_id: str
    waypoints: tuple[Waypoint, ...]
    movement_speed: float
    rotation_speed: float
    is_running: bool = False
    is_looping: bool = False
    is_ping_pong: bool = False
    kind: RouteType | None = None

    @property
    def route_type(self) -> RouteType | None:
        """The recorded kind, else inferred from the name as consumers do."""
        if self.kind is not None:
            return self.kind
        lowered = self.name.lower()
        if RouteType.ESCAPE.value in lowered:
            return RouteType.ESCAPE
        if RouteType.RETURN.value in lowered:
            return RouteType.RETURN
        return None

    @property
    def start(self) -> Waypoint:
        return self.waypoints[0]

    @property
    def end(self) -> Waypoint:
        return self.waypoints[-1]


@dataclass(frozen=True)
class LayoutWarning:
    """A non-fatal anomaly corrected or reported during generation.

    Attributes:
        component: Component that raised the warning (e.g. "desk_grid").
        message: Human-readable description.
        subject: Identifier of the affected item, if any.
    """

    component: str
    message: str
    subject: str | None = None

    def __str__(self) -> str:
        if self.subject:
            return f"[{self.component}] {self.subject}: {self.message}"
        return f"[{self.component}] {self.message}"

