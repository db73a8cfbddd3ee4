"""
Position graph for grid mazes.

Every walkable cell (floor or start) becomes a key whose value maps each
reachable neighbour cell to the direction of the move that reaches it.

Grid alphabet:
    S = Start position
    E = End (goal)
    . = Floor
    anything else = Wall
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Iterator, NamedTuple, Sequence

logger = logging.getLogger(__name__)


class InvalidOffsetError(AssertionError):
    """Raised when an offset is not one of the four cardinal unit moves."""

    pass


class Direction(Enum):
    """Movement directions."""
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        return _DELTAS[self]

    @classmethod
    def from_offset(cls, dx: int, dy: int) -> "Direction":
        """Convert a unit offset to its direction."""
        for direction, delta in _DELTAS.items():
            if delta == (dx, dy):
                return direction
        raise InvalidOffsetError(f"No direction for offset ({dx}, {dy})")


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.UP: (0, -1),
}

# Probe order; the solver explores neighbours in this order.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (0, 1), (0, -1), (1, 0))


class CellId(NamedTuple):
    """Column/row position of a cell, rows counted from the first non-empty line."""
    x: int
    y: int

    def move(self, direction: Direction) -> "CellId":
        """Return the cell reached by moving in direction."""
        dx, dy = direction.delta
        return CellId(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"

    @classmethod
    def parse(cls, text: str) -> "CellId":
        """Parse the "x,y" form produced by str()."""
        x, _, y = text.partition(",")
        try:
            return cls(int(x), int(y))
        except ValueError as e:
            raise ValueError(f"Invalid cell identifier: {text!r}") from e


class PositionGraph(Mapping):
    """Read-only mapping from cell to {neighbour cell: direction}."""

    def __init__(self, adjacency: dict[CellId, dict[CellId, Direction]]):
        self._adjacency = adjacency

    def __getitem__(self, cell: CellId) -> Mapping[CellId, Direction]:
        return _FrozenNeighbors(self._adjacency[cell])

    def __iter__(self) -> Iterator[CellId]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def neighbors(self, cell: CellId) -> list[tuple[CellId, Direction]]:
        """Neighbours of cell in probe order; empty for unknown cells."""
        return list(self._adjacency.get(cell, {}).items())

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Convert to a JSON-friendly dictionary."""
        return {
            str(cell): {str(n): d.value for n, d in neighbors.items()}
            for cell, neighbors in self._adjacency.items()
        }


class _FrozenNeighbors(Mapping):
    def __init__(self, neighbors: dict[CellId, Direction]):
        self._neighbors = neighbors

    def __getitem__(self, cell: CellId) -> Direction:
        return self._neighbors[cell]

    def __iter__(self) -> Iterator[CellId]:
        return iter(self._neighbors)

    def __len__(self) -> int:
        return len(self._neighbors)


def build_position_graph(
    rows: Sequence[str],
    floor_char: str = ".",
    start_char: str = "S",
    end_char: str = "E",
) -> PositionGraph:
    """
    Build the position graph for a grid of characters.

    Args:
        rows: Grid rows, already stripped of empty lines. Rows may differ in length.
        floor_char: Walkable floor marker.
        start_char: Start marker.
        end_char: End marker.

    Returns:
        PositionGraph keyed by every floor and start cell.
    """
    sources = {floor_char, start_char}
    targets = {floor_char, end_char}
    adjacency: dict[CellId, dict[CellId, Direction]] = {}

    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char not in sources:
                continue

            neighbors: dict[CellId, Direction] = {}
            for dx, dy in NEIGHBOR_OFFSETS:
                nx, ny = x + dx, y + dy
                # Bounds are checked against the neighbour's own row
                if not (0 <= ny < len(rows) and 0 <= nx < len(rows[ny])):
                    continue
                if rows[ny][nx] in targets:
                    neighbors[CellId(nx, ny)] = Direction.from_offset(dx, dy)

            adjacency[CellId(x, y)] = neighbors

    logger.debug(f"Built position graph with {len(adjacency)} cells")
    return PositionGraph(adjacency)
