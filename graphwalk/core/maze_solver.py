"""
Depth-first maze solver.

Finds the first path from start to end in neighbour order (Left, Down, Up,
Right). The path is not necessarily the shortest one.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .maze_graph import CellId, Direction, PositionGraph

logger = logging.getLogger(__name__)


@dataclass
class MazeSolution:
    """Outcome of a solve: either a direction list or no path."""
    solved: bool
    directions: list[Direction] = field(default_factory=list)

    @classmethod
    def unsolved(cls) -> "MazeSolution":
        return cls(solved=False)

    def __len__(self) -> int:
        return len(self.directions)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "solved": self.solved,
            "directions": [d.value for d in self.directions],
            "length": len(self.directions),
        }


@dataclass
class _Frame:
    cell: CellId
    neighbors: Iterator[tuple[CellId, Direction]]


class MazeSolver:
    """
    Depth-first search with backtracking over a position graph.

    The search keeps one stack frame per cell on the current path. The
    visited set only grows, so every cell is entered at most once per search.

    Example usage:
        graph = build_position_graph(parsed.rows)
        solution = MazeSolver(graph).solve(parsed.start, parsed.end)
    """

    def __init__(self, graph: PositionGraph):
        self.graph = graph

    def solve(self, start: Optional[CellId], end: Optional[CellId]) -> MazeSolution:
        """
        Search for a path from start to end.

        Args:
            start: Start cell, or None if the maze has no start marker.
            end: End cell, or None if the maze has no end marker.

        Returns:
            MazeSolution; unsolved when no path exists or a marker is missing.
        """
        if start is None or end is None or start not in self.graph:
            logger.info("Maze has no usable start or end; no path")
            return MazeSolution.unsolved()

        if start == end:
            return MazeSolution(solved=True)

        visited = {start}
        path: list[Direction] = []
        stack = [_Frame(start, iter(self.graph.neighbors(start)))]

        while stack:
            frame = stack[-1]
            step = next(frame.neighbors, None)

            if step is None:
                # Exhausted: backtrack out of this cell
                stack.pop()
                if path:
                    path.pop()
                continue

            neighbor, direction = step
            if neighbor == end:
                directions = path + [direction]
                logger.info(f"Found path of length {len(directions)}")
                return MazeSolution(solved=True, directions=directions)

            if neighbor in visited:
                continue

            visited.add(neighbor)
            path.append(direction)
            stack.append(_Frame(neighbor, iter(self.graph.neighbors(neighbor))))

        logger.info("No path found")
        return MazeSolution.unsolved()

    @staticmethod
    def walk(start: CellId, directions: list[Direction]) -> CellId:
        """Apply a sequence of moves to start and return the final cell."""
        cell = start
        for direction in directions:
            cell = cell.move(direction)
        return cell

    @staticmethod
    def path_cells(start: CellId, directions: list[Direction]) -> list[CellId]:
        """Cells visited by a sequence of moves, start included."""
        cells = [start]
        for direction in directions:
            cells.append(cells[-1].move(direction))
        return cells


def solve_maze(graph: PositionGraph, start: Optional[CellId], end: Optional[CellId]) -> MazeSolution:
    """Convenience wrapper around MazeSolver.solve."""
    return MazeSolver(graph).solve(start, end)
