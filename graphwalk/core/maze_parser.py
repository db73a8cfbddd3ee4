"""
Maze Parser for Graphwalk.

Loads maze grids from text or the filesystem.

Maze Format:
    S = Start position
    E = End (goal)
    . = Floor
    # = Wall (any other character is a wall too)

Empty lines are skipped and do not take up a row index.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .maze_graph import CellId


class MazeParseError(Exception):
    """Exception raised when maze parsing fails."""

    pass


@dataclass
class ParsedMaze:
    """Parsed maze grid and marker positions."""

    rows: list[str]
    start: Optional[CellId]
    end: Optional[CellId]

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def cell_count(self) -> int:
        return sum(len(row) for row in self.rows)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "rows": list(self.rows),
            "width": self.width,
            "height": self.height,
            "start": str(self.start) if self.start else None,
            "end": str(self.end) if self.end else None,
        }


def parse_maze_text(
    maze_text: str,
    start_char: str = "S",
    end_char: str = "E",
) -> ParsedMaze:
    """
    Parse maze text into rows and locate the start and end markers.

    Args:
        maze_text: Multi-line string representing the maze grid.
        start_char: Start marker.
        end_char: End marker.

    Returns:
        ParsedMaze with the non-empty rows. A missing marker is left as None.

    Raises:
        MazeParseError: If the text holds no grid rows.
    """
    rows = [line.rstrip("\r") for line in maze_text.split("\n")]
    rows = [row for row in rows if row]

    if not rows:
        raise MazeParseError("Maze text is empty")

    start: Optional[CellId] = None
    end: Optional[CellId] = None

    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == start_char:
                start = CellId(x, y)
            elif char == end_char:
                end = CellId(x, y)

    return ParsedMaze(rows=rows, start=start, end=end)


def load_maze_file(
    file_path: Path | str,
    start_char: str = "S",
    end_char: str = "E",
) -> ParsedMaze:
    """
    Load and parse a maze file from the filesystem.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the path is not a readable file or holds no grid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    return parse_maze_text(maze_text, start_char=start_char, end_char=end_char)
