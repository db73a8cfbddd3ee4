"""Text renderings of networks and solved mazes."""

from typing import Sequence

from .maze_graph import Direction
from .maze_parser import ParsedMaze
from .maze_solver import MazeSolver
from .network import Network

PATH_MARKER = "*"


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def network_to_dot(network: Network, name: str = "network") -> str:
    """
    Render a network as an undirected Graphviz document.

    Each person is a box node labelled with their name; each friendship is
    one undirected edge.
    """
    lines = [f"graph {_quote(name)} {{"]
    for person in network.people():
        lines.append(f"  {_quote(person)} [shape=box, label={_quote(person)}];")
    for a, b in network.friendships():
        lines.append(f"  {_quote(a)} -- {_quote(b)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_solution(parsed: ParsedMaze, directions: Sequence[Direction]) -> str:
    """Return the maze text with path cells between start and end marked."""
    if parsed.start is None:
        return "\n".join(parsed.rows)

    grid = [list(row) for row in parsed.rows]
    # Skip the start cell and the final (end) cell
    for cell in MazeSolver.path_cells(parsed.start, list(directions))[1:-1]:
        grid[cell.y][cell.x] = PATH_MARKER

    return "\n".join("".join(row) for row in grid)
