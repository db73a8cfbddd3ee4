# Core module
from .maze_graph import CellId, Direction, InvalidOffsetError, PositionGraph, build_position_graph
from .maze_parser import MazeParseError, ParsedMaze, parse_maze_text, load_maze_file
from .maze_solver import MazeSolution, MazeSolver, solve_maze
from .network import Network, NetworkLoadError, parse_connection
from .friend_group import find_friend_group, friend_group_of, all_friend_groups
from .render import network_to_dot, render_solution

__all__ = [
    "CellId",
    "Direction",
    "InvalidOffsetError",
    "PositionGraph",
    "build_position_graph",
    "MazeParseError",
    "ParsedMaze",
    "parse_maze_text",
    "load_maze_file",
    "MazeSolution",
    "MazeSolver",
    "solve_maze",
    "Network",
    "NetworkLoadError",
    "parse_connection",
    "find_friend_group",
    "friend_group_of",
    "all_friend_groups",
    "network_to_dot",
    "render_solution",
]
