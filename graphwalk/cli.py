"""
Graphwalk command line.

Examples:
    graphwalk maze solve --input mazes/small.txt
    graphwalk social-network load --input friends.txt
    graphwalk social-network visualize --input friends.txt --output friends.dot
    graphwalk social-network find-friend-group --input friends.txt --person alice
    graphwalk social-network friend-groups --input friends.txt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from graphwalk.config import get_settings
from graphwalk.core.friend_group import all_friend_groups, friend_group_of
from graphwalk.core.maze_graph import build_position_graph
from graphwalk.core.maze_parser import MazeParseError, load_maze_file
from graphwalk.core.maze_solver import MazeSolver
from graphwalk.core.network import Network, NetworkLoadError
from graphwalk.core.render import network_to_dot, render_solution

logger = logging.getLogger("graphwalk.cli")


def solve_command(args: argparse.Namespace) -> int:
    """Parse a maze file and print the first path found."""
    settings = get_settings()
    parsed = load_maze_file(args.input, start_char=settings.start_char, end_char=settings.end_char)
    graph = build_position_graph(
        parsed.rows,
        floor_char=settings.floor_char,
        start_char=settings.start_char,
        end_char=settings.end_char,
    )
    logger.debug(f"Position graph: {graph.to_dict()}")

    solution = MazeSolver(graph).solve(parsed.start, parsed.end)
    if not solution.solved:
        print("lose")
        return 0

    print(f"Directions to Win: {json.dumps([d.value for d in solution.directions])}")
    if args.show:
        print(render_solution(parsed, solution.directions))
    return 0


def _load_network(path: Path) -> Network:
    return Network.from_file(path, separator=get_settings().connection_separator)


def load_command(args: argparse.Namespace) -> int:
    """Parse a friendship file and print the network as JSON."""
    network = _load_network(args.input)
    print(json.dumps(network.to_dict(), indent=2))
    return 0


def visualize_command(args: argparse.Namespace) -> int:
    """Write the network as a Graphviz DOT file."""
    network = _load_network(args.input)
    args.output.write_text(network_to_dot(network), encoding="utf-8")
    print(f"Done! Wrote dot file to {args.output}")
    return 0


def find_friend_group_command(args: argparse.Namespace) -> int:
    """Print everyone in a person's friend group, one per line."""
    network = _load_network(args.input)
    for friend in sorted(friend_group_of(network, args.person)):
        print(friend)
    return 0


def friend_groups_command(args: argparse.Namespace) -> int:
    """Print every friend group, one comma-separated group per line."""
    network = _load_network(args.input)
    for group in all_friend_groups(network):
        print(",".join(sorted(group)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with maze and social-network command groups."""
    parser = argparse.ArgumentParser(
        prog="graphwalk",
        description="Maze solving and friend group search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    groups = parser.add_subparsers(dest="group", required=True)

    maze = groups.add_parser("maze", help="maze commands")
    maze_commands = maze.add_subparsers(dest="command", required=True)
    solve = maze_commands.add_parser(
        "solve", help="parse a file containing a maze and find a solution"
    )
    solve.add_argument("--input", type=Path, required=True, help="a file containing a maze")
    solve.add_argument(
        "--show",
        action="store_true",
        help="Print the maze with the path marked",
    )
    solve.set_defaults(handler=solve_command)

    social = groups.add_parser("social-network", help="social network commands")
    social_commands = social.add_subparsers(dest="command", required=True)

    load = social_commands.add_parser(
        "load", help="parse a file listing friendships and print the network"
    )
    load.add_argument("--input", type=Path, required=True, help="a file listing all friendships")
    load.set_defaults(handler=load_command)

    visualize = social_commands.add_parser(
        "visualize",
        help="parse a file listing friendships and write a DOT graph of the network",
    )
    visualize.add_argument("--input", type=Path, required=True, help="a file listing all friendships")
    visualize.add_argument("--output", type=Path, required=True, help="where to write the DOT graph")
    visualize.set_defaults(handler=visualize_command)

    find = social_commands.add_parser(
        "find-friend-group", help="given a person, find their entire friend group"
    )
    find.add_argument("--input", type=Path, required=True, help="a file listing all friendships")
    find.add_argument("--person", required=True, help="name of person whose friend group to find")
    find.set_defaults(handler=find_friend_group_command)

    every = social_commands.add_parser(
        "friend-groups", help="list every friend group in the network"
    )
    every.add_argument("--input", type=Path, required=True, help="a file listing all friendships")
    every.set_defaults(handler=friend_groups_command)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else get_settings().log_level
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        return args.handler(args)
    except (FileNotFoundError, MazeParseError, NetworkLoadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
