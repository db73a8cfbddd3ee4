"""Maze routes for building position graphs and solving mazes."""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from graphwalk.config import get_settings
from graphwalk.core.maze_graph import build_position_graph
from graphwalk.core.maze_parser import MazeParseError, ParsedMaze, parse_maze_text
from graphwalk.core.maze_solver import MazeSolver
from graphwalk.core.render import render_solution
from graphwalk.schemas.maze import MazeGraphResponse, MazeRequest, MazeSolveResponse

logger = logging.getLogger(__name__)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _parse(grid_data: str) -> ParsedMaze:
    """Parse a submitted grid, mapping failures to 400 responses."""
    try:
        parsed = parse_maze_text(
            grid_data,
            start_char=settings.start_char,
            end_char=settings.end_char,
        )
    except MazeParseError as e:
        logger.info(f"Rejected maze: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if parsed.cell_count > settings.max_maze_cells:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Maze too large: {parsed.cell_count} cells (max {settings.max_maze_cells})",
        )
    return parsed


@router.post(
    "/graph",
    response_model=MazeGraphResponse,
)
async def maze_graph(maze: MazeRequest) -> MazeGraphResponse:
    """Build the position graph of a maze.

    Keys and neighbours are "x,y" cell identifiers; values are move directions.
    """
    parsed = _parse(maze.grid_data)
    graph = build_position_graph(
        parsed.rows,
        floor_char=settings.floor_char,
        start_char=settings.start_char,
        end_char=settings.end_char,
    )

    return MazeGraphResponse(
        graph=graph.to_dict(),
        start=str(parsed.start) if parsed.start else None,
        end=str(parsed.end) if parsed.end else None,
        cells=len(graph),
    )


@router.post(
    "/solve",
    response_model=MazeSolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve(request: Request, maze: MazeRequest) -> MazeSolveResponse:
    """Solve a maze with depth-first search.

    Returns the first path found, which is not necessarily the shortest.
    An unsolvable maze is a normal response with ``solved`` false.
    """
    parsed = _parse(maze.grid_data)
    graph = build_position_graph(
        parsed.rows,
        floor_char=settings.floor_char,
        start_char=settings.start_char,
        end_char=settings.end_char,
    )
    solution = MazeSolver(graph).solve(parsed.start, parsed.end)

    return MazeSolveResponse(
        solved=solution.solved,
        directions=[d.value for d in solution.directions],
        length=len(solution),
        rendered=render_solution(parsed, solution.directions) if solution.solved else None,
    )
