"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazeRequest(BaseModel):
    """Schema for a maze grid submitted for graphing or solving."""

    grid_data: str = Field(..., min_length=1)


class MazeGraphResponse(BaseModel):
    """Schema for a position graph response."""

    graph: dict[str, dict[str, str]]
    start: Optional[str] = None
    end: Optional[str] = None
    cells: int


class MazeSolveResponse(BaseModel):
    """Schema for a solve response."""

    solved: bool
    directions: list[str]
    length: int
    rendered: Optional[str] = None
