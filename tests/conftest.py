"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from graphwalk.main import app


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def sample_maze_text() -> str:
    """3x3 maze with a wall in the centre."""
    return "S..\n.#.\n..E"


@pytest.fixture
def sample_connection_lines() -> list[str]:
    """Two friend groups plus malformed lines."""
    return [
        "alice,bob",
        "bob,carol",
        "dave",
        "erin,frank",
        "x,y,z",
    ]


@pytest.fixture
def maze_file(tmp_path, sample_maze_text):
    """Sample maze written to disk."""
    path = tmp_path / "maze.txt"
    path.write_text(sample_maze_text)
    return path


@pytest.fixture
def network_file(tmp_path, sample_connection_lines):
    """Sample friendships written to disk."""
    path = tmp_path / "friends.txt"
    path.write_text("\n".join(sample_connection_lines) + "\n")
    return path
