"""
Social network loading.

A network is a set of connections. Friendships are mutual, so a line
``alice,bob`` is stored as both (alice, bob) and (bob, alice).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

Person = str
Connection = tuple[Person, Person]


class NetworkLoadError(Exception):
    """Exception raised when a network file cannot be read."""

    pass


def parse_connection(line: str, separator: str = ",") -> Optional[Connection]:
    """Parse one ``name1,name2`` line; None unless it has exactly two tokens."""
    parts = line.rstrip("\r\n").split(separator)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


@dataclass(frozen=True)
class Network:
    """Symmetric set of connections plus the input lines that were dropped."""

    connections: frozenset[Connection] = frozenset()
    dropped: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_lines(cls, lines: Iterable[str], separator: str = ",") -> "Network":
        """
        Build a network from connection lines.

        Malformed lines are logged, recorded in ``dropped`` and skipped.
        """
        connections: set[Connection] = set()
        dropped: list[str] = []

        for line in lines:
            connection = parse_connection(line, separator)
            if connection is None:
                logger.warning(f"Could not parse line as connection; dropping: {line!r}")
                dropped.append(line.rstrip("\r\n"))
                continue
            a, b = connection
            connections.add((a, b))
            connections.add((b, a))

        return cls(connections=frozenset(connections), dropped=tuple(dropped))

    @classmethod
    def from_file(cls, file_path: Path | str, separator: str = ",") -> "Network":
        """
        Load a network from a file listing one friendship per line.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            NetworkLoadError: If the path is not a readable UTF-8 file.
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Network file not found: {file_path}")

        if not file_path.is_file():
            raise NetworkLoadError(f"Path is not a file: {file_path}")

        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NetworkLoadError(f"Failed to read network file: {e}") from e

        return cls.from_lines(text.splitlines(), separator)

    def people(self) -> list[Person]:
        """Every distinct person, sorted."""
        return sorted({a for a, _ in self.connections})

    def friendships(self) -> list[Connection]:
        """Distinct unordered friendships, each reported once as (smaller, larger)."""
        return sorted((a, b) for a, b in self.connections if a <= b)

    def adjacency(self) -> dict[Person, list[Person]]:
        """Map each person to the people directly connected to them."""
        adjacency: dict[Person, list[Person]] = {}
        for a, b in sorted(self.connections):
            adjacency.setdefault(a, []).append(b)
        return adjacency

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "connections": [list(c) for c in sorted(self.connections)],
            "people": self.people(),
            "dropped": list(self.dropped),
        }
