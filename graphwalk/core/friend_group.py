"""Breadth-first friend group search."""

import logging
from collections import deque
from typing import Mapping, Sequence

from .network import Network, Person

logger = logging.getLogger(__name__)


def find_friend_group(adjacency: Mapping[Person, Sequence[Person]], person: Person) -> set[Person]:
    """
    Find everyone transitively connected to person.

    Args:
        adjacency: Person -> directly connected people.
        person: Starting person. Need not appear in adjacency.

    Returns:
        The connected component containing person, person included.
    """
    visited = {person}
    queue = deque(adjacency.get(person, ()))

    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        for neighbor in adjacency.get(current, ()):
            if neighbor not in visited:
                queue.append(neighbor)

    logger.debug(f"Friend group of {person!r} has {len(visited)} members")
    return visited


def friend_group_of(network: Network, person: Person) -> set[Person]:
    """Friend group of person in network."""
    return find_friend_group(network.adjacency(), person)


def all_friend_groups(network: Network) -> list[set[Person]]:
    """Partition everyone in the network into friend groups, largest first."""
    adjacency = network.adjacency()
    seen: set[Person] = set()
    groups = []
    for person in network.people():
        if person in seen:
            continue
        group = find_friend_group(adjacency, person)
        seen |= group
        groups.append(group)
    groups.sort(key=lambda g: (-len(g), min(g)))
    return groups
