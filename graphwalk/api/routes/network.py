"""Social network routes for loading, visualizing and searching friendships."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from graphwalk.config import get_settings
from graphwalk.core.friend_group import all_friend_groups, friend_group_of
from graphwalk.core.network import Network
from graphwalk.core.render import network_to_dot
from graphwalk.schemas.network import (
    FriendGroupRequest,
    FriendGroupResponse,
    FriendGroupsResponse,
    NetworkRequest,
    NetworkResponse,
)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/network", tags=["Network"])


def _load(lines: list[str]) -> Network:
    return Network.from_lines(lines, separator=settings.connection_separator)


@router.post(
    "/load",
    response_model=NetworkResponse,
)
async def load_network(body: NetworkRequest) -> NetworkResponse:
    """Parse connection lines into a symmetric network.

    Malformed lines are reported in ``dropped`` rather than failing the request.
    """
    network = _load(body.lines)
    data = network.to_dict()
    return NetworkResponse(
        connections=[tuple(c) for c in data["connections"]],
        people=data["people"],
        dropped=data["dropped"],
    )


@router.post(
    "/visualize",
    response_class=PlainTextResponse,
)
async def visualize_network(body: NetworkRequest) -> PlainTextResponse:
    """Render the network as an undirected Graphviz DOT document."""
    network = _load(body.lines)
    return PlainTextResponse(network_to_dot(network), media_type="text/vnd.graphviz")


@router.post(
    "/friend-group",
    response_model=FriendGroupResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def friend_group(request: Request, body: FriendGroupRequest) -> FriendGroupResponse:
    """Find everyone transitively connected to a person."""
    network = _load(body.lines)
    friends = sorted(friend_group_of(network, body.person))
    return FriendGroupResponse(
        person=body.person,
        friends=friends,
        size=len(friends),
        dropped=list(network.dropped),
    )


@router.post(
    "/groups",
    response_model=FriendGroupsResponse,
)
async def friend_groups(body: NetworkRequest) -> FriendGroupsResponse:
    """Partition the network into friend groups, largest first."""
    groups = [sorted(group) for group in all_friend_groups(_load(body.lines))]
    return FriendGroupsResponse(groups=groups, total=len(groups))
