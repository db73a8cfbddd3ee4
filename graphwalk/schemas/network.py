"""Network schemas for request/response validation."""

from pydantic import BaseModel, Field


class NetworkRequest(BaseModel):
    """Schema for connection lines (``name1,name2``)."""

    lines: list[str]


class FriendGroupRequest(NetworkRequest):
    """Schema for a friend group lookup."""

    person: str = Field(..., min_length=1)


class NetworkResponse(BaseModel):
    """Schema for a loaded network."""

    connections: list[tuple[str, str]]
    people: list[str]
    dropped: list[str]


class FriendGroupResponse(BaseModel):
    """Schema for a friend group lookup result."""

    person: str
    friends: list[str]
    size: int
    dropped: list[str]


class FriendGroupsResponse(BaseModel):
    """Schema for every friend group in a network."""

    groups: list[list[str]]
    total: int
