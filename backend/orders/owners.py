"""
Order ownership.

An order belongs either to an authenticated identity or to a channel
identity (a Telegram user who never signed in). Code that branches on the
owner must handle both variants; ``owner_fields`` raises on anything else.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AuthenticatedOwner:
    user_id: int

    @property
    def kind(self):
        return "user"


@dataclass(frozen=True)
class ChannelOwner:
    external_id: str

    def __post_init__(self):
        external_id = str(self.external_id).strip() if self.external_id is not None else ""
        if not external_id:
            raise ValueError("A channel owner needs a non-empty external id.")
        object.__setattr__(self, "external_id", external_id)

    @property
    def kind(self):
        return "channel"


OrderOwner = Union[AuthenticatedOwner, ChannelOwner]


def owner_fields(owner: OrderOwner) -> dict:
    """Order model field values for ``owner``."""
    if isinstance(owner, AuthenticatedOwner):
        return {"user_id": owner.user_id, "channel_user_id": None}
    if isinstance(owner, ChannelOwner):
        return {"user_id": None, "channel_user_id": owner.external_id}
    raise TypeError(f"Unsupported order owner: {owner!r}")


def owner_of(order) -> OrderOwner:
    if order.user_id is not None:
        return AuthenticatedOwner(order.user_id)
    return ChannelOwner(order.channel_user_id)
