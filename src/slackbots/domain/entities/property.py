"""Property value object (channel topic / purpose)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Property:
    """A value set on a conversation by a user.

    Attributes:
        value: Current value.
        creator: ID of the user who set it.
        last_set: When it was last set (None if never set).
    """

    value: str = ""
    creator: str = ""
    last_set: datetime | None = None
