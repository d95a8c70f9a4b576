"""Client session state."""

from dataclasses import dataclass
from enum import Enum


class ClientState(Enum):
    """Lifecycle of a DirectoryClient.

    UNAUTHENTICATED -> AUTHENTICATED (login) -> CONNECTED (connect).
    """

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    CONNECTED = "connected"


@dataclass(frozen=True)
class Session:
    """Identity returned by a successful login.

    Attributes:
        user_id: Bot user ID.
        user: Bot user name.
        team_id: Workspace ID.
        team: Workspace name.
        url: Workspace URL.
    """

    user_id: str
    user: str
    team_id: str
    team: str
    url: str = ""
