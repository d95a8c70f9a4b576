"""User entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserProfile:
    """User profile fields.

    Image fields hold avatar URIs at fixed pixel sizes.
    """

    first_name: str | None = None
    last_name: str | None = None
    real_name: str | None = None
    email: str | None = None
    skype: str | None = None
    phone: str | None = None
    image_24: str | None = None
    image_32: str | None = None
    image_48: str | None = None
    image_72: str | None = None
    image_192: str | None = None


@dataclass(frozen=True)
class User:
    """Workspace member snapshot.

    Attributes:
        id: User ID, unique within the workspace.
        name: Handle, unique among non-deleted users.
        deleted: Whether the account is deactivated.
        color: Display color (hex without '#').
        profile: Profile fields.
        is_bot: Whether the user is a bot.
        two_factor_type: "app" or "sms" when two-factor is enabled.
    """

    id: str
    name: str
    deleted: bool = False
    color: str = ""
    profile: UserProfile = field(default_factory=UserProfile)
    is_admin: bool = False
    is_owner: bool = False
    is_primary_owner: bool = False
    is_restricted: bool = False
    is_ultra_restricted: bool = False
    is_bot: bool = False
    has_2fa: bool = False
    two_factor_type: str | None = None
    has_files: bool = False
