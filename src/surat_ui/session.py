"""
Explicit session context for an authenticated user.

A Session holds the bearer token and the cached user profile. It is
created by the view, handed to the letter service at construction,
and moves through an explicit lifecycle:

    Session() --start(token, user)--> authenticated --end()--> anonymous

Nothing reads the token from ambient global storage; whoever needs it
is given the Session.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from surat_ui.lib import logs
from surat_ui.models.letter import User, deserialize_user, serialize_user

LOG = logs.logger(__file__)


@dataclass
class Session:
    """
    Authentication state for one user of the UI.

    Attributes:
        token: Bearer token issued by /auth/login, or None.
        user: Profile of the logged-in user, or None.
    """

    token: str | None = None
    user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def is_super_admin(self) -> bool:
        return self.user is not None and self.user.is_super_admin

    @property
    def company_scope(self) -> int | None:
        """
        Company an admin is restricted to.

        Super admins see every company (None); admins only their own.
        """
        if self.user is None or self.user.is_super_admin:
            return None
        return self.user.company_id

    def start(self, token: str, user: User) -> None:
        """Begin an authenticated session."""
        self.token = token
        self.user = user
        LOG.info("Session started for %s (%s)", user.email, user.role)

    def update_user(self, user: User) -> None:
        """Replace the cached profile after a profile update."""
        self.user = user

    def end(self) -> None:
        """Forget the token and the cached profile."""
        if self.user is not None:
            LOG.info("Session ended for %s", self.user.email)
        self.token = None
        self.user = None

    def auth_headers(self) -> dict[str, str]:
        """Return the Authorization header for API requests."""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary for view state."""
        return {
            "token": self.token,
            "user": serialize_user(self.user) if self.user else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Session":
        """Deserialize a dictionary produced by to_dict()."""
        if not data or not data.get("token"):
            return cls()
        user_data = data.get("user")
        return cls(
            token=data["token"],
            user=deserialize_user(user_data) if user_data else None,
        )
