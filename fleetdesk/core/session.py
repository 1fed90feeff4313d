"""
Client-side authentication/session context.

Holds the bearer token and the logged-in user, and announces changes on an
EventChannel so views refresh without polling.
"""
from typing import Any, Optional, Union
import logging

from fleetdesk.core.events import EventChannel
from fleetdesk.models.enums import UserRole

logger = logging.getLogger(__name__)

LOGIN = "login"
LOGOUT = "logout"
USER_UPDATED = "user_updated"


class PermissionDeniedError(Exception):
    """Raised when the current session's role may not open a view."""


class SessionContext:
    """
    Current token, user and role.

    Attributes:
        events: Channel receiving login / logout / user_updated
        token: Bearer token, None when logged out
        user: User fields as returned by the login endpoint
    """

    def __init__(self, events: Optional[EventChannel] = None) -> None:
        self.events = events or EventChannel()
        self.token: Optional[str] = None
        self.user: Optional[dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def role(self) -> Optional[UserRole]:
        if not self.user or not self.user.get("role"):
            return None
        return UserRole(self.user["role"])

    def login(self, token: str, user: dict[str, Any]) -> None:
        self.token = token
        self.user = dict(user)
        logger.info(f"Session started for {self.user.get('email')} ({self.user.get('role')})")
        self.events.publish(LOGIN, self.user)

    def logout(self) -> None:
        previous = self.user
        self.token = None
        self.user = None
        logger.info("Session ended")
        self.events.publish(LOGOUT, previous)

    def update_user(self, **changes: Any) -> dict[str, Any]:
        """Merge changed user fields (e.g. after a profile edit) and announce them."""
        if self.user is None:
            raise PermissionDeniedError("No user is logged in")
        self.user.update(changes)
        self.events.publish(USER_UPDATED, self.user)
        return self.user

    def require_role(self, *roles: Union[UserRole, str]) -> UserRole:
        """
        Gate a view on the current role.

        Raises:
            PermissionDeniedError: logged out, or role not in roles
        """
        current = self.role
        allowed = {UserRole(role) for role in roles}
        if current is None or current not in allowed:
            raise PermissionDeniedError(
                f"Role {current.value if current else 'anonymous'} may not access this view"
            )
        return current
