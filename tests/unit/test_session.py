"""Tests for fleetdesk.core.events and fleetdesk.core.session."""
import pytest

from fleetdesk.core.events import EventChannel
from fleetdesk.core.session import (
    LOGIN,
    LOGOUT,
    USER_UPDATED,
    PermissionDeniedError,
    SessionContext,
)
from fleetdesk.models.enums import UserRole

USER = {"id": "u-1", "email": "admin@fleetdesk.test", "role": "admin"}


class TestEventChannel:

    def test_delivers_in_subscription_order(self):
        channel = EventChannel()
        received = []
        channel.subscribe("topic", lambda payload: received.append(("a", payload)))
        channel.subscribe("topic", lambda payload: received.append(("b", payload)))

        assert channel.publish("topic", 1) == 2
        assert received == [("a", 1), ("b", 1)]

    def test_unsubscribe_is_idempotent(self):
        channel = EventChannel()
        unsubscribe = channel.subscribe("topic", lambda payload: None)
        unsubscribe()
        unsubscribe()
        assert channel.subscriber_count("topic") == 0
        assert channel.publish("topic") == 0

    def test_failing_subscriber_does_not_stop_others(self):
        channel = EventChannel()
        received = []

        def broken(payload):
            raise RuntimeError("boom")

        channel.subscribe("topic", broken)
        channel.subscribe("topic", received.append)

        assert channel.publish("topic", "x") == 1
        assert received == ["x"]


class TestSessionContext:

    def test_login_publishes_user(self):
        session = SessionContext()
        seen = []
        session.events.subscribe(LOGIN, seen.append)

        session.login("token-1", USER)
        assert session.is_authenticated
        assert session.role is UserRole.ADMIN
        assert seen == [USER]

    def test_logout_publishes_previous_user(self):
        session = SessionContext()
        seen = []
        session.events.subscribe(LOGOUT, seen.append)
        session.login("token-1", USER)

        session.logout()
        assert not session.is_authenticated
        assert session.user is None
        assert seen == [USER]

    def test_update_user(self):
        session = SessionContext()
        seen = []
        session.events.subscribe(USER_UPDATED, seen.append)
        session.login("token-1", USER)

        session.update_user(email="new@fleetdesk.test")
        assert session.user["email"] == "new@fleetdesk.test"
        assert seen[0]["email"] == "new@fleetdesk.test"

    def test_update_user_logged_out(self):
        with pytest.raises(PermissionDeniedError):
            SessionContext().update_user(email="x")

    def test_require_role(self):
        session = SessionContext()
        with pytest.raises(PermissionDeniedError):
            session.require_role(UserRole.ADMIN)

        session.login("token-1", {**USER, "role": "driver"})
        assert session.require_role("driver", "admin") is UserRole.DRIVER
        with pytest.raises(PermissionDeniedError):
            session.require_role(UserRole.ADMIN)

    def test_separate_sessions_do_not_share_state(self):
        first, second = SessionContext(), SessionContext()
        first.login("token-1", USER)
        assert second.user is None
