"""
Database module for FleetDesk.
"""
from fleetdesk.db.database import (
    Base,
    engine,
    async_session_maker,
    get_async_session,
)

__all__ = [
    "Base",
    "engine",
    "async_session_maker",
    "get_async_session",
]
