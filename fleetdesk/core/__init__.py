"""
Core package for FleetDesk.
"""
from fleetdesk.core.config import settings, get_settings
from fleetdesk.core.celery_app import celery_app

__all__ = ["settings", "get_settings", "celery_app"]
