"""
Back-office client: HTTP API wrapper and view models.
"""
from fleetdesk.client.api import AdminAPI, ApiClient, ApiError, AuthAPI, DriverAPI
from fleetdesk.client.deletion import DeleteConfirmation, DeleteStage
from fleetdesk.client.lifecycle import ReasonPrompt, StatusLifecycleController, TransitionFailedError
from fleetdesk.client.notifier import LoggingNotifier, Notifier
from fleetdesk.client.views import DriverPortalView, EntityDetailView, EntityListView

__all__ = [
    "AdminAPI",
    "ApiClient",
    "ApiError",
    "AuthAPI",
    "DriverAPI",
    "DeleteConfirmation",
    "DeleteStage",
    "ReasonPrompt",
    "StatusLifecycleController",
    "TransitionFailedError",
    "LoggingNotifier",
    "Notifier",
    "DriverPortalView",
    "EntityDetailView",
    "EntityListView",
]
