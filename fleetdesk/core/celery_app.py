"""
Celery application configuration for FleetDesk.

Celery runs the periodic document expiry scan outside the API process.

Usage:
    # Start worker (from project root):
    celery -A fleetdesk.core.celery_app worker --loglevel=info

    # Start the scheduler for the daily expiry scan:
    celery -A fleetdesk.core.celery_app beat --loglevel=info
"""
from celery import Celery
from celery.schedules import crontab

from fleetdesk.core.config import settings

# Create Celery application
celery_app = Celery(
    "fleetdesk",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["fleetdesk.services.tasks"],  # Auto-discover tasks
)

# Celery configuration
celery_app.conf.update(
    # Task settings
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # Task execution
    task_acks_late=True,  # Acknowledge after task completes (safety)
    task_reject_on_worker_lost=True,

    # Result backend
    result_expires=86400,  # Results expire after 24 hours

    # Worker settings
    worker_prefetch_multiplier=1,

    # Task routing
    task_routes={
        "fleetdesk.services.tasks.*": {"queue": "default"},
    },

    # Task time limits
    task_soft_time_limit=300,
    task_time_limit=360,

    # Retry settings
    task_default_retry_delay=30,
    task_max_retries=3,
)

# Daily document expiry scan
celery_app.conf.beat_schedule = {
    "scan-document-expiry": {
        "task": "fleetdesk.services.tasks.scan_document_expiry",
        "schedule": crontab(hour=settings.expiry_scan_hour, minute=0),
    },
}
