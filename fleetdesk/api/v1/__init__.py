"""
API v1 router aggregation.
"""
from fastapi import APIRouter

from fleetdesk.api.v1.endpoints import (
    auth,
    dashboard,
    driver_portal,
    drivers,
    fleet_partners,
    notifications,
    payouts,
    trips,
    vehicles,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router)

api_router.include_router(
    drivers.router,
    prefix="/drivers",
    tags=["Drivers"],
)

api_router.include_router(
    vehicles.router,
    prefix="/vehicles",
    tags=["Vehicles"],
)

api_router.include_router(
    fleet_partners.router,
    prefix="/fleet-partners",
    tags=["Fleet Partners"],
)

api_router.include_router(
    trips.router,
    prefix="/trips",
    tags=["Trips"],
)

api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"],
)

api_router.include_router(
    payouts.router,
    prefix="/payouts",
    tags=["Payouts"],
)

api_router.include_router(
    notifications.router,
    prefix="/notifications",
    tags=["Notifications"],
)

api_router.include_router(
    driver_portal.router,
    prefix="/driver",
    tags=["Driver Portal"],
)
