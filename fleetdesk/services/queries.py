"""
Base queries over records that are still live.

Soft-deleted drivers and fleet companies are hidden from lists, counters and
the expiry scan, and so are the vehicles of a deleted driver. Vehicles
without a driver stay visible.
"""
from sqlalchemy import Select, select

from fleetdesk.models import Driver, FleetCompany, Vehicle


def live_drivers() -> Select:
    return select(Driver).where(Driver.is_deleted == False)


def live_fleet_companies() -> Select:
    return select(FleetCompany).where(FleetCompany.is_deleted == False)


def with_live_driver(query: Select) -> Select:
    """Drop rows whose vehicle belongs to a soft-deleted driver; the query must select from vehicles."""
    return (
        query
        .outerjoin(Driver, Vehicle.driver_id == Driver.id)
        .where(Driver.is_deleted.is_not(True))
    )


def live_vehicles() -> Select:
    return with_live_driver(select(Vehicle))
