"""
Payout summary for completed trips.

The admin keeps a commission on every completed, priced trip; the rest
goes to the driver. The rate depends on how the driver registered.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union
from uuid import UUID

from fleetdesk.core.config import get_settings
from fleetdesk.models.enums import DriverType

CENTS = Decimal("0.01")


def _money(value: Union[Decimal, int, float, str, None]) -> Decimal:
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def commission_rate(driver_type: Union[DriverType, str, None]) -> Decimal:
    """Admin commission rate for a driver registration type (individual by default)."""
    settings = get_settings()
    if driver_type and DriverType(driver_type) is DriverType.FLEET_PARTNER:
        return settings.fleet_partner_commission_rate
    return settings.individual_commission_rate


@dataclass
class PayoutLine:
    """Split of one trip's total price."""
    trip_id: UUID
    trip_date: Optional[datetime]
    driver_id: Optional[UUID]
    driver_name: str
    driver_type: DriverType
    company_name: str
    total_price: Decimal
    commission_rate: Decimal
    admin_commission: Decimal
    driver_payout: Decimal


@dataclass
class PayoutSummary:
    """Payout lines plus totals."""
    lines: list[PayoutLine] = field(default_factory=list)
    total_revenue: Decimal = Decimal("0.00")
    total_commission: Decimal = Decimal("0.00")
    total_driver_payout: Decimal = Decimal("0.00")

    @property
    def trip_count(self) -> int:
        return len(self.lines)


def split_payout(
    total_price: Union[Decimal, int, float, str, None],
    driver_type: Union[DriverType, str, None],
) -> tuple[Decimal, Decimal, Decimal]:
    """
    Split a trip price into admin commission and driver payout.

    Returns:
        (rate, admin_commission, driver_payout); payout is the remainder so
        the two parts always add up to the rounded price
    """
    price = _money(total_price)
    rate = commission_rate(driver_type)
    commission = _money(price * rate)
    return rate, commission, price - commission


def build_payout_line(trip, driver) -> PayoutLine:
    """Payout line for a trip and the driver who drove it (driver may be None)."""
    driver_type = DriverType.INDIVIDUAL
    if driver is not None and driver.driver_type:
        driver_type = DriverType(driver.driver_type)
    driver_name = driver.full_name if driver is not None else "Unknown Driver"
    company_name = (driver.fleet_company_name if driver is not None else None) or driver_name

    rate, commission, payout = split_payout(trip.total_price, driver_type)
    return PayoutLine(
        trip_id=trip.id,
        trip_date=trip.trip_end_date or trip.trip_start_date,
        driver_id=driver.id if driver is not None else None,
        driver_name=driver_name,
        driver_type=driver_type,
        company_name=company_name,
        total_price=_money(trip.total_price),
        commission_rate=rate,
        admin_commission=commission,
        driver_payout=payout,
    )


def summarize_payouts(rows: Iterable[tuple]) -> PayoutSummary:
    """
    Build the payout summary from (trip, driver) pairs.

    Trips with no positive price are skipped.
    """
    summary = PayoutSummary()
    for trip, driver in rows:
        if _money(trip.total_price) <= 0:
            continue
        line = build_payout_line(trip, driver)
        summary.lines.append(line)
        summary.total_revenue += line.total_price
        summary.total_commission += line.admin_commission
        summary.total_driver_payout += line.driver_payout
    return summary
