"""
Vehicle model for FleetDesk.
"""
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetdesk.models.base import BaseModel, ReviewableMixin

if TYPE_CHECKING:
    from fleetdesk.models.document import VehicleDocument
    from fleetdesk.models.driver import Driver
    from fleetdesk.models.fleet_company import FleetCompany


class Vehicle(BaseModel, ReviewableMixin):
    """
    Vehicle owned by an individual driver or by a fleet company.

    Editing features or the photo through the driver portal sends the
    vehicle back to IN_REVIEW.
    """
    __tablename__ = "vehicles"

    # =========================================================================
    # Identification
    # =========================================================================
    car_name: Mapped[str] = mapped_column(String(100), nullable=False)

    car_number: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        nullable=False,
        index=True,
        comment="License plate",
    )

    car_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    car_size: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    car_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # =========================================================================
    # Capacity & Condition
    # =========================================================================
    bus_capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    vehicle_age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    vehicle_condition: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    wheelchair_accessible: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    features: Mapped[Optional[list]] = mapped_column(
        JSONB,
        nullable=True,
        default=list,
        comment="Amenities such as ac, wifi, usb_charging",
    )

    # =========================================================================
    # Ownership
    # =========================================================================
    driver_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("drivers.id"),
        nullable=True,
    )

    fleet_company_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("fleet_companies.id"),
        nullable=True,
    )

    # Relationships
    driver: Mapped[Optional["Driver"]] = relationship(
        "Driver",
        back_populates="vehicles",
        lazy="selectin",
    )

    fleet_company: Mapped[Optional["FleetCompany"]] = relationship(
        "FleetCompany",
        back_populates="vehicles",
        lazy="selectin",
    )

    documents: Mapped[list["VehicleDocument"]] = relationship(
        "VehicleDocument",
        back_populates="vehicle",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    @property
    def owner_name(self) -> Optional[str]:
        """Fleet company name, else the driver's full name."""
        if self.fleet_company is not None:
            return self.fleet_company.company_name
        if self.driver is not None:
            return self.driver.full_name
        return None

    def __repr__(self) -> str:
        return f"<Vehicle(id={self.id}, car_number={self.car_number!r}, status={self.status})>"
