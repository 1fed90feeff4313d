"""
Driver model for FleetDesk.
"""
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetdesk.models.base import BaseModel, ReviewableMixin
from fleetdesk.models.enums import DriverType

if TYPE_CHECKING:
    from fleetdesk.models.document import DriverDocument
    from fleetdesk.models.fleet_company import FleetCompany
    from fleetdesk.models.leave import DriverLeave
    from fleetdesk.models.vehicle import Vehicle


class Driver(BaseModel, ReviewableMixin):
    """
    Driver master data.

    Attributes:
        firstname / lastname: Driver's name
        email: Login and contact email
        driver_type: INDIVIDUAL or FLEET_PARTNER
        fleet_company_id: Employing fleet company, if any
        status: Review state (see ReviewableMixin)
        is_deleted: Soft-delete flag (admin deletion)
    """
    __tablename__ = "drivers"

    firstname: Mapped[str] = mapped_column(String(50), nullable=False)
    lastname: Mapped[str] = mapped_column(String(50), nullable=False)

    email: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )

    phone_no: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    city_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    year_of_experience: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    driver_type: Mapped[DriverType] = mapped_column(
        Enum(
            DriverType,
            name="driver_type",
            create_type=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        default=DriverType.INDIVIDUAL,
        nullable=False,
    )

    fleet_company_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("fleet_companies.id"),
        nullable=True,
    )

    profile_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    # Relationships
    fleet_company: Mapped[Optional["FleetCompany"]] = relationship(
        "FleetCompany",
        back_populates="drivers",
        lazy="selectin",
    )

    vehicles: Mapped[list["Vehicle"]] = relationship(
        "Vehicle",
        back_populates="driver",
        lazy="selectin",
    )

    documents: Mapped[list["DriverDocument"]] = relationship(
        "DriverDocument",
        back_populates="driver",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    leave_history: Mapped[list["DriverLeave"]] = relationship(
        "DriverLeave",
        back_populates="driver",
        lazy="selectin",
        order_by="DriverLeave.leave_start.desc()",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()

    @property
    def fleet_company_name(self) -> Optional[str]:
        return self.fleet_company.company_name if self.fleet_company else None

    def __repr__(self) -> str:
        return f"<Driver(id={self.id}, name={self.full_name!r}, status={self.status})>"
