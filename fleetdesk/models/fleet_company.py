"""
Fleet company (fleet partner) model for FleetDesk.
"""
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetdesk.models.base import BaseModel, ReviewableMixin

if TYPE_CHECKING:
    from fleetdesk.models.document import FleetCompanyDocument
    from fleetdesk.models.driver import Driver
    from fleetdesk.models.vehicle import Vehicle


class FleetCompany(BaseModel, ReviewableMixin):
    """
    Company operating its own drivers and vehicles on the platform.

    Attributes:
        company_name: Registered business name
        legal_entity_type: e.g. LLC, partnership
        contact_person_name: Person handling the account
        fleet_size: Declared number of vehicles
        is_deleted: Soft-delete flag (admin deletion)
    """
    __tablename__ = "fleet_companies"

    company_name: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
    )

    phone_no: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    city_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    legal_entity_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    business_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    contact_person_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    contact_person_position: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    fleet_size: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    years_experience: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    # Relationships
    drivers: Mapped[list["Driver"]] = relationship(
        "Driver",
        back_populates="fleet_company",
        lazy="selectin",
    )

    vehicles: Mapped[list["Vehicle"]] = relationship(
        "Vehicle",
        back_populates="fleet_company",
        lazy="selectin",
    )

    documents: Mapped[list["FleetCompanyDocument"]] = relationship(
        "FleetCompanyDocument",
        back_populates="fleet_company",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<FleetCompany(id={self.id}, company_name={self.company_name!r})>"
