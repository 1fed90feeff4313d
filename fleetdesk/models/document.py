"""
Document models for FleetDesk.

Each owner type has its own table; all share DocumentMixin columns so the
expiry evaluator treats them identically.
"""
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetdesk.models.base import BaseModel, DocumentMixin
from fleetdesk.models.enums import (
    DriverDocumentType,
    FleetCompanyDocumentType,
    VehicleDocumentType,
)

if TYPE_CHECKING:
    from fleetdesk.models.driver import Driver
    from fleetdesk.models.fleet_company import FleetCompany
    from fleetdesk.models.vehicle import Vehicle


def _enum(enum_cls, name: str) -> Enum:
    return Enum(
        enum_cls,
        name=name,
        create_type=False,
        values_callable=lambda e: [m.value for m in e],
    )


class DriverDocument(BaseModel, DocumentMixin):
    """Driver paperwork (license, identity proof, ...)."""
    __tablename__ = "driver_documents"
    __table_args__ = (UniqueConstraint("driver_id", "document_type"),)

    driver_id: Mapped[UUID] = mapped_column(
        ForeignKey("drivers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    document_type: Mapped[DriverDocumentType] = mapped_column(
        _enum(DriverDocumentType, "driver_document_type"),
        nullable=False,
    )

    driver: Mapped["Driver"] = relationship("Driver", back_populates="documents")


class VehicleDocument(BaseModel, DocumentMixin):
    """Vehicle paperwork (registration, insurance, fitness, permit, pollution)."""
    __tablename__ = "vehicle_documents"
    __table_args__ = (UniqueConstraint("vehicle_id", "document_type"),)

    vehicle_id: Mapped[UUID] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    document_type: Mapped[VehicleDocumentType] = mapped_column(
        _enum(VehicleDocumentType, "vehicle_document_type"),
        nullable=False,
    )

    vehicle: Mapped["Vehicle"] = relationship("Vehicle", back_populates="documents")


class FleetCompanyDocument(BaseModel, DocumentMixin):
    """Fleet company paperwork (business license, tax registration, ...)."""
    __tablename__ = "fleet_company_documents"
    __table_args__ = (UniqueConstraint("fleet_company_id", "document_type"),)

    fleet_company_id: Mapped[UUID] = mapped_column(
        ForeignKey("fleet_companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    document_type: Mapped[FleetCompanyDocumentType] = mapped_column(
        _enum(FleetCompanyDocumentType, "fleet_company_document_type"),
        nullable=False,
    )

    fleet_company: Mapped["FleetCompany"] = relationship(
        "FleetCompany", back_populates="documents"
    )
