"""
Response builders for list rows and detail views.

Absent nested collections become empty lists, absent prices become zero and
absent trip snapshots become empty objects, so clients can render any record
without null checks. Documents are annotated with their expiry status and
leaves with their derived state.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Optional

from fleetdesk.models.enums import DriverType, LeaveState, ReviewStatus
from fleetdesk.schemas.document import (
    DocumentResponse,
    DocumentSummarySchema,
    ExpiryStatusSchema,
)
from fleetdesk.schemas.driver import DriverDetail, DriverRow, DriverSummary
from fleetdesk.schemas.fleet_company import FleetPartnerDetail, FleetPartnerRow
from fleetdesk.schemas.leave import LeaveResponse
from fleetdesk.schemas.trip import TripDetail, TripStopResponse, TripSummary
from fleetdesk.schemas.vehicle import VehicleDetail, VehicleRow, VehicleSummary
from fleetdesk.services.expiry import evaluate_expiry, summarize_documents
from fleetdesk.services.leave import leave_state
from fleetdesk.services.lifecycle import normalize_status


def as_list(value: Optional[Iterable[Any]]) -> list:
    return list(value) if value else []


def as_dict(value: Optional[dict]) -> dict:
    return dict(value) if value else {}


def as_money(value: Any) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


def _status(entity: Any) -> ReviewStatus:
    return normalize_status(entity.status)


# =========================================================================
# Documents & leaves
# =========================================================================
def build_document(document: Any, today: Optional[date] = None) -> DocumentResponse:
    expiry = evaluate_expiry(document.document_expiry_date, today)
    return DocumentResponse(
        id=document.id,
        document_type=getattr(document.document_type, "value", document.document_type),
        document_number=document.document_number,
        document_expiry_date=document.document_expiry_date,
        document_url=document.document_url,
        expiry=ExpiryStatusSchema.from_status(expiry),
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


def build_documents(
    documents: Optional[Iterable[Any]],
    today: Optional[date] = None,
) -> tuple[list[DocumentResponse], DocumentSummarySchema]:
    """Annotated documents plus their roll-up."""
    items = as_list(documents)
    responses = [build_document(document, today) for document in items]
    summary = summarize_documents(items, today)
    return responses, DocumentSummarySchema.from_summary(summary)


def build_leave(leave: Any, now: Optional[datetime] = None) -> LeaveResponse:
    return LeaveResponse(
        id=leave.id,
        leave_start=leave.leave_start,
        leave_end=leave.leave_end,
        leave_reason=leave.leave_reason,
        state=leave_state(leave.leave_start, leave.leave_end, now),
    )


# =========================================================================
# Trips
# =========================================================================
def build_trip_summary(trip: Any) -> TripSummary:
    return TripSummary(
        id=trip.id,
        trip_type=trip.trip_type,
        pickup_location=trip.pickup_location,
        drop_location=trip.drop_location,
        trip_start_date=trip.trip_start_date,
        trip_end_date=trip.trip_end_date,
        trip_status=trip.trip_status,
        payment_status=trip.payment_status,
        total_price=as_money(trip.total_price),
        driver_id=trip.driver_id,
        vehicle_id=trip.vehicle_id,
    )


def build_trip_detail(trip: Any) -> TripDetail:
    summary = build_trip_summary(trip)
    stops = sorted(as_list(trip.stops), key=lambda stop: stop.stop_order)
    return TripDetail(
        **summary.model_dump(),
        user_id=trip.user_id,
        fleet_company_id=trip.fleet_company_id,
        distance_km=trip.distance_km,
        base_price=as_money(trip.base_price),
        tax_amount=as_money(trip.tax_amount),
        stops=[
            TripStopResponse(stop_order=stop.stop_order, location=stop.location)
            for stop in stops
        ],
        user_details=as_dict(trip.user_details),
        driver_details=as_dict(trip.driver_details),
        vehicle_details=as_dict(trip.vehicle_details),
        fleet_company_details=as_dict(trip.fleet_company_details),
        payment_transaction=as_dict(trip.payment_transaction),
        created_at=trip.created_at,
        updated_at=trip.updated_at,
    )


# =========================================================================
# Vehicles
# =========================================================================
def build_vehicle_summary(vehicle: Any) -> VehicleSummary:
    return VehicleSummary(
        id=vehicle.id,
        car_name=vehicle.car_name,
        car_number=vehicle.car_number,
        car_type=vehicle.car_type,
        status=_status(vehicle),
    )


def build_vehicle_row(vehicle: Any, today: Optional[date] = None) -> VehicleRow:
    documents, summary = build_documents(vehicle.documents, today)
    return VehicleRow(
        **build_vehicle_summary(vehicle).model_dump(),
        car_size=vehicle.car_size,
        car_image=vehicle.car_image,
        owner_name=vehicle.owner_name,
        driver_id=vehicle.driver_id,
        fleet_company_id=vehicle.fleet_company_id,
        status_description=vehicle.status_description,
        documents=documents,
        document_summary=summary,
        created_at=vehicle.created_at,
        updated_at=vehicle.updated_at,
    )


def build_vehicle_detail(vehicle: Any, today: Optional[date] = None) -> VehicleDetail:
    return VehicleDetail(
        **build_vehicle_row(vehicle, today).model_dump(),
        bus_capacity=vehicle.bus_capacity,
        vehicle_age=vehicle.vehicle_age,
        vehicle_condition=vehicle.vehicle_condition,
        wheelchair_accessible=bool(vehicle.wheelchair_accessible),
        features=as_list(vehicle.features),
    )


# =========================================================================
# Drivers
# =========================================================================
def build_driver_summary(driver: Any) -> DriverSummary:
    return DriverSummary(
        id=driver.id,
        full_name=driver.full_name,
        email=driver.email,
        phone_no=driver.phone_no,
        status=_status(driver),
    )


def build_driver_row(driver: Any, today: Optional[date] = None) -> DriverRow:
    documents, summary = build_documents(driver.documents, today)
    return DriverRow(
        **build_driver_summary(driver).model_dump(),
        firstname=driver.firstname,
        lastname=driver.lastname,
        gender=driver.gender,
        city_name=driver.city_name,
        year_of_experience=driver.year_of_experience or 0,
        driver_type=driver.driver_type or DriverType.INDIVIDUAL,
        fleet_company_id=driver.fleet_company_id,
        fleet_company_name=driver.fleet_company_name,
        profile_image=driver.profile_image,
        status_description=driver.status_description,
        documents=documents,
        document_summary=summary,
        created_at=driver.created_at,
        updated_at=driver.updated_at,
    )


def build_driver_detail(
    driver: Any,
    trips: Optional[Iterable[Any]] = None,
    today: Optional[date] = None,
    now: Optional[datetime] = None,
) -> DriverDetail:
    leaves = [build_leave(leave, now) for leave in as_list(driver.leave_history)]
    active = next((leave for leave in leaves if leave.state == LeaveState.ACTIVE), None)
    return DriverDetail(
        **build_driver_row(driver, today).model_dump(),
        address=driver.address,
        zip_code=driver.zip_code,
        vehicles=[build_vehicle_summary(vehicle) for vehicle in as_list(driver.vehicles)],
        trips=[build_trip_summary(trip) for trip in as_list(trips)],
        leave_history=leaves,
        active_leave=active,
    )


# =========================================================================
# Fleet partners
# =========================================================================
def build_fleet_partner_row(company: Any, today: Optional[date] = None) -> FleetPartnerRow:
    documents, summary = build_documents(company.documents, today)
    return FleetPartnerRow(
        id=company.id,
        company_name=company.company_name,
        email=company.email,
        phone_no=company.phone_no,
        city_name=company.city_name,
        contact_person_name=company.contact_person_name,
        fleet_size=company.fleet_size or 0,
        status=_status(company),
        status_description=company.status_description,
        documents=documents,
        document_summary=summary,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )


def build_fleet_partner_detail(company: Any, today: Optional[date] = None) -> FleetPartnerDetail:
    drivers = [driver for driver in as_list(company.drivers) if not driver.is_deleted]
    return FleetPartnerDetail(
        **build_fleet_partner_row(company, today).model_dump(),
        legal_entity_type=company.legal_entity_type,
        business_address=company.business_address,
        contact_person_position=company.contact_person_position,
        years_experience=company.years_experience or 0,
        drivers=[build_driver_summary(driver) for driver in drivers],
        vehicles=[build_vehicle_summary(vehicle) for vehicle in as_list(company.vehicles)],
    )
