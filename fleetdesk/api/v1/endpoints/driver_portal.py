"""
Driver self-service endpoints.

Every edit made here sends the edited record back to review: a driver's
profile, photo or documents reset the driver, and a vehicle's details,
photo or documents reset that vehicle. Responses carry
requires_refetch=True; clients reload instead of patching local state.
"""
from typing import Any
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.dependencies import DriverUser
from fleetdesk.db.database import get_async_session
from fleetdesk.models import Driver, DriverDocument, User, Vehicle, VehicleDocument
from fleetdesk.models.enums import DriverDocumentType, EntityKind, VehicleDocumentType
from fleetdesk.schemas.document import DocumentUploadBase, DriverDocumentUpload, VehicleDocumentUpload
from fleetdesk.schemas.driver import DriverDetail, DriverProfileUpdate, ProfilePhotoUpdate
from fleetdesk.schemas.status import SelfServiceResponse
from fleetdesk.schemas.vehicle import DriverVehicleUpdate, VehicleDetail, VehiclePhotoUpdate
from fleetdesk.services.detail import build_driver_detail, build_vehicle_detail
from fleetdesk.services.lifecycle import force_review

router = APIRouter()
logger = logging.getLogger(__name__)


async def _get_own_driver(session: AsyncSession, user: User) -> Driver:
    if user.driver_id is None:
        raise HTTPException(status_code=403, detail="Account is not linked to a driver")

    result = await session.execute(
        select(Driver).where(Driver.id == user.driver_id, Driver.is_deleted == False)
    )
    driver = result.scalar_one_or_none()

    if not driver:
        raise HTTPException(status_code=404, detail="Driver not found")

    return driver


async def _get_own_vehicle(session: AsyncSession, user: User, vehicle_id: UUID) -> Vehicle:
    if user.driver_id is None:
        raise HTTPException(status_code=403, detail="Account is not linked to a driver")

    result = await session.execute(
        select(Vehicle).where(Vehicle.id == vehicle_id, Vehicle.driver_id == user.driver_id)
    )
    vehicle = result.scalar_one_or_none()

    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")

    return vehicle


def _upsert_document(owner: Any, document_type: Any, data: DocumentUploadBase, factory) -> Any:
    """Replace the owner's document of the same type in place, or create it."""
    values = data.model_dump(exclude={"document_type"})
    for document in owner.documents or []:
        if document.document_type == document_type:
            for field, value in values.items():
                setattr(document, field, value)
            return document
    return factory(document_type=document_type, **values)


def _review_response(kind: EntityKind, entity: Any, cause: str) -> SelfServiceResponse:
    force_review(entity, cause)
    return SelfServiceResponse(
        entity=kind,
        id=entity.id,
        message=f"{kind.label} updated and sent for review",
    )


# =========================================================================
# Profile
# =========================================================================
@router.get("/profile", response_model=DriverDetail)
async def get_profile(
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """The logged-in driver's own record."""
    driver = await _get_own_driver(session, current_user)
    return build_driver_detail(driver)


@router.put("/profile", response_model=SelfServiceResponse)
async def update_profile(
    data: DriverProfileUpdate,
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Edit profile fields; the driver goes back to review."""
    driver = await _get_own_driver(session, current_user)
    update_data = data.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in update_data and update_data["email"] != driver.email:
        existing = await session.execute(
            select(Driver).where(Driver.email == update_data["email"], Driver.id != driver.id)
        )
        if existing.scalar_one_or_none():
            raise HTTPException(
                status_code=400,
                detail=f"Email {update_data['email']} is already registered",
            )

    for field, value in update_data.items():
        setattr(driver, field, value)
    logger.info(f"Driver {driver.id} edited {sorted(update_data)}")

    response = _review_response(EntityKind.DRIVER, driver, "profile update")
    await session.flush()
    return response


@router.put("/profile/photo", response_model=SelfServiceResponse)
async def update_profile_photo(
    data: ProfilePhotoUpdate,
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Replace the profile photo; the driver goes back to review."""
    driver = await _get_own_driver(session, current_user)
    driver.profile_image = data.profile_image

    response = _review_response(EntityKind.DRIVER, driver, "profile photo change")
    await session.flush()
    return response


@router.post("/documents", response_model=SelfServiceResponse)
async def upload_driver_document(
    data: DriverDocumentUpload,
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Upload or replace a driver document; the driver goes back to review."""
    driver = await _get_own_driver(session, current_user)

    document = _upsert_document(
        driver,
        DriverDocumentType(data.document_type),
        data,
        lambda **values: DriverDocument(driver_id=driver.id, **values),
    )
    session.add(document)

    response = _review_response(EntityKind.DRIVER, driver, f"{data.document_type} upload")
    await session.flush()
    return response


# =========================================================================
# Vehicles
# =========================================================================
@router.get("/vehicles", response_model=list[VehicleDetail])
async def list_own_vehicles(
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Vehicles owned by the logged-in driver."""
    if current_user.driver_id is None:
        raise HTTPException(status_code=403, detail="Account is not linked to a driver")

    result = await session.execute(
        select(Vehicle)
        .where(Vehicle.driver_id == current_user.driver_id)
        .order_by(Vehicle.created_at.desc())
    )
    return [build_vehicle_detail(vehicle) for vehicle in result.scalars().all()]


@router.put("/vehicles/{vehicle_id}", response_model=SelfServiceResponse)
async def update_own_vehicle(
    vehicle_id: UUID,
    data: DriverVehicleUpdate,
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Edit vehicle details or features; the vehicle goes back to review."""
    vehicle = await _get_own_vehicle(session, current_user, vehicle_id)

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(vehicle, field, value)

    response = _review_response(EntityKind.VEHICLE, vehicle, "vehicle update")
    await session.flush()
    return response


@router.put("/vehicles/{vehicle_id}/photo", response_model=SelfServiceResponse)
async def update_own_vehicle_photo(
    vehicle_id: UUID,
    data: VehiclePhotoUpdate,
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Replace the vehicle photo; the vehicle goes back to review."""
    vehicle = await _get_own_vehicle(session, current_user, vehicle_id)
    vehicle.car_image = data.car_image

    response = _review_response(EntityKind.VEHICLE, vehicle, "vehicle photo change")
    await session.flush()
    return response


@router.post("/vehicles/{vehicle_id}/documents", response_model=SelfServiceResponse)
async def upload_vehicle_document(
    vehicle_id: UUID,
    data: VehicleDocumentUpload,
    current_user: DriverUser,
    session: AsyncSession = Depends(get_async_session),
):
    """Upload or replace a vehicle document; the vehicle goes back to review."""
    vehicle = await _get_own_vehicle(session, current_user, vehicle_id)

    document = _upsert_document(
        vehicle,
        VehicleDocumentType(data.document_type),
        data,
        lambda **values: VehicleDocument(vehicle_id=vehicle.id, **values),
    )
    session.add(document)

    response = _review_response(EntityKind.VEHICLE, vehicle, f"{data.document_type} upload")
    await session.flush()
    return response
