"""API test fixtures -- helpers for configuring mock session returns."""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4


def make_mock_result(scalar_value=None, scalars_list=None, rows=None):
    """Create a mock SQLAlchemy Result object."""
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=scalar_value)

    scalars_mock = MagicMock()
    scalars_mock.all = MagicMock(return_value=scalars_list or [])
    scalars_mock.unique = MagicMock(return_value=scalars_mock)
    result.scalars = MagicMock(return_value=scalars_mock)
    result.all = MagicMock(return_value=rows or [])
    result.first = MagicMock(return_value=None)
    result.rowcount = len(scalars_list) if scalars_list else (1 if scalar_value else 0)

    return result


def make_mock_document(
    document_type="driving_license",
    expires_in_days=90,
    document_number="DOC-001",
):
    """Create a mock document ORM object; expires_in_days=None means no expiry date."""
    from fleetdesk.models.enums import DriverDocumentType, FleetCompanyDocumentType, VehicleDocumentType

    for enum_cls in (DriverDocumentType, VehicleDocumentType, FleetCompanyDocumentType):
        if document_type in {member.value for member in enum_cls}:
            document_type = enum_cls(document_type)
            break

    document = MagicMock()
    document.id = uuid4()
    document.document_type = document_type
    document.document_number = document_number
    document.document_expiry_date = (
        date.today() + timedelta(days=expires_in_days) if expires_in_days is not None else None
    )
    document.document_url = "https://files.test/doc.pdf"
    document.created_at = datetime.now()
    document.updated_at = datetime.now()
    return document


def make_mock_leave(start_offset_days=-1, end_offset_days=1, reason="Family"):
    """Create a mock DriverLeave around the current time."""
    now = datetime.now(timezone.utc)
    leave = MagicMock()
    leave.id = uuid4()
    leave.leave_start = now + timedelta(days=start_offset_days)
    leave.leave_end = now + timedelta(days=end_offset_days)
    leave.leave_reason = reason
    return leave


def make_mock_driver(
    driver_id=None,
    firstname="Alex",
    lastname="Doe",
    email="alex@drivers.test",
    status="approved",
    driver_type="individual",
    documents=None,
):
    """Create a mock Driver ORM object."""
    from fleetdesk.models.enums import DriverType, ReviewStatus

    driver = MagicMock()
    driver.id = driver_id or uuid4()
    driver.firstname = firstname
    driver.lastname = lastname
    driver.full_name = f"{firstname} {lastname}"
    driver.email = email
    driver.phone_no = "+15550100"
    driver.gender = "female"
    driver.address = "1 Main St"
    driver.city_name = "Springfield"
    driver.zip_code = "12345"
    driver.year_of_experience = 5
    driver.driver_type = DriverType(driver_type)
    driver.fleet_company_id = None
    driver.fleet_company_name = None
    driver.profile_image = None
    driver.status = ReviewStatus(status) if status else None
    driver.status_description = None
    driver.is_deleted = False
    driver.documents = documents if documents is not None else []
    driver.vehicles = []
    driver.leave_history = []
    driver.created_at = datetime.now()
    driver.updated_at = datetime.now()
    return driver


def make_mock_vehicle(
    vehicle_id=None,
    car_name="Sprinter",
    car_number="AB-123",
    status="in_review",
    driver_id=None,
    documents=None,
    car_type="van",
):
    """Create a mock Vehicle ORM object."""
    from fleetdesk.models.enums import ReviewStatus

    vehicle = MagicMock()
    vehicle.id = vehicle_id or uuid4()
    vehicle.car_name = car_name
    vehicle.car_number = car_number
    vehicle.car_type = car_type
    vehicle.car_size = "large"
    vehicle.car_image = None
    vehicle.owner_name = "Alex Doe"
    vehicle.driver_id = driver_id
    vehicle.fleet_company_id = None
    vehicle.bus_capacity = 12
    vehicle.vehicle_age = 3
    vehicle.vehicle_condition = "good"
    vehicle.wheelchair_accessible = False
    vehicle.features = ["ac", "wifi"]
    vehicle.status = ReviewStatus(status) if status else None
    vehicle.status_description = None
    vehicle.documents = documents if documents is not None else []
    vehicle.created_at = datetime.now()
    vehicle.updated_at = datetime.now()
    return vehicle


def make_mock_fleet_company(
    company_id=None,
    company_name="Metro Fleet",
    status="in_review",
    documents=None,
):
    """Create a mock FleetCompany ORM object."""
    from fleetdesk.models.enums import ReviewStatus

    company = MagicMock()
    company.id = company_id or uuid4()
    company.company_name = company_name
    company.email = "ops@metrofleet.test"
    company.phone_no = "+15550199"
    company.city_name = "Shelbyville"
    company.legal_entity_type = "LLC"
    company.business_address = "9 Depot Rd"
    company.contact_person_name = "Sam Lee"
    company.contact_person_position = "Fleet manager"
    company.fleet_size = 8
    company.years_experience = 4
    company.status = ReviewStatus(status) if status else None
    company.status_description = None
    company.is_deleted = False
    company.documents = documents if documents is not None else []
    company.drivers = []
    company.vehicles = []
    company.created_at = datetime.now()
    company.updated_at = datetime.now()
    return company


def make_mock_trip(
    trip_id=None,
    trip_status="completed",
    total_price="100.00",
    driver_id=None,
):
    """Create a mock Trip ORM object."""
    from fleetdesk.models.enums import PaymentStatus, TripStatus, TripType

    start = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)
    trip = MagicMock()
    trip.id = trip_id or uuid4()
    trip.user_id = uuid4()
    trip.driver_id = driver_id
    trip.vehicle_id = None
    trip.fleet_company_id = None
    trip.trip_type = TripType.SINGLE_TRIP
    trip.pickup_location = "Airport"
    trip.drop_location = "Central Station"
    trip.trip_start_date = start
    trip.trip_end_date = start + timedelta(hours=2)
    trip.distance_km = Decimal("42.50")
    trip.trip_status = TripStatus(trip_status)
    trip.payment_status = PaymentStatus.COMPLETED
    trip.base_price = Decimal("90.00")
    trip.tax_amount = Decimal("10.00")
    trip.total_price = Decimal(total_price) if total_price is not None else None
    trip.stops = []
    trip.user_details = None
    trip.driver_details = None
    trip.vehicle_details = None
    trip.fleet_company_details = None
    trip.payment_transaction = None
    trip.created_at = datetime.now()
    trip.updated_at = datetime.now()
    return trip


def make_mock_notification(notification_id=None, is_read=False):
    """Create a mock Notification ORM object addressed to admins."""
    from fleetdesk.models.enums import NotificationType, UserRole

    notification = MagicMock()
    notification.id = notification_id or uuid4()
    notification.recipient_role = UserRole.ADMIN
    notification.driver_id = None
    notification.fleet_company_id = None
    notification.notification_type = NotificationType.DOCUMENT_EXPIRING
    notification.title = "Insurance expires in 5 days"
    notification.message = "Vehicle Sprinter (AB-123): Insurance expires in 5 days."
    notification.reference_key = None
    notification.is_read = is_read
    notification.created_at = datetime.now()
    notification.updated_at = datetime.now()
    return notification
