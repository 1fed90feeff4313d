"""001_baseline

Baseline migration capturing the full FleetDesk schema.

Revision ID: 0001
Revises: (none)
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_TABLES_WITH_TRIGGERS = [
    "fleet_companies",
    "drivers",
    "vehicles",
    "users",
    "driver_documents",
    "vehicle_documents",
    "fleet_company_documents",
    "driver_leaves",
    "trips",
    "trip_stops",
    "notifications",
]


def upgrade() -> None:
    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ------------------------------------------------------------------
    # Enum types
    # ------------------------------------------------------------------
    op.execute(
        "CREATE TYPE review_status AS ENUM ('in_review', 'approved', 'rejected')"
    )
    op.execute("CREATE TYPE driver_type AS ENUM ('individual', 'fleet_partner')")
    op.execute("CREATE TYPE user_role AS ENUM ('admin', 'driver', 'fleet_company')")
    op.execute(
        "CREATE TYPE driver_document_type AS ENUM "
        "('driving_license', 'identity_proof', 'address_proof', "
        "'police_verification', 'medical_certificate')"
    )
    op.execute(
        "CREATE TYPE vehicle_document_type AS ENUM "
        "('registration', 'insurance', 'fitness', 'permit', 'pollution')"
    )
    op.execute(
        "CREATE TYPE fleet_company_document_type AS ENUM "
        "('business_license', 'tax_registration', 'insurance_policy', 'operating_permit')"
    )
    op.execute(
        "CREATE TYPE trip_status AS ENUM "
        "('upcoming', 'running', 'completed', 'canceled')"
    )
    op.execute("CREATE TYPE payment_status AS ENUM ('pending', 'completed')")
    op.execute(
        "CREATE TYPE trip_type AS ENUM ('single_trip', 'round_trip', 'multi_stop')"
    )
    op.execute(
        "CREATE TYPE notification_type AS ENUM "
        "('document_expired', 'document_expiring', 'status_changed')"
    )

    # ------------------------------------------------------------------
    # Tables (dependency order)
    # ------------------------------------------------------------------

    # --- fleet_companies ---
    op.execute("""
        CREATE TABLE fleet_companies (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            company_name VARCHAR(150) NOT NULL,
            email VARCHAR(100) UNIQUE NOT NULL,
            phone_no VARCHAR(20),
            city_name VARCHAR(100),
            legal_entity_type VARCHAR(50),
            business_address TEXT,
            contact_person_name VARCHAR(100),
            contact_person_position VARCHAR(100),
            fleet_size INTEGER NOT NULL DEFAULT 0,
            years_experience INTEGER NOT NULL DEFAULT 0,
            status review_status DEFAULT 'in_review',
            status_description VARCHAR(500),
            is_deleted BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute(
        "CREATE INDEX ix_fleet_companies_company_name ON fleet_companies (company_name)"
    )

    # --- drivers ---
    op.execute("""
        CREATE TABLE drivers (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            firstname VARCHAR(50) NOT NULL,
            lastname VARCHAR(50) NOT NULL,
            email VARCHAR(100) NOT NULL,
            phone_no VARCHAR(20),
            gender VARCHAR(20),
            address TEXT,
            city_name VARCHAR(100),
            zip_code VARCHAR(20),
            year_of_experience INTEGER NOT NULL DEFAULT 0,
            driver_type driver_type NOT NULL DEFAULT 'individual',
            fleet_company_id UUID REFERENCES fleet_companies(id),
            profile_image VARCHAR(500),
            status review_status DEFAULT 'in_review',
            status_description VARCHAR(500),
            is_deleted BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute("CREATE UNIQUE INDEX ix_drivers_email ON drivers (email)")

    # --- vehicles ---
    op.execute("""
        CREATE TABLE vehicles (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            car_name VARCHAR(100) NOT NULL,
            car_number VARCHAR(30) NOT NULL,
            car_type VARCHAR(50),
            car_size VARCHAR(50),
            car_image VARCHAR(500),
            bus_capacity INTEGER,
            vehicle_age INTEGER,
            vehicle_condition VARCHAR(50),
            wheelchair_accessible BOOLEAN NOT NULL DEFAULT FALSE,
            features JSONB DEFAULT '[]'::jsonb,
            driver_id UUID REFERENCES drivers(id),
            fleet_company_id UUID REFERENCES fleet_companies(id),
            status review_status DEFAULT 'in_review',
            status_description VARCHAR(500),
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute("CREATE UNIQUE INDEX ix_vehicles_car_number ON vehicles (car_number)")

    # --- users ---
    op.execute("""
        CREATE TABLE users (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            email VARCHAR(100) NOT NULL,
            hashed_password VARCHAR(255) NOT NULL,
            role user_role NOT NULL,
            driver_id UUID REFERENCES drivers(id) ON DELETE CASCADE,
            fleet_company_id UUID REFERENCES fleet_companies(id) ON DELETE CASCADE,
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute("CREATE UNIQUE INDEX ix_users_email ON users (email)")

    # --- documents (one table per owner type) ---
    op.execute("""
        CREATE TABLE driver_documents (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            driver_id UUID NOT NULL REFERENCES drivers(id) ON DELETE CASCADE,
            document_type driver_document_type NOT NULL,
            document_number VARCHAR(100),
            document_expiry_date DATE,
            document_url VARCHAR(500),
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT uq_driver_documents_driver_id_document_type
                UNIQUE (driver_id, document_type)
        )
    """)
    op.execute(
        "CREATE INDEX ix_driver_documents_driver_id ON driver_documents (driver_id)"
    )

    op.execute("""
        CREATE TABLE vehicle_documents (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            vehicle_id UUID NOT NULL REFERENCES vehicles(id) ON DELETE CASCADE,
            document_type vehicle_document_type NOT NULL,
            document_number VARCHAR(100),
            document_expiry_date DATE,
            document_url VARCHAR(500),
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT uq_vehicle_documents_vehicle_id_document_type
                UNIQUE (vehicle_id, document_type)
        )
    """)
    op.execute(
        "CREATE INDEX ix_vehicle_documents_vehicle_id ON vehicle_documents (vehicle_id)"
    )

    op.execute("""
        CREATE TABLE fleet_company_documents (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            fleet_company_id UUID NOT NULL REFERENCES fleet_companies(id) ON DELETE CASCADE,
            document_type fleet_company_document_type NOT NULL,
            document_number VARCHAR(100),
            document_expiry_date DATE,
            document_url VARCHAR(500),
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT uq_fleet_company_documents_fleet_company_id_document_type
                UNIQUE (fleet_company_id, document_type)
        )
    """)
    op.execute(
        "CREATE INDEX ix_fleet_company_documents_fleet_company_id "
        "ON fleet_company_documents (fleet_company_id)"
    )

    # --- driver_leaves ---
    op.execute("""
        CREATE TABLE driver_leaves (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            driver_id UUID NOT NULL REFERENCES drivers(id) ON DELETE CASCADE,
            leave_start TIMESTAMP WITH TIME ZONE NOT NULL,
            leave_end TIMESTAMP WITH TIME ZONE NOT NULL,
            leave_reason TEXT,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute("CREATE INDEX ix_driver_leaves_driver_id ON driver_leaves (driver_id)")

    # --- trips ---
    op.execute("""
        CREATE TABLE trips (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            user_id UUID REFERENCES users(id),
            driver_id UUID REFERENCES drivers(id),
            vehicle_id UUID REFERENCES vehicles(id),
            fleet_company_id UUID REFERENCES fleet_companies(id),
            trip_type trip_type NOT NULL DEFAULT 'single_trip',
            pickup_location TEXT NOT NULL,
            drop_location TEXT NOT NULL,
            trip_start_date TIMESTAMP WITH TIME ZONE NOT NULL,
            trip_end_date TIMESTAMP WITH TIME ZONE,
            distance_km DECIMAL(10, 2),
            trip_status trip_status NOT NULL DEFAULT 'upcoming',
            payment_status payment_status NOT NULL DEFAULT 'pending',
            base_price DECIMAL(12, 2) NOT NULL DEFAULT 0,
            tax_amount DECIMAL(12, 2) NOT NULL DEFAULT 0,
            total_price DECIMAL(12, 2) NOT NULL DEFAULT 0,
            user_details JSONB,
            driver_details JSONB,
            vehicle_details JSONB,
            fleet_company_details JSONB,
            payment_transaction JSONB,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute("CREATE INDEX ix_trips_driver_id ON trips (driver_id)")
    op.execute("CREATE INDEX ix_trips_fleet_company_id ON trips (fleet_company_id)")
    op.execute("CREATE INDEX ix_trips_trip_status ON trips (trip_status)")

    # --- trip_stops ---
    op.execute("""
        CREATE TABLE trip_stops (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            trip_id UUID NOT NULL REFERENCES trips(id) ON DELETE CASCADE,
            stop_order INTEGER NOT NULL,
            location VARCHAR(500) NOT NULL,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute("CREATE INDEX ix_trip_stops_trip_id ON trip_stops (trip_id)")

    # --- notifications ---
    op.execute("""
        CREATE TABLE notifications (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            recipient_role user_role NOT NULL,
            driver_id UUID REFERENCES drivers(id) ON DELETE CASCADE,
            fleet_company_id UUID REFERENCES fleet_companies(id) ON DELETE CASCADE,
            notification_type notification_type NOT NULL,
            title VARCHAR(200) NOT NULL,
            message TEXT NOT NULL,
            reference_key VARCHAR(200),
            is_read BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute(
        "CREATE INDEX ix_notifications_recipient_role ON notifications (recipient_role)"
    )
    op.execute(
        "CREATE INDEX ix_notifications_reference_key ON notifications (reference_key)"
    )

    # ------------------------------------------------------------------
    # Functions & triggers
    # ------------------------------------------------------------------
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = CURRENT_TIMESTAMP;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    for table in _TABLES_WITH_TRIGGERS:
        op.execute(
            f"CREATE TRIGGER update_{table}_updated_at "
            f"BEFORE UPDATE ON {table} "
            f"FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()"
        )


def downgrade() -> None:
    # Drop triggers
    for table in _TABLES_WITH_TRIGGERS:
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # ------------------------------------------------------------------
    # Drop tables (reverse dependency order)
    # ------------------------------------------------------------------
    op.execute("DROP TABLE IF EXISTS notifications CASCADE")
    op.execute("DROP TABLE IF EXISTS trip_stops CASCADE")
    op.execute("DROP TABLE IF EXISTS trips CASCADE")
    op.execute("DROP TABLE IF EXISTS driver_leaves CASCADE")
    op.execute("DROP TABLE IF EXISTS fleet_company_documents CASCADE")
    op.execute("DROP TABLE IF EXISTS vehicle_documents CASCADE")
    op.execute("DROP TABLE IF EXISTS driver_documents CASCADE")
    op.execute("DROP TABLE IF EXISTS users CASCADE")
    op.execute("DROP TABLE IF EXISTS vehicles CASCADE")
    op.execute("DROP TABLE IF EXISTS drivers CASCADE")
    op.execute("DROP TABLE IF EXISTS fleet_companies CASCADE")

    # ------------------------------------------------------------------
    # Drop enum types
    # ------------------------------------------------------------------
    op.execute("DROP TYPE IF EXISTS notification_type")
    op.execute("DROP TYPE IF EXISTS trip_type")
    op.execute("DROP TYPE IF EXISTS payment_status")
    op.execute("DROP TYPE IF EXISTS trip_status")
    op.execute("DROP TYPE IF EXISTS fleet_company_document_type")
    op.execute("DROP TYPE IF EXISTS vehicle_document_type")
    op.execute("DROP TYPE IF EXISTS driver_document_type")
    op.execute("DROP TYPE IF EXISTS user_role")
    op.execute("DROP TYPE IF EXISTS driver_type")
    op.execute("DROP TYPE IF EXISTS review_status")
