import os
from collections.abc import AsyncGenerator
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file; settings are read at import time
load_dotenv()
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./clinic_test.db")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import NullPool

from clinic_api.core.access import Role
from clinic_api.core.security import create_user_token, get_password_hash
from clinic_api.database import Database
from clinic_api.main import create_app
from clinic_api.repositories.users import UserRepository

TEST_PASSWORD = "secret123"
PASSWORD_HASH = get_password_hash(TEST_PASSWORD)

# Inserted in this order, so ids are 1..5
SEED_USERS = (
    ("patient", "Pat Patient", Role.PATIENT),
    ("doctor", "Dana Doctor", Role.DOCTOR),
    ("admin", "Ada Admin", Role.ADMIN),
    ("other_patient", "Otto Patient", Role.PATIENT),
    ("other_doctor", "Olga Doctor", Role.DOCTOR),
)


def bearer(user_id: int, role: Role) -> dict[str, str]:
    """Authorization header for a user."""
    return {"Authorization": f"Bearer {create_user_token(user_id, role.value)}"}


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """Fresh SQLite database with tables and lookup data."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'clinic.db'}", poolclass=NullPool)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(database: Database) -> FastAPI:
    """Application serving the test database."""
    return create_app(database=database)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def users(database: Database) -> dict[str, int]:
    """Insert one user per entry of SEED_USERS and return their ids."""
    ids = {}
    async with database.session() as session:
        repository = UserRepository(session)
        for key, name, role in SEED_USERS:
            ids[key] = await repository.create_user(
                name=name,
                email=f"{key}@clinic.org",
                password_hash=PASSWORD_HASH,
                role=role.value,
            )
    return ids


@pytest.fixture
def auth_headers(users: dict[str, int]) -> dict[str, dict[str, str]]:
    """Authorization headers keyed like SEED_USERS."""
    return {key: bearer(users[key], role) for key, _, role in SEED_USERS}


@pytest.fixture
def sample_appointment_data(users: dict[str, int]) -> dict:
    """Appointment booked by the seeded patient with the seeded doctor."""
    return {
        "patientId": users["patient"],
        "doctorId": users["doctor"],
        "date": "2025-01-15",
        "time": "09:00",
        "reason": "Regular checkup",
    }
