"""Shared fixtures: an in-memory database and a two-day season."""
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from volunteer_board.core.database import create_schema
from volunteer_board.repositories.registration_repository import RegistrationRepository
from volunteer_board.services.admin_service import AdminService
from volunteer_board.services.ramadan_calendar import RamadanCalendar
from volunteer_board.services.registration_service import RegistrationService

ADMIN_PASSWORD = "test-secret"


def make_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    eng = make_engine()
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def calendar():
    return RamadanCalendar(
        start=date(2026, 2, 19),
        end=date(2026, 2, 20),
        hijri_anchor=date(2026, 2, 19),
    )


@pytest.fixture
def repo(engine):
    return RegistrationRepository(engine)


@pytest.fixture
def service(repo, calendar):
    return RegistrationService(repo, calendar)


@pytest.fixture
def admin(service):
    return AdminService(service, admin_secret=ADMIN_PASSWORD)
