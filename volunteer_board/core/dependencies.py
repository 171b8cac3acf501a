# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire repositories and services.

The container is built from an explicit engine during the app lifespan and
kept on ``app.state``; controllers reach it through the functions below.
"""

from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.engine import Engine

from volunteer_board.core.config import Settings
from volunteer_board.repositories.registration_repository import RegistrationRepository
from volunteer_board.services.admin_service import AdminService
from volunteer_board.services.ramadan_calendar import RamadanCalendar
from volunteer_board.services.registration_service import RegistrationService


@dataclass
class Container:
    engine: Engine
    registration_repo: RegistrationRepository
    registration_service: RegistrationService
    admin_service: AdminService


def build_container(engine: Engine, cfg: Settings) -> Container:
    repo = RegistrationRepository(engine)
    registrations = RegistrationService(repo, RamadanCalendar.from_settings(cfg))
    admin = AdminService(registrations, admin_secret=cfg.ADMIN_PASSWORD)
    return Container(
        engine=engine,
        registration_repo=repo,
        registration_service=registrations,
        admin_service=admin,
    )


# ── FastAPI dependency functions ──
def get_container(request: Request) -> Container:
    return request.app.state.container


def get_registration_service(request: Request) -> RegistrationService:
    return get_container(request).registration_service


def get_admin_service(request: Request) -> AdminService:
    return get_container(request).admin_service


def get_registration_repo(request: Request) -> RegistrationRepository:
    return get_container(request).registration_repo


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
