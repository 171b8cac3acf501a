# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Public sign-up board. Lists days, registers, admin delete.
Thin HTTP layer: delegates ALL logic to the services.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from volunteer_board.core.config import Settings
from volunteer_board.core.dependencies import (
    get_admin_service,
    get_registration_service,
    get_settings,
)
from volunteer_board.core.exceptions import ValidationError
from volunteer_board.models.domain import DaySlot
from volunteer_board.schemas import (
    BoardOut,
    BoardStats,
    DayInfo,
    DeleteResult,
    ErrorResponse,
    HijriOut,
    VolunteerCreate,
    VolunteerCreated,
    VolunteerDelete,
    VolunteerName,
)
from volunteer_board.services.admin_service import AdminService
from volunteer_board.services.ramadan_calendar import SUPPORTED_LOCALES, RamadanCalendar
from volunteer_board.services.registration_service import RegistrationService

router = APIRouter(prefix="/api", tags=["Volunteers"])


def _day_info(slot: DaySlot, calendar: RamadanCalendar, locale: Optional[str]) -> DayInfo:
    info = DayInfo(
        date=slot.date,
        count=slot.count,
        is_full=slot.is_full,
        is_eid=slot.is_eid,
        volunteers=[
            VolunteerName(first_name=v.first_name, last_name=v.last_name)
            for v in slot.volunteers
        ],
    )
    if locale:
        info.display_date = calendar.format_display_date(slot.date, locale)
        if not slot.is_eid:
            info.hijri = HijriOut(**calendar.hijri_label(slot.date, locale)._asdict())
    return info


@router.get("/volunteers", response_model=BoardOut)
def list_volunteers(
    response: Response,
    locale: Optional[str] = Query(default=None, pattern=f"^({'|'.join(SUPPORTED_LOCALES)})$"),
    service: RegistrationService = Depends(get_registration_service),
    cfg: Settings = Depends(get_settings),
):
    """Every eligible day with its volunteers, plus the Eid entry."""
    board = service.list_by_date()
    response.headers["Cache-Control"] = f"public, max-age={cfg.CACHE_MAX_AGE_SECONDS}"
    return BoardOut(
        days=[_day_info(d, service.calendar, locale) for d in board.days],
        eid=_day_info(board.eid, service.calendar, locale),
    )


@router.get("/volunteers/stats", response_model=BoardStats)
def volunteer_stats(service: RegistrationService = Depends(get_registration_service)):
    return BoardStats(**service.get_stats())


@router.post(
    "/volunteers",
    status_code=201,
    response_model=VolunteerCreated,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields or ineligible date"},
        409: {"model": ErrorResponse, "description": "Day full or phone already registered"},
    },
)
def register_volunteer(
    body: VolunteerCreate,
    service: RegistrationService = Depends(get_registration_service),
):
    registration = service.register(
        date=body.date,
        first_name=body.first_name,
        last_name=body.last_name,
        phone_number=body.phone_number,
    )
    return VolunteerCreated(id=registration.id)


@router.delete(
    "/volunteers",
    response_model=DeleteResult,
    responses={
        401: {"model": ErrorResponse, "description": "Wrong admin password"},
        404: {"model": ErrorResponse, "description": "No such registration"},
        503: {"model": ErrorResponse, "description": "Admin password not configured"},
    },
)
def delete_volunteer(
    body: VolunteerDelete,
    admin: AdminService = Depends(get_admin_service),
):
    admin.verify(body.password)
    if body.id is None:
        raise ValidationError("missing_id", "ID is required")
    admin.remove(body.id, body.password)
    return DeleteResult(message="Volunteer deleted successfully")
