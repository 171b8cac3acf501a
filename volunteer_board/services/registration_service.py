# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Volunteer registration. Validation, capacity and the board view.
Coordinates repository writes with metrics and logging.
"""

from collections import defaultdict
from typing import Optional

from volunteer_board.core.exceptions import (
    NotFoundError,
    ValidationError,
    VolunteerBoardError,
)
from volunteer_board.core.logging import get_logger
from volunteer_board.metrics import (
    REGISTRATIONS_CREATED,
    REGISTRATIONS_DELETED,
    REGISTRATIONS_REJECTED,
)
from volunteer_board.models.domain import Board, DaySlot, Registration
from volunteer_board.repositories.registration_repository import RegistrationRepository
from volunteer_board.services.ramadan_calendar import RamadanCalendar

logger = get_logger(__name__)


def normalize_name(name: str) -> str:
    """``"ahmed"`` -> ``"Ahmed"``, ``"ALI"`` -> ``"Ali"``."""
    name = name.strip()
    return name[:1].upper() + name[1:].lower()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class RegistrationService:
    """Business logic for signing volunteers up and taking them off."""

    def __init__(self, repo: RegistrationRepository, calendar: RamadanCalendar) -> None:
        self._repo = repo
        self._calendar = calendar

    @property
    def calendar(self) -> RamadanCalendar:
        return self._calendar

    # ── Commands ──

    def register(self, date: str, first_name: str, last_name: str,
                 phone_number: str) -> Registration:
        """Sign a volunteer up for ``date``.

        Raises ValidationError, CapacityError or DuplicateError. Nothing is
        written unless every check passes.
        """
        try:
            if any(_is_blank(v) for v in (date, first_name, last_name, phone_number)):
                raise ValidationError("missing_fields", "Missing required fields")
            date = date.strip()
            if not self._calendar.is_eligible(date):
                raise ValidationError("invalid_date", f"{date} is not an eligible day")

            is_eid = self._calendar.is_eid(date)
            registration = self._repo.create_registration(
                date=date,
                first_name=normalize_name(first_name),
                last_name=normalize_name(last_name),
                phone_number=phone_number.strip(),
                capacity=None if is_eid else self._calendar.capacity,
            )
        except VolunteerBoardError as exc:
            if exc.status_code < 500:
                REGISTRATIONS_REJECTED.labels(reason=exc.reason).inc()
                logger.info("Registration rejected date=%s reason=%s", date, exc.reason)
            raise

        REGISTRATIONS_CREATED.labels(kind="eid" if is_eid else "day").inc()
        logger.info("Volunteer registered id=%s date=%s", registration.id, registration.date)
        return registration

    def remove(self, registration_id: int) -> None:
        """Delete one registration. Raises NotFoundError when it does not exist."""
        if not self._repo.delete_registration(registration_id):
            raise NotFoundError(message=f"Registration {registration_id} not found")
        REGISTRATIONS_DELETED.inc()
        logger.info("Registration deleted id=%s", registration_id)

    # ── Queries ──

    def list_by_date(self) -> Board:
        """Group every registration by day, in sign-up order.

        Registrations for days outside the current window are left out.
        """
        grouped: dict[str, list[Registration]] = defaultdict(list)
        for registration in self._repo.list_registrations():
            grouped[registration.date].append(registration)

        days = []
        for date in self._calendar.eligible_dates():
            volunteers = grouped.get(date, [])
            days.append(DaySlot(
                date=date,
                count=len(volunteers),
                is_full=self._calendar.is_full(date, len(volunteers)),
                is_eid=False,
                volunteers=volunteers,
            ))

        eid_date = self._calendar.eid_sentinel()
        eid_volunteers = grouped.get(eid_date, [])
        eid = DaySlot(
            date=eid_date,
            count=len(eid_volunteers),
            is_full=False,
            is_eid=True,
            volunteers=eid_volunteers,
        )
        return Board(days=days, eid=eid)

    def list_all(self) -> list[Registration]:
        """Every registration ordered by day, then sign-up order."""
        return self._repo.list_grouped_order()

    def get_stats(self) -> dict:
        board = self.list_by_date()
        return {
            "total": self._repo.count_all(),
            "days": len(board.days),
            "full_days": sum(1 for d in board.days if d.is_full),
            "eid_count": board.eid.count,
        }
