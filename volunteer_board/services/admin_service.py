# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Admin actions gated by a shared secret (listing, CSV export, delete).
"""

import csv
import hmac
import io
from collections import OrderedDict
from datetime import date as date_cls
from typing import Any

from volunteer_board.core.exceptions import AdminNotConfiguredError, AuthError
from volunteer_board.core.logging import get_logger
from volunteer_board.metrics import ADMIN_AUTH_FAILURES
from volunteer_board.models.domain import Registration
from volunteer_board.services.registration_service import RegistrationService

logger = get_logger(__name__)

CSV_HEADER = ("Date", "First Name", "Last Name", "Phone Number", "Registered At")


class AdminService:
    """Password-gated views over every registration."""

    def __init__(self, registrations: RegistrationService, admin_secret: str) -> None:
        self._registrations = registrations
        self._secret = admin_secret or ""

    def verify(self, secret: str | None) -> None:
        """Raise unless ``secret`` matches. An unset secret refuses everyone."""
        if not self._secret:
            ADMIN_AUTH_FAILURES.labels(reason="admin_not_configured").inc()
            logger.error("Admin request refused: ADMIN_PASSWORD is not configured")
            raise AdminNotConfiguredError(message="Admin access is not configured")
        if not hmac.compare_digest((secret or "").encode("utf-8"), self._secret.encode("utf-8")):
            ADMIN_AUTH_FAILURES.labels(reason="invalid_password").inc()
            logger.warning("Admin request refused: invalid password")
            raise AuthError(message="Invalid password")

    def grouped(self, secret: str | None) -> dict[str, Any]:
        """All registrations keyed by day, days in ascending order."""
        self.verify(secret)
        registrations = self._registrations.list_all()
        data: "OrderedDict[str, list[Registration]]" = OrderedDict()
        for registration in registrations:
            data.setdefault(registration.date, []).append(registration)
        return {"data": data, "total": len(registrations)}

    def export_csv(self, secret: str | None) -> str:
        self.verify(secret)
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for r in self._registrations.list_all():
            writer.writerow([
                r.date, r.first_name, r.last_name, r.phone_number,
                r.created_at.isoformat(),
            ])
        logger.info("CSV export generated")
        return buffer.getvalue()

    @staticmethod
    def export_filename(today: date_cls | None = None) -> str:
        today = today or date_cls.today()
        return f"ramadan-volunteers-{today.isoformat()}.csv"

    def remove(self, registration_id: int, secret: str | None) -> None:
        self.verify(secret)
        self._registrations.remove(registration_id)
