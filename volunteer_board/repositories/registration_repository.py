# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for volunteer registrations."""
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from volunteer_board.core.database import volunteers
from volunteer_board.core.exceptions import CapacityError, DuplicateError, StoreError
from volunteer_board.core.logging import get_logger
from volunteer_board.models.domain import Registration

logger = get_logger(__name__)

# Same order as the table definition; text() results are typed positionally.
VOLUNTEER_COLS = "id, date, first_name, last_name, phone_number, created_at"
ORDER_BY = "ORDER BY created_at, id"


def _row_to_registration(row) -> Registration:
    created_at = row[5]
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Registration(
        id=row[0],
        date=row[1],
        first_name=row[2],
        last_name=row[3],
        phone_number=row[4],
        created_at=created_at,
    )


def _select(where: str = "", order: str = ORDER_BY):
    return text(f"SELECT {VOLUNTEER_COLS} FROM volunteers {where} {order}").columns(
        *volunteers.c
    )


class RegistrationRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──────────────────────────────────────────────────────────

    def create_registration(self, date: str, first_name: str, last_name: str,
                            phone_number: str, capacity: Optional[int]) -> Registration:
        """Insert one registration after re-checking capacity and duplicates.

        The count and the insert share one serialized transaction, so two
        concurrent sign-ups cannot both take the last slot. ``capacity=None``
        means the day has no ceiling.
        """
        now = datetime.now(timezone.utc)
        with self._store_errors("create_registration"):
            with self._serializable() as conn:
                if capacity is not None:
                    count = conn.execute(
                        text("SELECT COUNT(*) FROM volunteers WHERE date = :date"),
                        {"date": date},
                    ).scalar() or 0
                    if count >= capacity:
                        raise CapacityError(message=f"{date} already has {count} volunteers")

                exists = conn.execute(
                    text("SELECT 1 FROM volunteers WHERE date = :date AND phone_number = :phone"),
                    {"date": date, "phone": phone_number},
                ).fetchone()
                if exists:
                    raise DuplicateError(message=f"Phone number already registered for {date}")

                result = conn.execute(
                    volunteers.insert().values(
                        date=date, first_name=first_name, last_name=last_name,
                        phone_number=phone_number, created_at=now,
                    )
                )
                new_id = result.inserted_primary_key[0]
        return Registration(
            id=new_id, date=date, first_name=first_name, last_name=last_name,
            phone_number=phone_number, created_at=now,
        )

    def delete_registration(self, registration_id: int) -> bool:
        """Return True when a row was removed."""
        with self._store_errors("delete_registration"):
            with self._engine.begin() as conn:
                result = conn.execute(
                    text("DELETE FROM volunteers WHERE id = :id"), {"id": registration_id}
                )
        return result.rowcount > 0

    # ── Read ───────────────────────────────────────────────────────────

    def list_registrations(self) -> List[Registration]:
        """Every registration in sign-up order."""
        with self._store_errors("list_registrations"):
            with self._engine.connect() as conn:
                rows = conn.execute(_select()).fetchall()
        return [_row_to_registration(r) for r in rows]

    def list_grouped_order(self) -> List[Registration]:
        """Every registration ordered by date, then sign-up order."""
        with self._store_errors("list_grouped_order"):
            with self._engine.connect() as conn:
                rows = conn.execute(_select(order="ORDER BY date, created_at, id")).fetchall()
        return [_row_to_registration(r) for r in rows]

    def count_by_date(self, date: str) -> int:
        with self._store_errors("count_by_date"):
            with self._engine.connect() as conn:
                return conn.execute(
                    text("SELECT COUNT(*) FROM volunteers WHERE date = :date"), {"date": date}
                ).scalar() or 0

    def count_all(self) -> int:
        with self._store_errors("count_all"):
            with self._engine.connect() as conn:
                return conn.execute(text("SELECT COUNT(*) FROM volunteers")).scalar() or 0

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    # ── Private ────────────────────────────────────────────────────────

    @contextmanager
    def _serializable(self) -> Iterator[Connection]:
        with self._engine.connect() as conn:
            if conn.dialect.name != "sqlite":
                # SQLite engines already open every transaction with BEGIN IMMEDIATE.
                conn = conn.execution_options(isolation_level="SERIALIZABLE")
            with conn.begin():
                yield conn

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            # Lost a race against a concurrent insert for the same day and phone.
            logger.warning("Unique constraint rejected %s: %s", operation, exc.orig)
            raise DuplicateError(message="Phone number already registered for this day") from exc
        except SQLAlchemyError as exc:
            logger.error("Store failure during %s: %s", operation, exc)
            raise StoreError(message=f"Store failure during {operation}") from exc
