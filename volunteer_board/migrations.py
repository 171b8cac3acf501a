# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
One-time schema migration: split the legacy ``full_name`` column.

Early deployments stored a single ``full_name``. This step adds
``first_name``/``last_name``, fills them from ``full_name`` (split at the
first whitespace, capitalized), drops the old column and creates the
indexes. Earlier versions accepted the same phone number twice for one day;
only the first of such sign-ups survives. Running it again is a no-op.

    python -m volunteer_board.migrations
"""
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from volunteer_board.core.database import volunteers
from volunteer_board.core.logging import get_logger
from volunteer_board.services.registration_service import normalize_name

logger = get_logger(__name__)


def split_full_name(full_name: str) -> tuple[str, str]:
    """``"ahmed ali hassan"`` -> ``("Ahmed", "Ali hassan")``."""
    parts = (full_name or "").strip().split(None, 1)
    if not parts:
        return "", ""
    first = normalize_name(parts[0])
    last = normalize_name(parts[1]) if len(parts) > 1 else ""
    return first, last


def _drop_duplicate_signups(conn) -> int:
    """Keep the earliest row per (date, phone_number) so the unique index can be built."""
    result = conn.execute(text(
        "DELETE FROM volunteers WHERE id NOT IN "
        "(SELECT MIN(id) FROM volunteers GROUP BY date, phone_number)"
    ))
    return result.rowcount


def needs_migration(engine: Engine) -> bool:
    inspector = inspect(engine)
    if not inspector.has_table("volunteers"):
        return False
    columns = {c["name"] for c in inspector.get_columns("volunteers")}
    return "full_name" in columns


def migrate_full_name(engine: Engine) -> int:
    """Migrate the legacy layout. Returns the number of rows rewritten."""
    if not needs_migration(engine):
        return 0

    columns = {c["name"] for c in inspect(engine).get_columns("volunteers")}
    migrated = 0
    with engine.begin() as conn:
        for column in ("first_name", "last_name"):
            if column not in columns:
                conn.execute(text(
                    f"ALTER TABLE volunteers ADD COLUMN {column} VARCHAR(255) NOT NULL DEFAULT ''"
                ))
        dropped = _drop_duplicate_signups(conn)
        if dropped:
            logger.warning("Dropped %d duplicate sign-ups (same day and phone number)", dropped)
        rows = conn.execute(text("SELECT id, full_name FROM volunteers")).fetchall()
        for row_id, full_name in rows:
            first, last = split_full_name(full_name)
            conn.execute(
                text("UPDATE volunteers SET first_name = :first, last_name = :last WHERE id = :id"),
                {"first": first, "last": last, "id": row_id},
            )
            migrated += 1
        conn.execute(text("ALTER TABLE volunteers DROP COLUMN full_name"))
        for index in volunteers.indexes:
            index.create(conn, checkfirst=True)

    logger.info("Migrated %d registrations from full_name", migrated)
    return migrated


if __name__ == "__main__":
    from volunteer_board.core.database import build_engine

    _engine = build_engine()
    try:
        migrate_full_name(_engine)
    finally:
        _engine.dispose()
