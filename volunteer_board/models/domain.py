# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Registration(BaseModel):
    """One volunteer signed up for one day (or for Eid)."""
    id: int
    date: str = Field(..., description="YYYY-MM-DD or the Eid sentinel")
    first_name: str
    last_name: str
    phone_number: str
    created_at: datetime


class DaySlot(BaseModel):
    """Registrations for a single day, in sign-up order."""
    date: str
    count: int = 0
    is_full: bool = False
    is_eid: bool = False
    volunteers: list[Registration] = Field(default_factory=list)


class Board(BaseModel):
    """The public sign-up board: every eligible day plus the Eid bucket."""
    days: list[DaySlot]
    eid: DaySlot
