# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
Field names go over the wire in camelCase.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ── Public board ──

class VolunteerName(_CamelModel):
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")


class HijriOut(BaseModel):
    day: int
    month: str
    year: int


class DayInfo(_CamelModel):
    date: str
    count: int
    is_full: bool = Field(..., alias="isFull")
    is_eid: bool = Field(..., alias="isEid")
    volunteers: List[VolunteerName] = []
    display_date: Optional[str] = Field(default=None, alias="displayDate")
    hijri: Optional[HijriOut] = None


class BoardOut(BaseModel):
    days: List[DayInfo]
    eid: DayInfo


class BoardStats(_CamelModel):
    total: int
    days: int
    full_days: int = Field(..., alias="fullDays")
    eid_count: int = Field(..., alias="eidCount")


# ── Registration ──

class VolunteerCreate(_CamelModel):
    """Fields are optional here so a missing one yields ``missing_fields``."""
    date: Optional[str] = Field(default=None, max_length=32)
    first_name: Optional[str] = Field(default=None, alias="firstName", max_length=255)
    last_name: Optional[str] = Field(default=None, alias="lastName", max_length=255)
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber", max_length=64)


class VolunteerCreated(BaseModel):
    success: bool = True
    id: int


class VolunteerDelete(BaseModel):
    id: Optional[int] = None
    password: Optional[str] = None


class DeleteResult(BaseModel):
    success: bool = True
    message: str


# ── Admin ──

class AdminLogin(BaseModel):
    password: Optional[str] = None


class RegistrationOut(_CamelModel):
    id: int
    date: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    phone_number: str = Field(..., alias="phoneNumber")
    created_at: str = Field(..., alias="createdAt")


class AdminListing(BaseModel):
    success: bool = True
    data: Dict[str, List[RegistrationOut]]
    total: int


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
