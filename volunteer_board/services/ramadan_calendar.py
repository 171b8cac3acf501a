# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Ramadan calendar. Eligible days, the Eid bucket, day capacity and
display labels. Pure computation, no I/O.

The Hijri label is a fixed linear offset from an anchor date (1 Ramadan).
It is only meaningful inside the configured season and is meant for display.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import cached_property
from typing import NamedTuple

from volunteer_board.core.config import Settings, settings

EID_SENTINEL = "EID"
DATE_FORMAT = "%Y-%m-%d"
SUPPORTED_LOCALES = ("de", "ar")
RAMADAN_MAX_DAYS = 30

# Monday first, matching date.weekday().
_WEEKDAYS = {
    "de": ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
    "ar": ("الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"),
}
_MONTHS = {
    "de": (
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    "ar": (
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
}
_HIJRI_MONTHS = {
    "de": {"shaban": "Schaban", "ramadan": "Ramadan"},
    "ar": {"shaban": "شعبان", "ramadan": "رمضان"},
}
_EID_PHRASE = {
    "de": "Eid al-Fitr",
    "ar": "عيد الفطر",
}


class HijriLabel(NamedTuple):
    day: int
    month: str
    year: int


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string. Raises ValueError."""
    return datetime.strptime(value, DATE_FORMAT).date()


def _check_locale(locale: str) -> str:
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"locale must be one of {SUPPORTED_LOCALES}")
    return locale


@dataclass(frozen=True)
class RamadanCalendar:
    """The fixed registration window for one Ramadan season."""

    start: date
    end: date
    hijri_anchor: date
    hijri_year: int = 1447
    capacity: int = 3

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")
        if self.capacity <= 0:
            raise ValueError("capacity must be a positive integer")

    @classmethod
    def from_settings(cls, cfg: Settings = settings) -> "RamadanCalendar":
        return cls(
            start=parse_date(cfg.RAMADAN_START),
            end=parse_date(cfg.RAMADAN_END),
            hijri_anchor=parse_date(cfg.HIJRI_ANCHOR),
            hijri_year=cfg.HIJRI_YEAR,
            capacity=cfg.DAY_CAPACITY,
        )

    # ── Eligibility ──

    @cached_property
    def _dates(self) -> tuple[str, ...]:
        days = (self.end - self.start).days + 1
        return tuple(
            (self.start + timedelta(days=i)).strftime(DATE_FORMAT) for i in range(days)
        )

    @cached_property
    def _date_set(self) -> frozenset[str]:
        return frozenset(self._dates)

    def eligible_dates(self) -> list[str]:
        """Every day from start to end inclusive, ascending."""
        return list(self._dates)

    @staticmethod
    def eid_sentinel() -> str:
        return EID_SENTINEL

    @staticmethod
    def is_eid(value: str) -> bool:
        return value == EID_SENTINEL

    def is_eligible(self, value: str) -> bool:
        if not isinstance(value, str):
            return False
        return value == EID_SENTINEL or value in self._date_set

    def is_full(self, value: str, count: int) -> bool:
        """Eid has no ceiling; every other day is full at ``capacity``."""
        if self.is_eid(value):
            return False
        return count >= self.capacity

    # ── Display ──

    def hijri_label(self, value: str, locale: str = "de") -> HijriLabel:
        """Approximate Hijri day for ``value``.

        The anchor is 1 Ramadan and the day before it is 30 Shaban. Anything
        outside that window raises ValueError.
        """
        _check_locale(locale)
        offset = (parse_date(value) - self.hijri_anchor).days
        months = _HIJRI_MONTHS[locale]
        if offset == -1:
            return HijriLabel(30, months["shaban"], self.hijri_year)
        if offset < -1 or offset >= RAMADAN_MAX_DAYS:
            raise ValueError(f"{value} is outside the Hijri label window")
        return HijriLabel(offset + 1, months["ramadan"], self.hijri_year)

    @staticmethod
    def format_display_date(value: str, locale: str = "de") -> str:
        """Long weekday date in ``locale``; Western digits for both locales."""
        _check_locale(locale)
        if value == EID_SENTINEL:
            return _EID_PHRASE[locale]
        d = parse_date(value)
        weekday = _WEEKDAYS[locale][d.weekday()]
        month = _MONTHS[locale][d.month - 1]
        if locale == "ar":
            return f"{weekday}، {d.day} {month} {d.year}"
        return f"{weekday}, {d.day}. {month} {d.year}"

    def format_date_with_hijri(self, value: str, locale: str = "de") -> str:
        gregorian = self.format_display_date(value, locale)
        if value == EID_SENTINEL:
            return gregorian
        hijri = self.hijri_label(value, locale)
        if locale == "ar":
            return f"{gregorian}\n{hijri.day} {hijri.month} {hijri.year}"
        return f"{gregorian}\n{hijri.day}. {hijri.month} {hijri.year}"


# ── Module-level helpers bound to the configured season ──

default_calendar = RamadanCalendar.from_settings(settings)


def eligible_dates() -> list[str]:
    return default_calendar.eligible_dates()


def eid_sentinel() -> str:
    return EID_SENTINEL


def is_eligible(value: str) -> bool:
    return default_calendar.is_eligible(value)


def hijri_label(value: str, locale: str = "de") -> HijriLabel:
    return default_calendar.hijri_label(value, locale)


def format_display_date(value: str, locale: str = "de") -> str:
    return default_calendar.format_display_date(value, locale)
