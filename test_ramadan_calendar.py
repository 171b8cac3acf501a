"""
Ramadan calendar: eligible days, Eid bucket, capacity and display labels.
Run:  pytest test_ramadan_calendar.py -v
"""
from datetime import date, datetime, timedelta

import pytest

from volunteer_board.core.config import Settings
from volunteer_board.services import ramadan_calendar
from volunteer_board.services.ramadan_calendar import (
    EID_SENTINEL,
    HijriLabel,
    RamadanCalendar,
)


@pytest.fixture
def season():
    """The full 30-day season with default settings."""
    return RamadanCalendar.from_settings(Settings())


# ═══════════════════════════════════════════════════════════════════════════
# ELIGIBLE DATES
# ═══════════════════════════════════════════════════════════════════════════
class TestEligibleDates:
    def test_two_day_window(self, calendar):
        assert calendar.eligible_dates() == ["2026-02-19", "2026-02-20"]

    def test_default_season_is_thirty_days(self, season):
        dates = season.eligible_dates()
        assert len(dates) == 30
        assert dates[0] == "2026-02-19"
        assert dates[-1] == "2026-03-20"

    def test_ascending_without_gaps_or_duplicates(self, season):
        dates = season.eligible_dates()
        assert len(set(dates)) == len(dates)
        parsed = [datetime.strptime(d, "%Y-%m-%d").date() for d in dates]
        for prev, nxt in zip(parsed, parsed[1:]):
            assert nxt - prev == timedelta(days=1)

    def test_iso_format(self, season):
        for d in season.eligible_dates():
            assert len(d) == 10 and d[4] == "-" and d[7] == "-"

    def test_deterministic(self, season):
        assert season.eligible_dates() == season.eligible_dates()

    def test_returned_list_is_a_copy(self, calendar):
        calendar.eligible_dates().append("2099-01-01")
        assert calendar.eligible_dates() == ["2026-02-19", "2026-02-20"]

    def test_single_day_window(self):
        cal = RamadanCalendar(date(2026, 2, 19), date(2026, 2, 19), date(2026, 2, 19))
        assert cal.eligible_dates() == ["2026-02-19"]

    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError):
            RamadanCalendar(date(2026, 3, 1), date(2026, 2, 1), date(2026, 2, 19))

    def test_non_positive_capacity_rejected(self):
        with pytest.raises(ValueError):
            RamadanCalendar(date(2026, 2, 19), date(2026, 2, 20), date(2026, 2, 19), capacity=0)

    def test_module_helpers_use_configured_season(self):
        assert ramadan_calendar.eligible_dates()[0] == "2026-02-19"
        assert ramadan_calendar.eid_sentinel() == EID_SENTINEL


# ═══════════════════════════════════════════════════════════════════════════
# ELIGIBILITY & CAPACITY
# ═══════════════════════════════════════════════════════════════════════════
class TestEligibility:
    def test_eid_sentinel_is_eligible(self, calendar):
        assert calendar.is_eligible(calendar.eid_sentinel())

    def test_far_future_date_is_not_eligible(self, calendar):
        assert not calendar.is_eligible("2099-01-01")

    def test_day_outside_window(self, calendar):
        assert not calendar.is_eligible("2026-02-18")
        assert not calendar.is_eligible("2026-02-21")

    @pytest.mark.parametrize("value", ["", "eid", "2026-2-19", "19.02.2026", None, 20260219])
    def test_malformed_values(self, calendar, value):
        assert not calendar.is_eligible(value)

    def test_sentinel_never_parses_as_date(self):
        with pytest.raises(ValueError):
            ramadan_calendar.parse_date(EID_SENTINEL)

    def test_is_full_at_capacity(self, calendar):
        assert not calendar.is_full("2026-02-19", 2)
        assert calendar.is_full("2026-02-19", 3)
        assert calendar.is_full("2026-02-19", 4)

    def test_eid_never_full(self, calendar):
        assert not calendar.is_full(EID_SENTINEL, 100)


# ═══════════════════════════════════════════════════════════════════════════
# HIJRI LABEL
# ═══════════════════════════════════════════════════════════════════════════
class TestHijriLabel:
    def test_anchor_is_first_of_ramadan(self, season):
        assert season.hijri_label("2026-02-19") == HijriLabel(1, "Ramadan", 1447)

    def test_linear_offset(self, season):
        assert season.hijri_label("2026-03-01").day == 11
        assert season.hijri_label("2026-03-20").day == 30

    def test_day_before_anchor_is_last_of_shaban(self, season):
        assert season.hijri_label("2026-02-18") == HijriLabel(30, "Schaban", 1447)

    def test_arabic_month_names(self, season):
        assert season.hijri_label("2026-02-19", "ar").month == "رمضان"
        assert season.hijri_label("2026-02-18", "ar").month == "شعبان"

    @pytest.mark.parametrize("value", ["2026-02-17", "2026-03-21", "2027-01-01"])
    def test_outside_window_rejected(self, season, value):
        with pytest.raises(ValueError):
            season.hijri_label(value)

    def test_unknown_locale_rejected(self, season):
        with pytest.raises(ValueError):
            season.hijri_label("2026-02-19", "fr")


# ═══════════════════════════════════════════════════════════════════════════
# DISPLAY FORMATTING
# ═══════════════════════════════════════════════════════════════════════════
class TestDisplayDate:
    def test_german_long_date(self):
        assert RamadanCalendar.format_display_date("2026-02-19", "de") == "Donnerstag, 19. Februar 2026"

    def test_arabic_long_date_uses_western_digits(self):
        text = RamadanCalendar.format_display_date("2026-03-01", "ar")
        assert text == "الأحد، 1 مارس 2026"
        assert not any("٠" <= ch <= "٩" for ch in text)

    def test_eid_phrase(self):
        assert RamadanCalendar.format_display_date(EID_SENTINEL, "de") == "Eid al-Fitr"
        assert RamadanCalendar.format_display_date(EID_SENTINEL, "ar") == "عيد الفطر"

    def test_unknown_locale_rejected(self):
        with pytest.raises(ValueError):
            RamadanCalendar.format_display_date("2026-02-19", "en")

    def test_with_hijri_german(self, season):
        assert season.format_date_with_hijri("2026-02-20", "de") == (
            "Freitag, 20. Februar 2026\n2. Ramadan 1447"
        )

    def test_with_hijri_arabic(self, season):
        assert season.format_date_with_hijri("2026-02-20", "ar") == (
            "الجمعة، 20 فبراير 2026\n2 رمضان 1447"
        )

    def test_with_hijri_eid_has_no_hijri_line(self, season):
        assert season.format_date_with_hijri(EID_SENTINEL, "de") == "Eid al-Fitr"
