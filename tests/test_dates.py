from __future__ import annotations

from datetime import date

from caseworker.dates import (
    INVALID_DATE,
    day_before,
    format_ddmmyyyy,
    is_later,
    normalized_date,
    parse_date_parts,
    parse_ddmmyyyy,
)


def test_day_before_leap_year() -> None:
    assert day_before("01.03.2024") == "29.02.2024"
    assert day_before("01.03.2023") == "28.02.2023"


def test_day_before_year_rollover() -> None:
    assert day_before("01.01.2024") == "31.12.2023"


def test_day_before_normalizes_out_of_range() -> None:
    assert day_before("32.01.2024") == "31.01.2024"
    assert day_before("01.13.2023") == "31.12.2023"


def test_day_before_unreadable() -> None:
    assert day_before("abc") == INVALID_DATE
    assert day_before("01.01") == INVALID_DATE
    assert day_before("01.xx.2024") == INVALID_DATE


def test_normalized_date() -> None:
    assert normalized_date(2023, 2, 31) == date(2023, 3, 3)
    assert normalized_date(2024, 3, 0) == date(2024, 2, 29)
    assert normalized_date(2023, 0, 15) == date(2022, 12, 15)
    assert normalized_date(0, 1, 1) is None


def test_parse_and_format() -> None:
    assert parse_ddmmyyyy("05.06.2024") == date(2024, 6, 5)
    assert parse_ddmmyyyy(None) is None
    assert parse_ddmmyyyy("") is None
    assert parse_ddmmyyyy("05-06-2024") is None
    assert format_ddmmyyyy(date(2024, 6, 5)) == "05.06.2024"
    assert format_ddmmyyyy(date(999, 1, 2)) == "02.01.0999"


def test_is_later() -> None:
    assert is_later("01.02.2023", "31.01.2023")
    assert not is_later("31.01.2023", "01.02.2023")
    assert not is_later("31.12.2023", "00.01.2024")
    assert not is_later("ukjent", "01.01.2023")
    assert not is_later("01.01.2023", None)


def test_day_before_ignores_trailing_parts() -> None:
    assert day_before("01.03.2024.") == "29.02.2024"
    assert day_before("01.03.2024.5") == "29.02.2024"


def test_day_before_blank_part_counts_as_zero() -> None:
    # day 0 of March is the last day of February
    assert day_before(".03.2024") == "28.02.2024"


def test_day_before_two_digit_years_are_1900s() -> None:
    assert day_before("01.01.0050") == "31.12.1949"
    assert day_before("01.01.0001") == "31.12.1900"
    assert day_before("01.01.0100") == "31.12.0099"


def test_parse_date_parts() -> None:
    assert parse_date_parts("05.06.2024.extra") == date(2024, 6, 5)
    assert parse_date_parts("05.06") is None
    assert parse_date_parts("05.ab.2024") is None
    assert parse_date_parts(None) is None


def test_is_later_needs_exactly_three_parts() -> None:
    assert not is_later("31.12.2024.", "01.01.2023")
