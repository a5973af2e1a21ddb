from datetime import date, datetime

import pytest

from tanod_monitoring.common.datetime_utils import (
    day_window,
    parse_iso_date,
    parse_optional_datetime,
    to_store_precision,
)
from tanod_monitoring.common.validators import require_non_empty, require_owner
from tanod_monitoring.core.exceptions import ValidationError


def test_day_window_covers_whole_days():
    lo, hi = day_window(date(2025, 8, 1), date(2025, 8, 3))

    assert lo == datetime(2025, 8, 1, 0, 0, 0)
    assert hi == datetime(2025, 8, 3, 23, 59, 59, 999000)


def test_day_window_rejects_reversed_bounds():
    with pytest.raises(ValidationError):
        day_window(date(2025, 8, 3), date(2025, 8, 1))


def test_parse_iso_date():
    assert parse_iso_date("2025-08-12") == date(2025, 8, 12)
    with pytest.raises(ValidationError):
        parse_iso_date("12/08/2025")


def test_optional_datetime_from_form_fields():
    assert parse_optional_datetime("", "") is None
    assert parse_optional_datetime(None, None) is None
    assert parse_optional_datetime("2025-08-12", "") == datetime(2025, 8, 12, 0, 0)
    assert parse_optional_datetime("2025-08-12", "21:30") == datetime(2025, 8, 12, 21, 30)


@pytest.mark.parametrize("date_s, time_s", [("", "21:30"), ("2025-08-12", "9pm"), ("bad", "")])
def test_optional_datetime_rejects_bad_input(date_s, time_s):
    with pytest.raises(ValidationError):
        parse_optional_datetime(date_s, time_s)


def test_validators_trim_and_reject_blank():
    assert require_non_empty("  Plaza ", "Location") == "Plaza"
    assert require_owner(" u1 ") == "u1"
    with pytest.raises(ValidationError):
        require_non_empty("\t", "Location")
    with pytest.raises(ValidationError):
        require_owner(None)


def test_store_precision_truncates_instead_of_rounding():
    assert to_store_precision(datetime(2025, 8, 12, 23, 59, 59, 999999)) == datetime(2025, 8, 12, 23, 59, 59, 999000)
    assert to_store_precision(datetime(2025, 8, 12, 8, 0, 0, 1500)) == datetime(2025, 8, 12, 8, 0, 0, 1000)
