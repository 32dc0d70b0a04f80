import datetime as dt
import json
import time
import uuid

import pytest

from tabungan.common import (
    arr_to_str_delimiter,
    calculate_end_date,
    find_in_array,
    first_saturday,
    get_slug,
    get_uuid,
    in_array,
    log_pretty,
    name_of_days,
    non_empty,
    str_pad_left,
    trimmed_days,
)


def test_find_in_array():
    assert find_in_array(["a", "b"], "b") is True
    assert find_in_array(["a", "b"], "c") is False
    assert find_in_array([], "a") is False


def test_str_pad_left_pinned():
    assert str_pad_left("5", 3, "0") == "005"


@pytest.mark.parametrize("text, length, pad", [("7", 10, "ab"), ("xy", 5, "-"), ("", 4, "xyz")])
def test_str_pad_left_invariants(text, length, pad):
    result = str_pad_left(text, length, pad)
    assert len(result) == length
    assert result.endswith(text)
    assert result[: length - len(text)] == (pad * length)[: length - len(text)]


def test_str_pad_left_long_input_unchanged():
    assert str_pad_left("abcdef", 3, "0") == "abcdef"


def test_str_pad_left_empty_pad_rejected():
    with pytest.raises(ValueError):
        str_pad_left("a", 3, "")


def test_day_name_lists():
    assert trimmed_days() == ["Mon,Tue,Wed,Thu,Fri,Sat,Sun"]
    assert name_of_days() == ["Monday,Tuesday,Wednesday,Thursday,Friday,Saturday,Sunday"]


def test_arr_to_str_delimiter_deduplicates():
    assert arr_to_str_delimiter(["a", "b", "a"], ";") == "'a';'b'"


def test_arr_to_str_delimiter_default_delimiter():
    result = arr_to_str_delimiter(["x", "y", "y", "z"], "")
    assert result.split(",") == ["'x'", "'y'", "'z'"]


def test_arr_to_str_delimiter_empty():
    assert arr_to_str_delimiter([], ",") == ""


@pytest.mark.parametrize("year, month", [(2024, m) for m in range(1, 13)] + [(1999, 2)])
def test_first_saturday_is_saturday(year, month):
    day = first_saturday(year, month)
    assert 1 <= day <= 7
    assert dt.date(year, month, day).weekday() == 5


def test_in_array():
    assert in_array("b", ["a", "b"]) is True
    assert in_array(3, [1, 2]) is False
    assert in_array(2, [1, 2]) is True
    assert in_array(1.0, [1.0]) is False
    assert in_array(True, [True]) is False


def test_get_uuid_round_trip():
    value = uuid.uuid4()
    assert get_uuid(str(value)) == value


def test_get_uuid_invalid_is_nil():
    assert get_uuid("not-a-uuid") == uuid.UUID(int=0)


def test_get_slug_shape():
    before = int(time.time())
    slug = get_slug("Hello World Again")
    after = int(time.time())
    prefix, stamp = slug.rsplit("-", 1)
    assert before <= int(stamp) <= after
    assert " " not in prefix
    assert prefix == prefix.lower()


def test_calculate_end_date_days():
    start = dt.datetime(2023, 12, 30, 8, 15)
    assert calculate_end_date(start, 5, "day") == start + dt.timedelta(days=5)


def test_calculate_end_date_months_keeps_day_and_time():
    start = dt.datetime(2023, 11, 15, 9, 30)
    result = calculate_end_date(start, 3, "month")
    assert result.day == start.day
    assert result.time() == start.time()
    assert (result.year * 12 + result.month) - (start.year * 12 + start.month) == 3


def test_calculate_end_date_month_overflow_normalises():
    assert calculate_end_date(dt.date(2023, 1, 31), 1, "month") == dt.date(2023, 3, 3)


def test_calculate_end_date_negative_months():
    start = dt.date(2023, 3, 10)
    result = calculate_end_date(start, -4, "month")
    assert calculate_end_date(result, 4, "month") == start


def test_calculate_end_date_years():
    start = dt.date(2020, 6, 1)
    result = calculate_end_date(start, 2, "year")
    assert (result.year - start.year, result.month, result.day) == (2, start.month, start.day)


def test_calculate_end_date_invalid_unit():
    with pytest.raises(ValueError, match="invalid duration unit"):
        calculate_end_date(dt.date(2020, 1, 1), 1, "week")


def test_log_pretty_round_trip(capsys):
    data = {"b": [1, 2], "a": {"nested": "value"}}
    log_pretty(data)
    out = capsys.readouterr().out
    assert json.loads(out) == data
    assert out.endswith("\n")


def test_log_pretty_error(capsys):
    log_pretty({1, 2})
    assert capsys.readouterr().out.startswith("error:")


def test_non_empty():
    assert non_empty(None) is None
    assert non_empty("") is None
    assert non_empty("abc") == "abc"