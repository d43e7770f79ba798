from datetime import datetime, timedelta

import pytest

from crona.options import (
    DOM_BOUND,
    DOW_BOUND,
    MONTH_BOUND,
    SECOND_BOUND,
    Flag,
    ParseOptions,
    compare_flags,
)


def all_stars(**fields):
    values = dict(second="*", minute="*", hour="*", dom="*", month="*", dow="*")
    values.update(fields)
    return ParseOptions(**values)


@pytest.mark.parametrize(
    "field_value, second, expected",
    [
        ("*", 30, True),
        ("10,0,30", 0, True),
        ("10,20,30", 30, True),
        ("10,20,45", 30, False),
        ("10,20,99", 30, False),
        ("15,20", 15, True),
        ("15,,20", 15, False),
        ("0-10", 0, True),
        ("0-10", 30, False),
        ("10-0", 30, False),
        ("0-99", 30, False),
        ("-99", 30, False),
        ("0-", 30, False),
        ("0-1-2", 30, False),
        ("*/2", 30, True),
        ("*/10", 30, True),
        ("*/30", 30, True),
        ("*/59", 30, False),
        ("*/60", 30, False),
        ("*/", 30, False),
        ("0", 0, True),
        ("59", 59, True),
        ("15", 30, False),
        ("99", 30, False),
    ],
)
def test_match_second(field_value, second, expected):
    opt = all_stars(second=field_value)
    assert opt.match_second(datetime(2023, 10, 1, 12, 0, second)) is expected


@pytest.mark.parametrize(
    "field_value, minute, expected",
    [
        ("*", 30, True),
        ("10,0,30", 0, True),
        ("10,20,30", 30, True),
        ("10,20,45", 30, False),
        ("10,20,99", 30, False),
        ("0-10", 0, True),
        ("0-10", 30, False),
        ("10-0", 30, False),
        ("0-99", 30, False),
        ("*/2", 30, True),
        ("*/10", 30, True),
        ("*/30", 30, True),
        ("*/59", 30, False),
        ("*/60", 30, False),
        ("0", 0, True),
        ("59", 59, True),
        ("15", 30, False),
        ("99", 30, False),
    ],
)
def test_match_minute(field_value, minute, expected):
    opt = all_stars(minute=field_value)
    assert opt.match_minute(datetime(2023, 10, 1, 12, minute, 0)) is expected


@pytest.mark.parametrize(
    "field_value, hour, expected",
    [
        ("*", 0, True),
        ("10,0,23", 23, True),
        ("10,20,23", 20, True),
        ("10,20,23", 22, False),
        ("10,20,99", 22, False),
        ("0-10", 0, True),
        ("0-10", 22, False),
        ("10-0", 10, False),
        ("0-99", 10, False),
        ("*/2", 12, True),
        ("*/12", 0, True),
        ("*/2", 21, False),
        ("*/10", 21, False),
        ("*/59", 21, False),
        ("*/60", 21, False),
        ("0", 0, True),
        ("23", 23, True),
        ("15", 16, False),
        ("99", 16, False),
    ],
)
def test_match_hour(field_value, hour, expected):
    opt = all_stars(hour=field_value)
    assert opt.match_hour(datetime(2023, 10, 1, hour, 0, 0)) is expected


def october_day(day):
    # Day 0 rolls back to the last day of September.
    return datetime(2023, 10, 1) + timedelta(days=day - 1)


@pytest.mark.parametrize(
    "field_value, day, expected",
    [
        ("*", 1, True),
        ("*", 31, True),
        ("*", 0, True),
        ("10,1,23", 23, True),
        ("10,20,23", 20, True),
        ("10,20,23", 22, False),
        ("10,20,99", 22, False),
        ("1-10", 0, False),
        ("1-10", 22, False),
        ("10-1", 10, False),
        ("1-99", 10, False),
        ("*/2", 13, True),
        ("*/12", 1, True),
        ("*/2", 21, True),
        ("*/10", 21, True),
        ("*/10", 20, False),
        ("*/59", 21, False),
        ("*/60", 21, False),
        ("0", 0, False),
        ("23", 23, True),
        ("15", 16, False),
        ("99", 16, False),
    ],
)
def test_match_day(field_value, day, expected):
    opt = all_stars(dom=field_value)
    assert opt.match_day(october_day(day)) is expected


def month_start(month):
    # Month 0 rolls back to December of the previous year.
    if month == 0:
        return datetime(2022, 12, 1)
    return datetime(2023, month, 1)


@pytest.mark.parametrize(
    "field_value, month, expected",
    [
        ("*", 1, True),
        ("*", 12, True),
        ("10,1,12", 1, True),
        ("10,20,99", 11, False),
        ("1-10", 1, True),
        ("1-10", 11, False),
        ("10-1", 10, False),
        ("1-99", 10, False),
        ("*/2", 11, True),
        ("*/12", 1, True),
        ("*/2", 3, True),
        ("*/10", 11, True),
        ("*/10", 12, False),
        ("*/59", 1, False),
        ("*/60", 1, False),
        ("0", 0, False),
        ("2", 2, True),
        ("12", 11, False),
        ("99", 11, False),
    ],
)
def test_match_month(field_value, month, expected):
    opt = all_stars(month=field_value)
    assert opt.match_month(month_start(month)) is expected


@pytest.mark.parametrize(
    "field_value, weekday, expected",
    [
        ("*", 0, True),
        ("*", 6, True),
        ("0,1,6", 0, True),
        ("0,1,6", 1, True),
        ("0,1,6", 5, False),
        ("0-3", 0, True),
        ("0-3", 3, True),
        ("0-3", 4, False),
        ("3-0", 3, False),
        ("0-7", 6, False),
        ("*/2", 0, True),
        ("*/2", 2, True),
        ("*/2", 4, True),
        ("*/2", 5, False),
        ("*/7", 6, False),
        ("*/8", 6, False),
        ("0", 0, True),
        ("6", 6, True),
        ("3", 4, False),
        ("7", 6, False),
    ],
)
def test_match_week(field_value, weekday, expected):
    opt = all_stars(dow=field_value)
    sunday = datetime(2023, 10, 1)
    assert opt.match_week(sunday + timedelta(days=weekday)) is expected


@pytest.mark.parametrize(
    "fields, moment, expected",
    [
        (["*", "*", "*", "*", "*", "*"], datetime(2023, 10, 1, 0, 0, 0), True),
        (["0", "0", "9-17", "*", "*", "*"], datetime(2023, 10, 1, 10, 0, 0), True),
        (["0", "0", "9-17", "*", "*", "*"], datetime(2023, 10, 1, 0, 0, 0), False),
        (["0", "0", "0", "*", "*", "*"], datetime(2023, 10, 1, 0, 0, 0), True),
        (["0", "0", "0", "*", "*", "*"], datetime(2023, 10, 2, 0, 0, 0), True),
        (["0", "0", "0", "*", "*", "0"], datetime(2023, 10, 1, 0, 0, 0), True),
        (["0", "0", "0", "*", "*", "0"], datetime(2023, 10, 8, 0, 0, 0), True),
        (["0", "0", "0", "1", "*/3", "*"], datetime(2023, 9, 1, 0, 0, 0), False),
        (["0", "0", "0", "1", "*/3", "*"], datetime(2023, 10, 1, 0, 0, 0), True),
        (["0", "0", "0", "1", "*/3", "*"], datetime(2023, 10, 2, 0, 0, 0), False),
    ],
)
def test_match_time(fields, moment, expected):
    assert ParseOptions(*fields).match_time(moment) is expected


@pytest.mark.parametrize("value", ["*", "1-5", "1,5", "*/3"])
def test_validate_accepts(value):
    assert SECOND_BOUND.validate(value) is True


@pytest.mark.parametrize("value", ["abc", "1000", "1_5", " 5", ""])
def test_validate_rejects(value):
    with pytest.raises(ValueError):
        SECOND_BOUND.validate(value)


def test_validate_out_of_range_message():
    with pytest.raises(ValueError, match="value out of range"):
        DOM_BOUND.validate("0")


def test_bounds_limits():
    assert (MONTH_BOUND.min, MONTH_BOUND.max) == (1, 12)
    assert MONTH_BOUND.labels["dec"] == 12
    assert DOW_BOUND.labels["sat"] == 6
    assert DOW_BOUND.validate("6") is True
    with pytest.raises(ValueError):
        DOW_BOUND.validate("7")


def test_compare():
    po1 = all_stars(flags=[Flag("--test", ""), Flag("--d", "info")])
    po2 = all_stars(flags=[Flag("--test", ""), Flag("--d", "info")])
    po3 = all_stars(flags=[Flag("--test", ""), Flag("--d", "debug")])
    po4 = all_stars(flags=[Flag("--n", ""), Flag("--d", "debug")])
    assert po1.compare(po2)
    assert not po1.compare(po3)
    assert not po1.compare(po4)


def test_compare_fields_and_flag_counts():
    assert all_stars().compare(all_stars())
    assert not all_stars(hour="1").compare(all_stars())
    assert not all_stars(flags=[Flag("--x")]).compare(all_stars())


def test_compare_flags():
    assert compare_flags([Flag("a", 1)], [Flag("a", 1), Flag("b", 2)])
    assert not compare_flags([Flag("a", 1)], [Flag("a", 2)])
    with pytest.raises(IndexError):
        compare_flags([Flag("a", 1), Flag("b", 2)], [Flag("a", 1)])