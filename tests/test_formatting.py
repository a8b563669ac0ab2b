from __future__ import annotations

from datetime import date, datetime

from marriedmore.formatting import format_long_date, format_long_date_time


def test_format_long_date() -> None:
    assert format_long_date(date(2050, 6, 15)) == "June 15, 2050"
    assert format_long_date(date(2001, 1, 2), "ko") == "2001년 1월 2일"


def test_format_long_date_time_uses_twelve_hour_clock() -> None:
    assert format_long_date_time(datetime(2050, 6, 15, 9, 59)) == "June 15, 2050 at 9:59 AM"
    assert format_long_date_time(datetime(2050, 6, 15, 0, 5)) == "June 15, 2050 at 12:05 AM"
    assert format_long_date_time(datetime(2050, 6, 15, 12, 0)) == "June 15, 2050 at 12:00 PM"
    assert format_long_date_time(datetime(2050, 12, 1, 23, 1)) == "December 1, 2050 at 11:01 PM"


def test_format_long_date_time_korean() -> None:
    assert format_long_date_time(datetime(2050, 6, 15, 13, 7), "ko") == "2050년 6월 15일 오후 1:07"
    assert format_long_date_time(datetime(2050, 6, 15, 0, 0), "ko") == "2050년 6월 15일 오전 12:00"
