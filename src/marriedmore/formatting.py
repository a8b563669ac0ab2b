"""Long-form date and date-time text for result cards."""

from datetime import date, datetime

_MONTHS_EN = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _clock_12h(dt: datetime) -> tuple[int, bool]:
    """Return (hour on a 12-hour dial, is_pm)."""
    return dt.hour % 12 or 12, dt.hour >= 12


def format_long_date(value: date, lang: str = "en") -> str:
    """'June 15, 2050' in English, '2050년 6월 15일' in Korean."""
    if lang == "ko":
        return f"{value.year}년 {value.month}월 {value.day}일"
    return f"{_MONTHS_EN[value.month - 1]} {value.day}, {value.year}"


def format_long_date_time(value: datetime, lang: str = "en") -> str:
    """Long date plus a 12-hour clock with the minute padded to two digits.

    'June 15, 2050 at 9:59 AM' in English, '2050년 6월 15일 오전 9:59' in Korean.
    """
    hour, is_pm = _clock_12h(value)
    day = format_long_date(value, lang)
    if lang == "ko":
        meridiem = "오후" if is_pm else "오전"
        return f"{day} {meridiem} {hour}:{value.minute:02d}"
    meridiem = "PM" if is_pm else "AM"
    return f"{day} at {hour}:{value.minute:02d} {meridiem}"
