"""Date math layer — parsing, validation, and the MarriedMore mirror formula.

Everything here is pure: "now" is always passed in by the caller, so one
submission sees a single consistent instant across all derived fields.
All values are naive and read on the local wall-clock calendar.
"""

import logging
import math
from datetime import date, datetime, timedelta

from marriedmore.errors import (
    MalformedDateError,
    MissingFieldsError,
    OrderingViolationError,
)
from marriedmore.models import (
    AdvancedInput,
    AdvancedPersonResult,
    AdvancedResult,
    BasicInput,
    BasicResult,
    ElapsedSpan,
    PersonLabel,
)

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)
_ONE_HOUR = timedelta(hours=1)


def _parse_digits(part: str) -> int | None:
    # ASCII digits only: no sign, whitespace, "_" or other scripts
    if not (part.isascii() and part.isdigit()):
        return None
    return int(part)


def _parse_nonzero_int(part: str) -> int | None:
    return _parse_digits(part) or None


def parse_date_only(text: str) -> date | None:
    """Parse a "YYYY-MM-DD" string into a calendar date.

    Year, month and day must all be non-zero integers. A date that does not
    exist on the calendar (Feb 30, month 13) is rejected rather than rolled
    over into the following month.

    Args:
        text: Raw form value. Empty means the field was left blank.

    Returns:
        The parsed date, or None when the text is empty or malformed.
    """
    if not text:
        return None
    parts = text.split("-")
    if len(parts) != 3:
        return None
    year, month, day = (_parse_nonzero_int(p) for p in parts)
    if year is None or month is None or day is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date_time(text: str) -> datetime | None:
    """Parse a "YYYY-MM-DDTHH:MM" string into a naive local datetime.

    The date half follows parse_date_only. Hour and minute may be zero but
    must form a real wall-clock time (hour 24 or minute 60 are rejected).

    Args:
        text: Raw form value. Empty means the field was left blank.

    Returns:
        The parsed datetime at minute resolution, or None when malformed.
    """
    if not text:
        return None
    halves = text.split("T")
    if len(halves) != 2 or not halves[0] or not halves[1]:
        return None
    day = parse_date_only(halves[0])
    if day is None:
        return None
    clock = halves[1].split(":")
    if len(clock) != 2:
        return None
    hour, minute = _parse_digits(clock[0]), _parse_digits(clock[1])
    if hour is None or minute is None:
        return None
    try:
        return datetime(day.year, day.month, day.day, hour, minute)
    except ValueError:
        return None


def mirror_date(birth: date, wedding: date) -> date:
    """Return X = 2W - B on whole calendar days.

    Uses proleptic day ordinals, which count days without any timezone or
    daylight-saving offset, so the wedding is exactly the midpoint of
    birth and X.

    Raises:
        MalformedDateError: X lies past the last representable date.
    """
    ordinal = 2 * wedding.toordinal() - birth.toordinal()
    if ordinal > date.max.toordinal():
        raise MalformedDateError("error_out_of_range", f"day ordinal {ordinal}")
    return date.fromordinal(ordinal)


def mirror_moment(birth: datetime, wedding: datetime) -> datetime:
    """Return X = 2W - B on local wall-clock datetimes.

    Raises:
        MalformedDateError: X lies past the last representable datetime.
    """
    try:
        return wedding + (wedding - birth)
    except OverflowError as exc:
        raise MalformedDateError("error_out_of_range", str(exc)) from exc


def _anniversary_key(value: date) -> tuple[int, ...]:
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return (value.month, value.day, value.hour, value.minute)
    return (value.month, value.day)


def age_years(birth: date, on: date) -> int:
    """Whole years of age on a given date or moment.

    Subtracts calendar years, then takes one off when this year's
    anniversary has not arrived yet. With datetimes the anniversary is
    compared down to the minute, so one minute short of the birth time
    still counts as the previous year.
    """
    years = on.year - birth.year
    if _anniversary_key(on) < _anniversary_key(birth):
        years -= 1
    return years


def round_day_count(delta: timedelta) -> int:
    """Absolute day count of delta rounded to the nearest whole day, halves away from zero."""
    return math.floor(abs(delta / _ONE_DAY) + 0.5)


def elapsed_span(now: datetime, moment: datetime) -> ElapsedSpan:
    """Split the distance between now and moment into whole days and hours.

    This is a floor decomposition, unlike the nearest-day rounding that
    basic mode uses for its day count.
    """
    diff = moment - now
    remaining = abs(diff)
    return ElapsedSpan(
        is_future=diff > timedelta(0),
        days=remaining // _ONE_DAY,
        hours=(remaining % _ONE_DAY) // _ONE_HOUR,
    )


def calculate_basic(query: BasicInput, now: datetime) -> BasicResult:
    """Compute the date-only MarriedMore result.

    Args:
        query: Raw birth and wedding strings ("YYYY-MM-DD").
        now: Current local time, sampled once by the caller.

    Returns:
        BasicResult for the given dates.

    Raises:
        MissingFieldsError: A field is empty.
        MalformedDateError: A field is not a real calendar date.
        OrderingViolationError: The wedding is not after the birth date.
    """
    if not query.birth or not query.wedding:
        raise MissingFieldsError("error_missing_basic")

    birth = parse_date_only(query.birth)
    wedding = parse_date_only(query.wedding)
    if birth is None or wedding is None:
        raise MalformedDateError("error_malformed", f"{query.birth!r}, {query.wedding!r}")
    if wedding <= birth:
        raise OrderingViolationError("error_order_basic", f"{wedding} <= {birth}")

    married_more = mirror_date(birth, wedding)
    today = now.date()
    result = BasicResult(
        married_more_date=married_more,
        age_years=age_years(birth, married_more),
        is_future=married_more > today,
        days_difference=round_day_count(married_more - today),
        wedding_in_future=wedding > today,
        birth=birth,
        wedding=wedding,
    )
    logger.debug("basic: birth=%s wedding=%s -> %s", birth, wedding, result)
    return result


def _person_result(
    label: PersonLabel, birth: datetime, wedding: datetime, now: datetime
) -> AdvancedPersonResult:
    moment = mirror_moment(birth, wedding)
    span = elapsed_span(now, moment)
    return AdvancedPersonResult(
        label=label,
        married_more_moment=moment,
        age_years=age_years(birth, moment),
        is_future=span.is_future,
        days=span.days,
        hours=span.hours,
        birth=birth,
        wedding=wedding,
    )


def calculate_advanced(query: AdvancedInput, now: datetime) -> AdvancedResult:
    """Compute the minute-resolution MarriedMore result for one or two people.

    The spouse field is only read when ``query.calculate_for_both`` is set.
    Checks run in a fixed order: missing fields, then malformed values,
    then wedding after your birth, then wedding after your spouse's birth.

    Args:
        query: Raw date-time strings ("YYYY-MM-DDTHH:MM").
        now: Current local time, sampled once by the caller.

    Returns:
        AdvancedResult; ``spouse`` is None for a single-person calculation.

    Raises:
        MissingFieldsError: A required field is empty.
        MalformedDateError: A required field is not a real date and time.
        OrderingViolationError: The wedding is not after a required birth.
    """
    if not query.birth or not query.wedding:
        raise MissingFieldsError("error_missing_advanced")
    if query.calculate_for_both and not query.spouse_birth:
        raise MissingFieldsError("error_missing_spouse")

    birth = parse_date_time(query.birth)
    wedding = parse_date_time(query.wedding)
    spouse_birth = parse_date_time(query.spouse_birth) if query.calculate_for_both else None
    if birth is None or wedding is None or (query.calculate_for_both and spouse_birth is None):
        raise MalformedDateError("error_malformed", f"{query.birth!r}, {query.wedding!r}")
    if wedding <= birth:
        raise OrderingViolationError("error_order_advanced", f"{wedding} <= {birth}")
    if spouse_birth is not None and wedding <= spouse_birth:
        raise OrderingViolationError("error_order_spouse", f"{wedding} <= {spouse_birth}")

    you = _person_result("You", birth, wedding, now)
    spouse = None
    if spouse_birth is not None:
        spouse = _person_result("Your spouse", spouse_birth, wedding, now)

    result = AdvancedResult(
        you=you,
        spouse=spouse,
        both_past=spouse is not None and not you.is_future and not spouse.is_future,
    )
    logger.debug("advanced: birth=%s wedding=%s -> %s", birth, wedding, result)
    return result


def run(query: BasicInput | AdvancedInput, now: datetime | None = None) -> BasicResult | AdvancedResult:
    """Top-level entry point: takes a form input and returns its result.

    Args:
        query: BasicInput or AdvancedInput.
        now: Current local time. Sampled here when omitted.

    Returns:
        BasicResult for BasicInput, AdvancedResult for AdvancedInput.
    """
    if now is None:
        now = datetime.now()
    if isinstance(query, AdvancedInput):
        return calculate_advanced(query, now)
    return calculate_basic(query, now)
