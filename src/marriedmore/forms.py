"""Translate Streamlit widget values into form text and timeline rows.

Streamlit date/time widgets hand back ``date``/``time`` objects or None.
The date math layer consumes the same plain strings an HTML form would
post, so this module renders those strings.
"""

from __future__ import annotations

import datetime

from marriedmore.models import (
    AdvancedInput,
    AdvancedResult,
    BasicInput,
    BasicResult,
    TimelineRow,
)


def date_text(value: datetime.date | None) -> str:
    """Format as YYYY-MM-DD. An empty widget gives an empty string."""
    if value is None:
        return ""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def date_time_text(day: datetime.date | None, clock: datetime.time | None) -> str:
    """Format as YYYY-MM-DDTHH:MM. Empty unless both widgets are filled."""
    if day is None or clock is None:
        return ""
    return f"{date_text(day)}T{clock.hour:02d}:{clock.minute:02d}"


def basic_input(birth: datetime.date | None, wedding: datetime.date | None) -> BasicInput:
    return BasicInput(birth=date_text(birth), wedding=date_text(wedding))


def advanced_input(
    birth: tuple[datetime.date | None, datetime.time | None],
    wedding: tuple[datetime.date | None, datetime.time | None],
    spouse_birth: tuple[datetime.date | None, datetime.time | None] = (None, None),
    calculate_for_both: bool = False,
) -> AdvancedInput:
    return AdvancedInput(
        birth=date_time_text(*birth),
        wedding=date_time_text(*wedding),
        spouse_birth=date_time_text(*spouse_birth) if calculate_for_both else "",
        calculate_for_both=calculate_for_both,
    )


def timeline_rows(result: BasicResult | AdvancedResult) -> list[TimelineRow]:
    """One row per person, built from the values the result was computed from."""
    if isinstance(result, BasicResult):
        return [TimelineRow("You", result.birth, result.wedding, result.married_more_date)]
    people = [result.you] if result.spouse is None else [result.you, result.spouse]
    return [TimelineRow(p.label, p.birth, p.wedding, p.married_more_moment) for p in people]
