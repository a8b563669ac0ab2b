"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

PersonLabel = Literal["You", "Your spouse"]


@dataclass(frozen=True)
class BasicInput:
    """Raw basic-form input. Not yet validated."""

    birth: str  # "YYYY-MM-DD", empty when the field was left blank
    wedding: str  # "YYYY-MM-DD"


@dataclass(frozen=True)
class AdvancedInput:
    """Raw advanced-form input. Not yet validated."""

    birth: str  # "YYYY-MM-DDTHH:MM"
    wedding: str  # "YYYY-MM-DDTHH:MM"
    spouse_birth: str = ""  # Only read when calculate_for_both is set
    calculate_for_both: bool = False


@dataclass(frozen=True)
class ElapsedSpan:
    """Floor decomposition of the distance between now and a moment."""

    is_future: bool
    days: int
    hours: int  # 0-23


@dataclass(frozen=True)
class BasicResult:
    """Date-only MarriedMore result."""

    married_more_date: date
    age_years: int  # Age on married_more_date
    is_future: bool  # married_more_date is after today
    days_difference: int  # Whole days between today and married_more_date, rounded
    wedding_in_future: bool
    birth: date  # Parsed input, kept for the timeline
    wedding: date


@dataclass(frozen=True)
class AdvancedPersonResult:
    """Minute-resolution MarriedMore result for one person."""

    label: PersonLabel
    married_more_moment: datetime  # Naive local wall-clock time
    age_years: int
    is_future: bool
    days: int
    hours: int
    birth: datetime  # Parsed input, kept for the timeline
    wedding: datetime


@dataclass(frozen=True)
class AdvancedResult:
    """The sole input to the advanced renderer."""

    you: AdvancedPersonResult
    spouse: AdvancedPersonResult | None
    both_past: bool  # Only ever True when spouse is set


@dataclass(frozen=True)
class TimelineRow:
    """One person's three milestones. Input to the timeline renderer."""

    label: str
    birth: date
    wedding: date
    married_more: date
