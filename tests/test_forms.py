from __future__ import annotations

from datetime import date, datetime, time

from marriedmore import forms
from marriedmore.datemath import run
from marriedmore.models import AdvancedInput, BasicInput, TimelineRow

NOW = datetime(2026, 10, 19, 15, 30)


def test_date_text_pads_and_handles_empty_widget() -> None:
    assert forms.date_text(date(987, 2, 9)) == "0987-02-09"
    assert forms.date_text(None) == ""


def test_date_time_text_needs_both_widgets() -> None:
    assert forms.date_time_text(date(2020, 6, 15), time(7, 5)) == "2020-06-15T07:05"
    assert forms.date_time_text(date(2020, 6, 15), None) == ""
    assert forms.date_time_text(None, time(7, 5)) == ""


def test_basic_input_from_widgets() -> None:
    assert forms.basic_input(date(1990, 6, 15), None) == BasicInput(birth="1990-06-15", wedding="")


def test_advanced_input_drops_spouse_unless_enabled() -> None:
    spouse = (date(1992, 1, 1), time(0, 0))
    single = forms.advanced_input(
        birth=(date(1990, 6, 15), time(10, 0)),
        wedding=(date(2020, 6, 15), time(14, 30)),
        spouse_birth=spouse,
    )
    assert single == AdvancedInput(birth="1990-06-15T10:00", wedding="2020-06-15T14:30")

    both = forms.advanced_input(
        birth=(date(1990, 6, 15), time(10, 0)),
        wedding=(date(2020, 6, 15), time(14, 30)),
        spouse_birth=spouse,
        calculate_for_both=True,
    )
    assert both.spouse_birth == "1992-01-01T00:00"
    assert both.calculate_for_both is True


def test_basic_timeline() -> None:
    query = BasicInput(birth="1990-06-15", wedding="2020-06-15")
    rows = forms.timeline_rows(run(query, now=NOW))
    assert rows == [TimelineRow("You", date(1990, 6, 15), date(2020, 6, 15), date(2050, 6, 16))]


def test_advanced_timeline_has_one_row_per_person() -> None:
    query = AdvancedInput(
        birth="1990-06-15T10:00",
        wedding="2020-06-15T10:00",
        spouse_birth="1992-01-01T00:00",
        calculate_for_both=True,
    )
    result = run(query, now=NOW)
    rows = forms.timeline_rows(result)

    assert [r.label for r in rows] == ["You", "Your spouse"]
    assert rows[1].birth == datetime(1992, 1, 1, 0, 0)
    assert rows[1].married_more == result.spouse.married_more_moment
    assert rows[0].wedding == rows[1].wedding == datetime(2020, 6, 15, 10, 0)


def test_single_person_advanced_timeline() -> None:
    result = run(AdvancedInput(birth="1990-06-15T10:00", wedding="2020-06-15T10:00"), now=NOW)
    rows = forms.timeline_rows(result)

    assert rows == [
        TimelineRow("You", datetime(1990, 6, 15, 10, 0), datetime(2020, 6, 15, 10, 0), result.you.married_more_moment)
    ]
