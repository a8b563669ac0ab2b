"""HTML result cards for st.markdown(unsafe_allow_html=True).

Cards only format what the date math layer computed; they never derive
a number of their own.
"""

from __future__ import annotations

import html

from marriedmore.formatting import format_long_date, format_long_date_time
from marriedmore.i18n import t
from marriedmore.models import AdvancedPersonResult, AdvancedResult, BasicResult
from marriedmore.ui import separator_html

_ACCENT = "#e11d48"
_TEXT = "#334155"
_MUTED = "#64748b"

CARDS_CSS = f"""
.mm-card {{
    border-radius: 0.75rem;
    padding: 1.5rem;
    box-shadow: 0 1px 2px rgba(15,23,42,0.06);
    color: {_TEXT};
    animation: mm-pop 0.2s ease-out;
}}
.mm-card b {{ color: {_ACCENT}; font-weight: 500; }}
.mm-card p {{ margin: 0.25rem 0; }}
.mm-card-basic {{ background: rgba(255,255,255,0.8); border: 1px solid rgba(226,232,240,0.6); }}
.mm-card-person {{ background: rgba(255,241,242,0.7); border: 1px solid rgba(254,205,211,0.6); }}
.mm-eyebrow {{
    font-size: 0.75rem;
    font-weight: 500;
    text-transform: uppercase;
    letter-spacing: 0.05em;
    color: {_MUTED};
}}
.mm-headline {{ font-size: 1.75rem; font-weight: 600; color: {_ACCENT}; }}
.mm-headline-sm {{ font-size: 1.35rem; font-weight: 600; color: {_ACCENT}; margin-top: 0.25rem; }}
.mm-hint {{ font-size: 0.875rem; color: {_MUTED}; }}
.mm-error {{
    display: flex;
    gap: 0.5rem;
    align-items: flex-start;
    border-radius: 0.5rem;
    background: rgba(255,241,242,0.8);
    border: 1px solid rgba(254,205,211,0.6);
    color: #be123c;
    padding: 0.75rem;
}}
.mm-error-icon {{
    display: inline-flex;
    width: 1.5rem;
    height: 1.5rem;
    align-items: center;
    justify-content: center;
    border-radius: 9999px;
    background: #ffe4e6;
    font-size: 0.75rem;
    font-weight: 600;
}}
.mm-pair {{ display: grid; grid-template-columns: 1fr; gap: 1rem; }}
@media (min-width: 769px) {{
    .mm-pair.mm-two {{ grid-template-columns: 1fr 1fr; }}
}}
@keyframes mm-pop {{
    from {{ opacity: 0; transform: scale(0.97); }}
    to   {{ opacity: 1; transform: scale(1); }}
}}
"""


def render_error_html(message: str, lang: str) -> str:
    """Error banner: fixed heading plus the specific (escaped) message."""
    return (
        "<div class='mm-error'>"
        "<span class='mm-error-icon'>!</span>"
        "<div>"
        f"<p style='margin:0;font-size:0.875rem'>{t('error_heading', lang)}</p>"
        f"<p style='margin:0;font-size:0.75rem;opacity:0.9'>{html.escape(message)}</p>"
        "</div></div>"
    )


def render_hint_html(key: str, lang: str) -> str:
    return separator_html(opacity=0.5) + f"<p class='mm-hint'>{t(key, lang)}</p>"


def render_basic_html(result: BasicResult, lang: str) -> str:
    """Single card for the date-only result."""
    parts: list[str] = []
    if result.wedding_in_future:
        parts.append(f"<p class='mm-hint' style='font-style:italic'>{t('result_assume', lang)}</p>")
    parts.append(f"<p class='mm-eyebrow'>{t('result_heading', lang)}</p>")
    parts.append(
        f"<div class='mm-headline'>{format_long_date(result.married_more_date, lang)}</div>"
    )
    parts.append(f"<p>{t('result_age_on_day', lang).format(age=result.age_years)}</p>")
    days_key = "result_days_ahead" if result.is_future else "result_days_ago"
    parts.append(f"<p>{t(days_key, lang).format(days=result.days_difference)}</p>")

    return (
        separator_html(opacity=0.5)
        + "<div class='mm-card mm-card-basic'>"
        + "".join(parts)
        + "</div>"
    )


def _render_person_html(person: AdvancedPersonResult, lang: str) -> str:
    is_you = person.label == "You"
    label = t("label_you" if is_you else "label_spouse", lang)
    age_key = "result_age_you" if is_you else "result_age_spouse"
    span_key = "result_span_ahead" if person.is_future else "result_span_ago"
    return (
        "<div class='mm-card mm-card-person'>"
        f"<p class='mm-eyebrow'>{label}</p>"
        f"<div class='mm-headline-sm'>{format_long_date_time(person.married_more_moment, lang)}</div>"
        f"<p>{t(age_key, lang).format(age=person.age_years)}</p>"
        f"<p>{t(span_key, lang).format(days=person.days, hours=person.hours)}</p>"
        "</div>"
    )


def render_advanced_html(result: AdvancedResult, lang: str) -> str:
    """One card per person, side by side on wide screens when there are two."""
    people = [result.you] if result.spouse is None else [result.you, result.spouse]
    grid_class = "mm-pair mm-two" if result.spouse is not None else "mm-pair"
    out = (
        separator_html(opacity=0.5)
        + f"<div class='{grid_class}'>"
        + "".join(_render_person_html(p, lang) for p in people)
        + "</div>"
    )
    if result.spouse is not None and result.both_past:
        out += (
            f"<p style='text-align:center;font-size:0.875rem;color:{_MUTED};margin-top:1rem'>"
            f"{t('result_both_past', lang)}</p>"
        )
    return out
