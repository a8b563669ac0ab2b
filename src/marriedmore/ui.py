"""Generic UI primitives rendered as HTML fragments for st.markdown().

Streamlit has no badge or separator widget, and its buttons can only be
restyled through CSS, so each primitive here is either an HTML string or
the CSS block that turns a Streamlit widget into one.
"""

from __future__ import annotations

import html
from typing import Literal

Orientation = Literal["horizontal", "vertical"]

_ROSE = "#e11d48"
_SLATE_BORDER = "#e2e8f0"

BUTTON_CSS = f"""
[data-testid="stFormSubmitButton"] button,
[data-testid="stDownloadButton"] button {{
    display: inline-flex;
    align-items: center;
    justify-content: center;
    white-space: nowrap;
    height: 2.5rem;
    padding: 0.5rem 1rem;
    border-radius: 0.375rem;
    font-size: 0.875rem;
    font-weight: 500;
    background-color: {_ROSE} !important;
    color: #ffffff !important;
    border: none !important;
    box-shadow: 0 1px 2px rgba(15, 23, 42, 0.08);
    transition: transform 0.15s ease-out, box-shadow 0.15s ease-out;
}}
[data-testid="stFormSubmitButton"] button:hover,
[data-testid="stDownloadButton"] button:hover {{
    background-color: rgba(225, 29, 72, 0.9) !important;
    box-shadow: 0 4px 10px rgba(15, 23, 42, 0.12);
    transform: translateY(-1px);
}}
[data-testid="stFormSubmitButton"] button:active,
[data-testid="stDownloadButton"] button:active {{
    transform: scale(0.98);
}}
[data-testid="stFormSubmitButton"] button:disabled {{
    pointer-events: none;
    opacity: 0.5;
}}
"""


def badge_html(text: str, extra_style: str = "") -> str:
    """Small pill label. Text is escaped."""
    style = (
        "display:inline-flex;align-items:center;border-radius:9999px;"
        "border:1px solid rgba(254,205,211,0.6);background:#ffe4e6;color:#be123c;"
        "padding:0.125rem 0.625rem;font-size:0.75rem;font-weight:500;"
        "box-shadow:0 1px 2px rgba(15,23,42,0.06);"
    )
    return f"<div class='mm-badge' style='{style}{extra_style}'>{html.escape(text)}</div>"


def separator_html(orientation: Orientation = "horizontal", opacity: float = 1.0) -> str:
    """A 1px rule. Vertical separators fill their container's height."""
    size = "height:1px;width:100%;" if orientation == "horizontal" else "height:100%;width:1px;"
    return (
        f"<div role='separator' aria-orientation='{orientation}' "
        f"style='flex-shrink:0;background:{_SLATE_BORDER};{size}"
        f"opacity:{opacity:.2f};margin:0.5rem 0;'></div>"
    )
