"""MarriedMore — Streamlit app for the day you've been married more than not."""

import datetime
import logging

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from marriedmore import forms  # noqa: E402
from marriedmore.config import configure_logging, load_config  # noqa: E402
from marriedmore.datemath import run  # noqa: E402
from marriedmore.errors import MarriedMoreError  # noqa: E402
from marriedmore.i18n import t  # noqa: E402
from marriedmore.renderers.cards import (  # noqa: E402
    CARDS_CSS,
    render_advanced_html,
    render_basic_html,
    render_error_html,
    render_hint_html,
)
from marriedmore.renderers.timeline import timeline_png_bytes  # noqa: E402
from marriedmore.ui import BUTTON_CSS, badge_html, separator_html  # noqa: E402

_config = load_config()
configure_logging(_config)
logger = logging.getLogger(__name__)

_MIN_DATE = datetime.date(1900, 1, 1)
_MAX_DATE = datetime.date(2100, 12, 31)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in. MARRIEDMORE_LANG skips detection.
if "lang" not in st.session_state:
    if _config.forced_lang is not None:
        st.session_state.lang = _config.forced_lang
    else:
        _browser_lang: str | None = streamlit_js_eval(
            js_expressions="navigator.language", key="_lang_detect", height=0
        )
        if _browser_lang is not None:
            st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="💍",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
# Each tab keeps its own result state; a new submission replaces it.
for _key in ("basic_result", "basic_error", "basic_png", "advanced_result", "advanced_error", "advanced_png"):
    if _key not in st.session_state:
        st.session_state[_key] = None

# --- Warm gradient theme CSS (static) ---
st.markdown(
    f"""
    <style>
    iframe[src*="streamlit_js_eval"] {{ display: none !important; }}
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {{
        background: linear-gradient(to bottom, #fff9f3, #fff4f5, #fdeded) !important;
        color: #334155;
    }}
    [data-testid="stHeader"], [data-testid="stToolbar"] {{
        display: none !important;
    }}
    [data-testid="stMainBlockContainer"] {{
        padding-top: 4rem !important;
        max-width: 42rem;
    }}
    .mm-hero {{ text-align: center; animation: mm-rise 0.5s ease-out; }}
    .mm-hero h1 {{ font-size: 2.25rem; font-weight: 600; color: #1e293b; margin: 1rem 0 0.75rem; }}
    .mm-accent {{ color: #e11d48; }}
    .mm-hero .mm-sub {{ color: #475569; font-size: 1.1rem; }}
    .mm-hero .mm-note {{ color: #64748b; font-size: 0.875rem; margin-top: 0.5rem; }}
    .mm-card-head h2 {{ font-size: 1.25rem; color: #1e293b; margin-bottom: 0.25rem; }}
    .mm-card-head p {{ color: #475569; font-size: 0.95rem; }}
    [data-testid="stTabs"] [role="tablist"] {{
        border-radius: 9999px;
        padding: 0.25rem;
        box-shadow: inset 0 0 0 1px rgba(254,205,211,0.6);
    }}
    [data-testid="stTabs"] [role="tab"][aria-selected="true"] {{
        color: #e11d48;
    }}
    [data-testid="stDateInput"] input,
    [data-testid="stTimeInput"] input {{
        background-color: rgba(255,255,255,0.9) !important;
    }}
    label, [data-testid="stWidgetLabel"] p {{
        color: #1e293b !important;
    }}
    @keyframes mm-rise {{
        from {{ opacity: 0; transform: translateY(8px); }}
        to   {{ opacity: 1; transform: translateY(0); }}
    }}
    {BUTTON_CSS}
    {CARDS_CSS}
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Hero ---
st.markdown(
    f"""
    <div class="mm-hero">
        {badge_html(t("badge", _lang))}
        <h1>{t("hero_title", _lang)}</h1>
        <p class="mm-sub">{t("hero_subtitle", _lang)}</p>
        <p class="mm-note">{t("hero_note", _lang)}</p>
    </div>
    <div class="mm-card-head">
        <h2>{t("card_title", _lang)}</h2>
        <p>{t("card_description", _lang)}</p>
    </div>
    {separator_html()}
    """,
    unsafe_allow_html=True,
)


def _submit(prefix: str, query) -> None:
    """Run one submission and store either its result and timeline PNG, or its error."""
    st.session_state[f"{prefix}_result"] = None
    st.session_state[f"{prefix}_error"] = None
    st.session_state[f"{prefix}_png"] = None
    try:
        result = run(query, now=datetime.datetime.now())
    except MarriedMoreError as e:
        logger.info("%s submission rejected: %s (%s)", prefix, e.code.value, e)
        st.session_state[f"{prefix}_error"] = t(e.message_key, _lang)
        return
    st.session_state[f"{prefix}_result"] = result
    st.session_state[f"{prefix}_png"] = timeline_png_bytes(forms.timeline_rows(result))


def _render_outcome(prefix: str, render_result, hint_key: str) -> None:
    if st.session_state[f"{prefix}_error"]:
        st.markdown(render_error_html(st.session_state[f"{prefix}_error"], _lang), unsafe_allow_html=True)

    result = st.session_state[f"{prefix}_result"]
    if result is None:
        st.markdown(render_hint_html(hint_key, _lang), unsafe_allow_html=True)
        return
    st.markdown(render_result(result, _lang), unsafe_allow_html=True)
    st.download_button(
        t("btn_save", _lang),
        data=st.session_state[f"{prefix}_png"],
        file_name=t("timeline_filename", _lang),
        mime="image/png",
        key=f"{prefix}_save",
    )


basic_tab, advanced_tab = st.tabs([t("tab_basic", _lang), t("tab_advanced", _lang)])

# --- Basic: date only ---
with basic_tab:
    with st.form("basic_form", border=False):
        birth = st.date_input(
            t("label_birth", _lang), value=None, min_value=_MIN_DATE, max_value=_MAX_DATE
        )
        wedding = st.date_input(
            t("label_wedding", _lang), value=None, min_value=_MIN_DATE, max_value=_MAX_DATE
        )
        basic_submitted = st.form_submit_button(t("btn_basic", _lang))

    if basic_submitted:
        _submit("basic", forms.basic_input(birth, wedding))

    _render_outcome("basic", render_basic_html, "hint_basic")

# --- Advanced: date and time, optionally for both spouses ---
with advanced_tab:
    st.markdown(
        f"<p style='color:#475569;font-size:0.95rem'>{t('advanced_intro', _lang)}</p>",
        unsafe_allow_html=True,
    )
    # Outside the form so the spouse fields appear as soon as it is flipped.
    calculate_for_both = st.toggle(t("label_both", _lang), key="calculate_for_both")

    with st.form("advanced_form", border=False):
        col1, col2 = st.columns(2)
        with col1:
            you_day = st.date_input(
                t("label_birth_dt_date", _lang), value=None, min_value=_MIN_DATE, max_value=_MAX_DATE
            )
        with col2:
            you_clock = st.time_input(t("label_birth_dt_time", _lang), value=None, step=60)

        spouse_day = spouse_clock = None
        if calculate_for_both:
            col1, col2 = st.columns(2)
            with col1:
                spouse_day = st.date_input(
                    t("label_spouse_dt_date", _lang), value=None, min_value=_MIN_DATE, max_value=_MAX_DATE
                )
            with col2:
                spouse_clock = st.time_input(t("label_spouse_dt_time", _lang), value=None, step=60)

        col1, col2 = st.columns(2)
        with col1:
            wedding_day = st.date_input(
                t("label_wedding_dt_date", _lang), value=None, min_value=_MIN_DATE, max_value=_MAX_DATE
            )
        with col2:
            wedding_clock = st.time_input(t("label_wedding_dt_time", _lang), value=None, step=60)

        advanced_submitted = st.form_submit_button(t("btn_advanced", _lang))

    if advanced_submitted:
        query = forms.advanced_input(
            birth=(you_day, you_clock),
            wedding=(wedding_day, wedding_clock),
            spouse_birth=(spouse_day, spouse_clock),
            calculate_for_both=calculate_for_both,
        )
        _submit("advanced", query)

    _render_outcome("advanced", render_advanced_html, "hint_advanced")
