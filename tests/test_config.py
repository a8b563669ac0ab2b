from __future__ import annotations

import logging

import pytest

from marriedmore.config import load_config
from marriedmore.i18n import t
from marriedmore.ui import badge_html, separator_html


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MARRIEDMORE_LANG", raising=False)
    monkeypatch.delenv("MARRIEDMORE_LOG_LEVEL", raising=False)

    config = load_config()
    assert config.forced_lang is None
    assert config.log_level == logging.INFO


def test_load_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARRIEDMORE_LANG", " KO ")
    monkeypatch.setenv("MARRIEDMORE_LOG_LEVEL", "debug")

    config = load_config()
    assert config.forced_lang == "ko"
    assert config.log_level == logging.DEBUG


def test_load_config_ignores_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARRIEDMORE_LANG", "fr")
    monkeypatch.setenv("MARRIEDMORE_LOG_LEVEL", "chatty")

    config = load_config()
    assert config.forced_lang is None
    assert config.log_level == logging.INFO


def test_t_falls_back_to_english_then_key() -> None:
    assert t("tab_basic", "ko") == "기본"
    assert t("tab_basic", "fr") == "Basic"
    assert t("no_such_key", "en") == "no_such_key"


def test_ui_primitives() -> None:
    assert "Love &amp; more" in badge_html("Love & more")
    assert "aria-orientation='vertical'" in separator_html("vertical")
    assert "width:1px" in separator_html("vertical")
    assert "height:1px" in separator_html()
