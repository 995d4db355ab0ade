from __future__ import annotations

"""
Unit tests for the Internationalization (i18n) manager.
"""

import json

from tagcloud.utils.i18n import I18n, i18n


def test_default_locale_is_loaded() -> None:
    assert i18n.is_loaded is True
    assert i18n.locale == "en"


def test_nested_key_resolution_and_interpolation() -> None:
    assert i18n.t("cli.errors.path_not_exist", path="/x") == "Input path does not exist: /x"


def test_missing_key_returns_key_or_default() -> None:
    assert i18n.t("cli.nothing.here") == "cli.nothing.here"
    assert i18n.t("cli.nothing.here", default="fallback") == "fallback"


def test_non_leaf_key_returns_key() -> None:
    assert i18n.t("cli.errors") == "cli.errors"


def test_missing_format_variable_returns_template() -> None:
    assert i18n.t("cli.errors.config", unrelated=1) == "Invalid configuration: {error}"


def test_unknown_locale_falls_back() -> None:
    manager = I18n("xx")
    assert manager.is_loaded is False
    assert manager.t("app.description") == "app.description"


def test_prompts_match_interactive_wording() -> None:
    assert i18n.t("cli.prompts.count") == "how many words do you want to display?: "


def test_locale_file_is_valid_json() -> None:
    path = i18n._locales_path + "/en.json"
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    assert "cli" in data
