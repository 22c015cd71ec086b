"""
Tests for JSON settings persistence.
"""

from nxcube.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_round_trip(tmp_path):
    path = tmp_path / "config.json"
    settings = dict(DEFAULT_SETTINGS, strategy_name="idastar", dpll_bound=11)
    save_settings(settings, path)
    assert load_settings(path) == settings


def test_partial_file_merges_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"debug_enabled": true}', encoding="utf-8")
    settings = load_settings(path)
    assert settings["debug_enabled"] is True
    assert settings["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]


def test_invalid_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_defaults_not_shared(tmp_path):
    settings = load_settings(tmp_path / "missing.json")
    settings["dpll_bound"] = 3
    assert DEFAULT_SETTINGS["dpll_bound"] == 15
