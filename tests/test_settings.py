"""
Tests for persistent settings.
"""

import json

from src.settings import DEFAULT_SETTINGS, load_settings, save_settings, strategy_params


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_round_trip(tmp_path):
    path = tmp_path / "config.json"
    settings = dict(DEFAULT_SETTINGS, strategy_name="astar", max_depth=9)
    save_settings(settings, path)
    assert load_settings(path) == settings


def test_partial_file_merged_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"strategy_name": "dfs"}), encoding="utf-8")
    settings = load_settings(path)
    assert settings["strategy_name"] == "dfs"
    assert settings["max_depth"] == DEFAULT_SETTINGS["max_depth"]


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_non_object_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_defaults_not_shared(tmp_path):
    settings = load_settings(tmp_path / "missing.json")
    settings["max_depth"] = 1
    assert DEFAULT_SETTINGS["max_depth"] == 20


def test_strategy_params_selects_relevant_keys():
    settings = dict(DEFAULT_SETTINGS, seed=4)
    assert strategy_params(settings, "bfs") == {}
    assert strategy_params(settings, "dfs") == {"max_depth": 20}
    assert strategy_params(settings, "trial_error") == {"max_attempts": 1000, "seed": 4}
    assert strategy_params(settings, "trial_error_depth") == {
        "max_attempts": 1000, "depth_bound": 20, "seed": 4,
    }
    assert strategy_params(settings, "astar") == {"heuristic": "manhattan_all"}
