"""
Tests for point table loading and validation
"""

import pytest

from mvp_leaderboard.score.loader import (
    DEFAULT_CFG,
    _check_points,
    config_hash,
    load_config,
    point_table,
)


def _write(tmp_path, text):
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_default_config_point_table():
    """Shipped config scores the four cricket actions"""
    cfg = load_config(DEFAULT_CFG)

    assert point_table(cfg) == {
        "TAKE_WICKET": 20,
        "50_RUNS_MILESTONE": 15,
        "HIT_SIX": 2,
        "HIT_FOUR": 1,
    }
    assert cfg["filter"]["top_performers_threshold"] == 20


def test_auto_mode_coerces_whole_numbers():
    table = {"HIT_SIX": 2.0, "HIT_FOUR": "1", "TAKE_WICKET": 20}

    fixed = _check_points(table, "auto")

    assert fixed == {"HIT_SIX": 2, "HIT_FOUR": 1, "TAKE_WICKET": 20}
    assert all(isinstance(v, int) for v in fixed.values())


@pytest.mark.parametrize("value", [1.5, "two", None, True])
def test_auto_mode_rejects_non_integers(value):
    with pytest.raises(ValueError, match="HIT_SIX"):
        _check_points({"HIT_SIX": value}, "auto")


def test_negative_points_rejected():
    with pytest.raises(ValueError, match="negative"):
        _check_points({"TAKE_WICKET": -20}, "auto")
    with pytest.raises(ValueError, match="negative"):
        _check_points({"TAKE_WICKET": -20}, "strict")


def test_strict_mode():
    """Strict mode accepts only real integers"""
    assert _check_points({"HIT_SIX": 2}, "strict") == {"HIT_SIX": 2}

    with pytest.raises(ValueError, match="strict mode"):
        _check_points({"HIT_SIX": 2.0}, "strict")


def test_off_mode_skips_range_checks():
    table = {"HIT_SIX": -2, "HIT_FOUR": 1}

    assert _check_points(table, "off") == table


@pytest.mark.parametrize("value", [None, 2.5, "2", True])
def test_off_mode_still_requires_integers(value):
    with pytest.raises(ValueError, match="must be an integer"):
        _check_points({"HIT_SIX": value}, "off")


def test_off_mode_null_value_in_file(tmp_path):
    cfg = tmp_path / "config.yml"
    cfg.write_text('points:\n  validate: "off"\n  table:\n    HIT_SIX: null\n', encoding="utf-8")

    with pytest.raises(ValueError, match="HIT_SIX"):
        load_config(str(cfg))


def test_numeric_keys_become_strings():
    assert _check_points({50: 15}, "auto") == {"50": 15}


def test_empty_table():
    assert _check_points({}, "auto") == {}


def test_partial_and_missing_sections(tmp_path):
    """A config with only one action and no filter section is valid"""
    path = _write(tmp_path, "points:\n  table:\n    HIT_SIX: 6\n")

    cfg = load_config(path)

    assert point_table(cfg) == {"HIT_SIX": 6}
    assert cfg["filter"]["top_performers_threshold"] == 20


def test_empty_file(tmp_path):
    cfg = load_config(_write(tmp_path, ""))

    assert point_table(cfg) == {}


def test_validate_mode_from_file(tmp_path):
    path = _write(tmp_path, "points:\n  validate: strict\n  table:\n    HIT_SIX: 2.0\n")

    with pytest.raises(ValueError, match="strict mode"):
        load_config(path)


def test_bad_threshold(tmp_path):
    path = _write(tmp_path, "filter:\n  top_performers_threshold: lots\n")

    with pytest.raises(ValueError, match="top_performers_threshold"):
        load_config(path)


def test_config_hash_tracks_changes():
    cfg = load_config(DEFAULT_CFG)
    same = load_config(DEFAULT_CFG)

    assert config_hash(cfg) == config_hash(same)

    same["points"]["table"]["HIT_SIX"] = 6
    assert config_hash(cfg) != config_hash(same)


def test_unquoted_off_mode(tmp_path):
    path = _write(tmp_path, "points:\n  validate: off\n  table:\n    HIT_SIX: -2\n")

    assert point_table(load_config(path)) == {"HIT_SIX": -2}
