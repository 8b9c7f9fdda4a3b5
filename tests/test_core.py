"""
Unit tests for core module.
"""
import logging
from pathlib import Path
import pytest

from darts501.core import (
    Config, PlayerId, Ring, STARTING_SCORE, DARTS_PER_THROW, load_yaml
)


def test_constants():
    """Test game constants."""
    assert STARTING_SCORE == 501
    assert DARTS_PER_THROW == 3


def test_player_id():
    """Test player identity helpers."""
    assert PlayerId.ONE.other is PlayerId.TWO
    assert PlayerId.TWO.other is PlayerId.ONE
    assert PlayerId.ONE.index == 0
    assert PlayerId.TWO.index == 1


def test_ring_from_code():
    """Test ring lookup by prefix."""
    assert Ring.from_code("s") is Ring.SINGLE
    assert Ring.from_code("d") is Ring.DOUBLE
    assert Ring.from_code("t") is Ring.TREBLE
    assert Ring.from_code("q") is Ring.SINGLE
    assert Ring.TREBLE.multiplier == 3


def test_load_yaml(tmp_path: Path):
    """Test YAML loading."""
    path = tmp_path / "settings.yaml"
    path.write_text("scoreboard:\n  column_width: 8\n")

    assert load_yaml(path) == {"scoreboard": {"column_width": 8}}


def test_load_empty_yaml(tmp_path: Path):
    """Test empty file loads as empty dict."""
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_yaml(path) == {}


def test_load_nonexistent_yaml():
    """Test loading non-existent file."""
    with pytest.raises(FileNotFoundError):
        load_yaml(Path("nonexistent_file.yaml"))


def test_config_defaults():
    """Test defaults without a file."""
    config = Config()

    assert config.get("logging", "level") == "INFO"
    assert config.get("scoreboard", "column_width") == 6
    assert config.get("scoreboard", "unknown", 3) == 3
    assert config.get_section("missing") == {}


def test_config_merges_file(tmp_path: Path):
    """Test user values override defaults section by section."""
    path = tmp_path / "config.yaml"
    path.write_text("scoreboard:\n  column_width: 9\nextra:\n  key: 1\n")

    config = Config(path)

    assert config.get("scoreboard", "column_width") == 9
    assert config.get("scoreboard", "placeholder") == "-"
    assert config.get("extra", "key") == 1


def test_config_does_not_share_defaults(tmp_path: Path):
    """Test merging never leaks into other instances."""
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: DEBUG\n")

    Config(path)

    assert Config().get("logging", "level") == "INFO"
    assert Config.DEFAULTS["logging"]["level"] == "INFO"


def test_config_malformed_file_falls_back(tmp_path: Path, caplog):
    """Test broken YAML keeps defaults."""
    path = tmp_path / "broken.yaml"
    path.write_text("scoreboard: [unclosed\n")

    config = Config(path)

    assert config.get("scoreboard", "column_width") == 6
    assert "Failed to load config" in caplog.text


def test_config_missing_file(tmp_path: Path):
    """Test missing file keeps defaults."""
    config = Config(tmp_path / "nope.yaml")

    assert config.get("scoreboard", "miss_label") == "miss"


def test_config_non_mapping_section_keeps_defaults(tmp_path: Path, caplog):
    """Test a scalar in place of a built-in section is ignored."""
    path = tmp_path / "config.yaml"
    path.write_text("scoreboard: 5\n")

    config = Config(path)

    assert config.get("scoreboard", "column_width") == 6
    assert "expected a mapping" in caplog.text


@pytest.mark.parametrize("name, expected", [
    ("INFO", logging.INFO),
    ("debug", logging.DEBUG),
    ("Warning", logging.WARNING),
])
def test_config_log_level(tmp_path: Path, name, expected):
    """Test level names are case-insensitive."""
    path = tmp_path / "config.yaml"
    path.write_text(f"logging:\n  level: {name}\n")

    assert Config(path).log_level() == expected


def test_config_unknown_log_level_falls_back(tmp_path: Path, caplog):
    """Test unknown level names fall back to INFO."""
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: chatty\n")

    assert Config(path).log_level() == logging.INFO
    assert "Unknown log level 'CHATTY'" in caplog.text
