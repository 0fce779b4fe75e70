"""
Unit tests for config.py module.

Tests:
- Defaults when no config file exists
- Loading and validating config.yaml
"""

import logging
import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gorules.config import AppConfig, get_project_root, load_config, parse_config


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a temporary config file and return its path."""
    def _write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


class TestParseConfig:
    """Tests for building AppConfig from parsed data."""

    def test_defaults(self):
        config = parse_config(None)
        assert config == AppConfig()
        assert config.board.size == 9
        assert config.rules.enforce_ko is True
        assert config.logging.level == "WARNING"
        assert config.logging.numeric_level() == logging.WARNING

    def test_partial(self):
        config = parse_config({"board": {"size": 19}})
        assert config.board.size == 19
        assert config.rules.enforce_ko is True

    def test_level_case_insensitive(self):
        assert parse_config({"logging": {"level": "debug"}}).logging.level == "DEBUG"

    @pytest.mark.parametrize("data", [
        {"board": {"size": 0}},
        {"board": {"size": "nine"}},
        {"board": {"size": True}},
        {"board": "big"},
        {"rules": {"enforce_ko": "yes please"}},
        {"logging": {"level": "LOUD"}},
        ["not", "a", "mapping"],
    ])
    def test_invalid(self, data):
        with pytest.raises(ValueError):
            parse_config(data)


class TestLoadConfig:
    """Tests for loading config files."""

    def test_load_file(self, write_config):
        path = write_config(
            "board:\n"
            "  size: 13\n"
            "rules:\n"
            "  enforce_ko: false\n"
            "logging:\n"
            "  level: INFO\n"
        )
        config = load_config(path)
        assert config.board.size == 13
        assert config.rules.enforce_ko is False
        assert config.logging.level == "INFO"

    def test_empty_file_uses_defaults(self, write_config):
        assert load_config(write_config("")) == AppConfig()

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_search_current_directory(self, tmp_path, monkeypatch):
        (tmp_path / "config.yaml").write_text("board:\n  size: 7\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert load_config().board.size == 7

    def test_shipped_config(self):
        """Test the config.yaml at the project root is valid."""
        config = load_config(str(get_project_root() / "config.yaml"))
        assert config.board.size == 9
        assert config.rules.enforce_ko is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
