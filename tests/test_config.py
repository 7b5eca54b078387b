"""
Tests for the Config loader

These tests verify:
1. Config can be instantiated with test data (dependency injection)
2. Config.get() works with dot notation
3. Config handles missing keys gracefully
4. Config files are found via URLLOADER_CONFIG_DIR
"""

from pathlib import Path
from typing import Any

import pytest

from urlloader.config import loader as loader_module
from urlloader.config.loader import CONFIG_DIR_ENV, Config


class TestConfigDependencyInjection:
    """Test that Config supports dependency injection for testing"""

    def test_config_with_test_dict(self):
        """Should accept config dictionary for testing"""
        test_config = {"fetch": {"max_workers": 8, "base_url": "https://api.example.com/"}}

        config = Config(test_config)

        assert config.get("fetch.max_workers") == 8
        assert config.get("fetch.base_url") == "https://api.example.com/"

    def test_config_get_with_dot_notation(self):
        """Should navigate nested config with dot notation"""
        test_config = {"level1": {"level2": {"level3": {"value": "deep_value"}}}}

        config = Config(test_config)

        assert config.get("level1.level2.level3.value") == "deep_value"

    def test_config_get_returns_default_when_not_found(self):
        """Should return default value for missing keys"""
        test_config = {"existing": {"key": "value"}}

        config = Config(test_config)

        assert config.get("non.existent.key", "default") == "default"
        assert config.get("existing.missing", 42) == 42
        assert config.get("missing") is None

    def test_config_get_handles_non_dict_values(self):
        """Should return default if path goes through non-dict value"""
        test_config = {"string_value": "just a string", "number": 42}

        config = Config(test_config)

        assert config.get("string_value.key", "default") == "default"
        assert config.get("number.nested", "default") == "default"

    def test_explicit_none_is_returned(self):
        """A key set to null is found, not replaced by the default"""
        config = Config({"fetch": {"base_url": None}})

        assert config.get("fetch.base_url", "fallback") is None

    def test_fetch_property(self):
        config = Config({"fetch": {"max_workers": 2}})

        assert config.fetch == {"max_workers": 2}

    def test_fetch_property_returns_empty_dict_when_missing(self):
        test_config: dict[str, Any] = {}

        config = Config(test_config)

        assert config.fetch == {}

    def test_reload_keeps_injected_values(self):
        """reload() must not wipe an injected dictionary"""
        test_config = {"fetch": {"max_workers": 2}}
        config = Config(test_config)

        config.reload()

        assert config.get("fetch.max_workers") == 2
        assert test_config == {"fetch": {"max_workers": 2}}

    def test_injected_dict_is_not_shared(self):
        """Config works on its own copy of the caller's dictionary"""
        test_config = {"fetch": {"max_workers": 2}}
        config = Config(test_config)

        test_config["extra"] = {"key": "value"}

        assert config.get("extra.key") is None

    def test_config_injection_prevents_file_system_access(self):
        """Injected config should not try to load from files"""
        config = Config({"fetch": {"base_url": "https://test.api.com"}})

        assert config._config_dir is None


class TestConfigFiles:
    """Test loading YAML files from disk"""

    def test_loads_from_env_directory(self, tmp_path, monkeypatch):
        (tmp_path / "fetch_config.yaml").write_text(
            "base_url: https://env.example.com/\nmax_workers: 3\n", encoding="utf-8"
        )
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))

        config = Config()

        assert config.get("fetch.base_url") == "https://env.example.com/"
        assert config.get("fetch.max_workers") == 3

    def test_missing_env_directory_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "nope"))

        with pytest.raises(FileNotFoundError):
            Config()

    def test_missing_file_gives_empty_section(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))

        config = Config()

        assert config.fetch == {}
        assert "fetch_config.yaml not found" in capsys.readouterr().out

    def test_non_dict_file_gives_empty_section(self, tmp_path, monkeypatch, capsys):
        (tmp_path / "fetch_config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))

        config = Config()

        assert config.fetch == {}
        assert "must contain a dictionary" in capsys.readouterr().out

    def test_reload_picks_up_changes(self, tmp_path, monkeypatch):
        config_file = tmp_path / "fetch_config.yaml"
        config_file.write_text("max_workers: 1\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        config = Config()

        config_file.write_text("max_workers: 6\n", encoding="utf-8")
        config.reload()

        assert config.get("fetch.max_workers") == 6

    def test_packaged_config_file_is_valid(self, monkeypatch):
        """The fetch_config.yaml shipped inside the package has the expected keys"""
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)

        config = Config()

        assert config._config_dir == Path(loader_module.__file__).resolve().parent
        assert (config._config_dir / "fetch_config.yaml").is_file()
        assert config.get("fetch.max_workers") == 4
        assert config.get("fetch.raise_for_status") is False
        assert config.get("fetch.base_url") is None
        assert config.get("fetch.headers.user_agent")
