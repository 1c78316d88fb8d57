"""
Unit tests for the configuration loader.
"""

import pytest
import toml

from daily_record.config.loader import ConfigLoader


class TestConfigLoader:
    """Tests for loading, substitution and dotted access."""

    def test_default_file_is_created(self, tmp_path):
        path = tmp_path / "nested" / "config.toml"

        loader = ConfigLoader(str(path))
        config = loader.load()

        assert path.exists()
        assert config["server"]["port"] == 3000
        assert loader.get("export.default_format") == "md"
        assert loader.get("database.path").endswith("daily_record.db")

    def test_env_var_substitution(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        path.write_text(
            '[server]\nhost = "${DR_TEST_HOST:0.0.0.0}"\nport = ${DR_TEST_PORT:8000}\n',
            encoding="utf-8",
        )
        monkeypatch.setenv("DR_TEST_PORT", "9100")
        monkeypatch.delenv("DR_TEST_HOST", raising=False)

        loader = ConfigLoader(str(path))
        loader.load()

        assert loader.get("server.host") == "0.0.0.0"
        assert loader.get("server.port") == 9100

    def test_missing_keys_return_default(self, tmp_path):
        loader = ConfigLoader(str(tmp_path / "config.toml"))
        loader.load()

        assert loader.get("server.missing", "fallback") == "fallback"
        assert loader.get("server.port.deeper") is None

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  port: 4000\n", encoding="utf-8")

        loader = ConfigLoader(str(path))
        loader.load()

        assert loader.get("server.port") == 4000

    def test_set_persists(self, tmp_path):
        path = tmp_path / "config.toml"
        loader = ConfigLoader(str(path))
        loader.load()

        assert loader.set("export.default_format", "json") is True

        reloaded = ConfigLoader(str(path))
        reloaded.load()
        assert reloaded.get("export.default_format") == "json"

    def test_invalid_toml_raises(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[server\nport = 1\n", encoding="utf-8")

        with pytest.raises(toml.TomlDecodeError):
            ConfigLoader(str(path)).load()
