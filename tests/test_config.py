"""Tests for CacheConfig: defaults, validation, JSON and environment loading."""

import json

import pytest

from filedatacache import DEFAULT_CHECK_INTERVAL, CacheConfig, ConfigurationError


class TestCacheConfigDefaults:
    """Defaults match the documented behaviour."""

    def test_defaults(self):
        config = CacheConfig()

        assert config.check_interval == DEFAULT_CHECK_INTERVAL == 20000
        assert config.read_file is False
        assert config.verbose is False
        assert config.encoding == "utf-8"

    def test_to_dict(self):
        assert CacheConfig(check_interval=5).to_dict() == {
            "check_interval": 5,
            "read_file": False,
            "verbose": False,
            "encoding": "utf-8",
        }


class TestCacheConfigValidation:
    """Invalid options are rejected at construction."""

    @pytest.mark.parametrize("value", [-1, -0.5])
    def test_negative_interval(self, value):
        with pytest.raises(ConfigurationError):
            CacheConfig(check_interval=value)

    @pytest.mark.parametrize("value", ["1000", None, True])
    def test_non_numeric_interval(self, value):
        with pytest.raises(ConfigurationError, match="number"):
            CacheConfig(check_interval=value)

    def test_non_basic_attribute(self):
        config = CacheConfig()

        with pytest.raises(TypeError, match="invalid type"):
            config.encoding = object()

    def test_unknown_key_strict(self):
        with pytest.raises(ConfigurationError, match="Unknown options"):
            CacheConfig.from_dict({"check_interval": 1, "ttl": 5})

    def test_unknown_key_lenient(self):
        config = CacheConfig.from_dict({"check_interval": 1, "ttl": 5}, strict=False)

        assert config.check_interval == 1


class TestCacheConfigPersistence:
    """Round trip through JSON files."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "cache.json"
        CacheConfig(check_interval=750, read_file=True).save(path)

        loaded = CacheConfig.load(path)

        assert loaded == CacheConfig(check_interval=750, read_file=True)

    def test_save_update_preserves_foreign_keys(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text(json.dumps({"owner": "ops", "check_interval": 1}), encoding="utf-8")

        CacheConfig(check_interval=2).save(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["owner"] == "ops"
        assert data["check_interval"] == 2

    def test_load_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text('{"verbose": true}', encoding="utf-8")

        config = CacheConfig.load(path)

        assert config.verbose is True
        assert config.check_interval == 20000

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            CacheConfig.load(tmp_path / "nope.json")

    def test_load_non_object(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="JSON object"):
            CacheConfig.load(path)


class TestCacheConfigFromEnv:
    """Environment overrides."""

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("FILEDATACACHE_CHECK_INTERVAL", "1500")
        monkeypatch.setenv("FILEDATACACHE_READ_FILE", "yes")
        monkeypatch.setenv("FILEDATACACHE_VERBOSE", "0")
        monkeypatch.setenv("FILEDATACACHE_ENCODING", "latin-1")

        config = CacheConfig.from_env()

        assert config.check_interval == 1500
        assert config.read_file is True
        assert config.verbose is False
        assert config.encoding == "latin-1"

    def test_env_unset_keeps_defaults(self, monkeypatch):
        for name in ("CHECK_INTERVAL", "READ_FILE", "VERBOSE", "ENCODING"):
            monkeypatch.delenv(f"FILEDATACACHE_{name}", raising=False)

        assert CacheConfig.from_env() == CacheConfig()

    def test_env_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("APP_CHECK_INTERVAL", "2.5")

        assert CacheConfig.from_env(prefix="APP_").check_interval == 2.5

    @pytest.mark.parametrize("raw, expected", [("1e3", 1000.0), ("250", 250), (" 75 ", 75), ("0.5", 0.5)])
    def test_env_interval_number_forms(self, monkeypatch, raw, expected):
        monkeypatch.setenv("FILEDATACACHE_CHECK_INTERVAL", raw)

        assert CacheConfig.from_env().check_interval == expected

    def test_env_nan_interval(self, monkeypatch):
        monkeypatch.setenv("FILEDATACACHE_CHECK_INTERVAL", "nan")

        with pytest.raises(ConfigurationError, match=">= 0"):
            CacheConfig.from_env()

    def test_env_bad_interval(self, monkeypatch):
        monkeypatch.setenv("FILEDATACACHE_CHECK_INTERVAL", "soon")

        with pytest.raises(ConfigurationError, match="CHECK_INTERVAL"):
            CacheConfig.from_env()

    def test_env_bad_flag(self, monkeypatch):
        monkeypatch.setenv("FILEDATACACHE_READ_FILE", "maybe")

        with pytest.raises(ConfigurationError, match="boolean"):
            CacheConfig.from_env()
