"""Tests for configuration loading."""

import json
import tempfile
from pathlib import Path

from gearsync.config import (
    ACCESS_TOKEN_ENV,
    DEFAULT_API_URL,
    DEFAULT_THROTTLE_SECONDS,
    Config,
)


class TestConfig:
    """Tests for Config."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = Path(self.temp_dir) / "config.json"

    def test_defaults_when_missing(self):
        config = Config.load(self.config_file)

        assert config.api_url == DEFAULT_API_URL
        assert config.sync.throttle_seconds == DEFAULT_THROTTLE_SECONDS
        assert config.access_token is None

    def test_save_and_load(self):
        config = Config(access_token="abc")
        config.sync.interval_seconds = 7200
        config.save(self.config_file)

        loaded = Config.load(self.config_file)

        assert loaded.access_token == "abc"
        assert loaded.sync.interval_seconds == 7200

    def test_corrupt_file_falls_back_to_defaults(self):
        self.config_file.write_text("{not json")

        assert Config.load(self.config_file) == Config()

    def test_unknown_keys_ignored(self):
        self.config_file.write_text(json.dumps({"debug_mode": True, "legacy": 1}))

        config = Config.load(self.config_file)

        assert config.debug_mode is True

    def test_interval_and_throttle_clamped(self):
        self.config_file.write_text(
            json.dumps({"sync": {"interval_seconds": 5, "throttle_seconds": -1}})
        )

        config = Config.load(self.config_file)

        assert config.sync.interval_seconds == 300
        assert config.sync.throttle_seconds == 0

    def test_env_token_overrides_config(self, monkeypatch):
        monkeypatch.setenv(ACCESS_TOKEN_ENV, "from-env")

        assert Config(access_token="stored").resolve_access_token() == "from-env"

    def test_config_token_without_env(self, monkeypatch):
        monkeypatch.delenv(ACCESS_TOKEN_ENV, raising=False)

        assert Config(access_token="stored").resolve_access_token() == "stored"
