# tests/test_config.py
"""Tests for vidplayer configuration."""

from pathlib import Path
from unittest.mock import patch

from vidplayer.config import DEFAULT_CATALOG_PATH, Settings


class TestSettings:
    def test_default_settings(self):
        s = Settings()
        assert s.catalog_path is None
        assert s.default_flag_reason == "Not supplied"
        assert s.random_seed is None

    def test_default_catalog_is_bundled(self):
        s = Settings()
        assert s.resolved_catalog_path == DEFAULT_CATALOG_PATH
        assert DEFAULT_CATALOG_PATH.exists()

    def test_catalog_override(self):
        s = Settings(catalog_path=Path("/tmp/custom.txt"))
        assert s.resolved_catalog_path == Path("/tmp/custom.txt")

    def test_env_override(self):
        with patch.dict("os.environ", {"VIDPLAYER_DEFAULT_FLAG_REASON": "policy", "VIDPLAYER_RANDOM_SEED": "7"}):
            s = Settings()
            assert s.default_flag_reason == "policy"
            assert s.random_seed == 7
