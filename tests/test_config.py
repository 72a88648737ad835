"""
Tests for settings and logging setup
"""

import pytest
import sys
from pathlib import Path

import structlog

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class TestSettings:
    """Tests for environment-driven settings"""

    def test_defaults(self, monkeypatch):
        """Test settings fall back to local development values"""
        from sampleapp.config import Settings

        for name in ("API_BASE_URL", "APP_ENV", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "http://localhost:8000"
        assert settings.is_development
        assert not settings.is_production
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables are read case-insensitively"""
        from sampleapp.config import Settings

        monkeypatch.setenv("api_base_url", "https://api.example.com")
        monkeypatch.setenv("APP_ENV", "Production")

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://api.example.com"
        assert settings.is_production

    def test_get_settings_is_cached(self):
        """Test the same instance is shared"""
        from sampleapp.config import get_settings

        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for structlog configuration"""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_development_uses_console_renderer(self):
        """Test development output is human readable"""
        from sampleapp.config import Settings
        from sampleapp.logging_config import configure_logging

        configure_logging(Settings(_env_file=None, app_env="development"))

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_production_uses_json_renderer(self):
        """Test non-development output is JSON"""
        from sampleapp.config import Settings
        from sampleapp.logging_config import configure_logging

        configure_logging(Settings(_env_file=None, app_env="production", log_level="warning"))

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_loggers_cached_on_first_use(self):
        """Test bound loggers are cached once configured"""
        from sampleapp.config import Settings
        from sampleapp.logging_config import configure_logging

        configure_logging(Settings(_env_file=None))

        assert structlog.get_config()["cache_logger_on_first_use"] is True

    def test_debug_filtered_at_info_level(self, capsys):
        """Test the per-request debug line is dropped at the default level"""
        from sampleapp.config import Settings
        from sampleapp.logging_config import configure_logging

        configure_logging(Settings(_env_file=None, log_level="INFO"))
        structlog.get_logger().debug("Fetching user", path="/api/users/1")

        assert "Fetching user" not in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
