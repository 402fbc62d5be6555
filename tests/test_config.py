"""Unit tests for configuration management."""

from profilepage.config import PageConfig, LogFormat


class TestPageConfigDefaults:
    """Test default configuration values."""

    def test_default_sqlite_path(self):
        config = PageConfig()
        assert config.sqlite_path == ".profilepage.db"

    def test_default_path_prefix(self):
        config = PageConfig()
        assert config.profile_path_prefix == "/profile"

    def test_default_log_settings(self):
        config = PageConfig()
        assert config.log_level == "INFO"
        assert config.log_format == LogFormat.CONSOLE


class TestPageConfigEnvVars:
    """Test configuration from environment variables."""

    def test_sqlite_path_from_env(self, monkeypatch):
        monkeypatch.setenv("PROFILEPAGE_SQLITE_PATH", "/tmp/profiles.db")
        config = PageConfig()
        assert config.sqlite_path == "/tmp/profiles.db"

    def test_path_prefix_from_env(self, monkeypatch):
        monkeypatch.setenv("PROFILEPAGE_PROFILE_PATH_PREFIX", "/u")
        config = PageConfig()
        assert config.profile_path_prefix == "/u"

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("PROFILEPAGE_LOG_FORMAT", "json")
        config = PageConfig()
        assert config.log_format == LogFormat.JSON

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("PROFILEPAGE_LOG_LEVEL", "DEBUG")
        config = PageConfig()
        assert config.log_level == "DEBUG"


class TestLogFormatEnum:
    """Test LogFormat enum values."""

    def test_log_formats(self):
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"
