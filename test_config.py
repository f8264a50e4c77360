"""
Tests for configuration loading and validation
"""

import logging

import pytest

from config.config import MusicVibeConfig, load_config, validate_config
from config.logging_config import setup_logging

CONFIG_ENV_VARS = [
    'API_HOST', 'API_PORT', 'DEBUG_MODE', 'CORS_ORIGINS', 'DATABASE_PATH', 'SEED_SAMPLE_DATA',
    'ITUNES_SEARCH_URL', 'ITUNES_RESULT_LIMIT', 'LYRICS_API_URL', 'HTTP_USER_AGENT',
    'HTTP_TIMEOUT_SECONDS', 'LOG_LEVEL', 'LOG_FILE',
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with none of the config variables set"""
    monkeypatch.chdir(tmp_path)
    for name in CONFIG_ENV_VARS:
        # setenv first so monkeypatch restores the variable even if a .env file sets it
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path


def test_defaults(clean_env):
    config = load_config()

    assert config.api_port == 8080
    assert config.database_path == "musicvibe.db"
    assert config.seed_sample_data is True
    assert config.cors_origins == ["*"]
    assert config.itunes_result_limit == 20
    assert config.lyrics_api_url == "https://api.lyrics.ovh/v1"
    assert config.http_user_agent == "MusicVibe/1.0"
    assert config.http_timeout_seconds is None


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv('API_PORT', "9090")
    monkeypatch.setenv('DEBUG_MODE', "yes")
    monkeypatch.setenv('SEED_SAMPLE_DATA', "false")
    monkeypatch.setenv('CORS_ORIGINS', "http://localhost:3000, http://localhost:5173")
    monkeypatch.setenv('HTTP_TIMEOUT_SECONDS', "2.5")

    config = load_config()

    assert config.api_port == 9090
    assert config.debug_mode is True
    assert config.seed_sample_data is False
    assert config.cors_origins == ["http://localhost:3000", "http://localhost:5173"]
    assert config.http_timeout_seconds == 2.5


def test_dotenv_file_is_read_and_environment_wins(clean_env, monkeypatch):
    (clean_env / ".env").write_text(
        "# local settings\n"
        "DATABASE_PATH=\"from_dotenv.db\"\n"
        "API_PORT=7000\n"
    )
    monkeypatch.setenv('API_PORT', "7100")

    config = load_config()

    assert config.database_path == "from_dotenv.db"
    assert config.api_port == 7100


def test_invalid_configuration_exits(clean_env, monkeypatch):
    monkeypatch.setenv('ITUNES_RESULT_LIMIT', "500")
    with pytest.raises(SystemExit):
        load_config()


@pytest.mark.parametrize("overrides, message", [
    ({'api_port': 0}, "API port must be between 1 and 65535"),
    ({'database_path': ""}, "Database path is required"),
    ({'itunes_result_limit': 0}, "iTunes result limit must be between 1 and 200"),
    ({'http_timeout_seconds': 0}, "HTTP timeout must be positive when set"),
    ({'log_level': "LOUD"}, "Unknown log level: LOUD"),
    ({'log_level': "WARN"}, "Unknown log level: WARN"),
    ({'log_level': "fatal"}, "Unknown log level: fatal"),
    ({'log_level': "NOTSET"}, "Unknown log level: NOTSET"),
])
def test_validate_config_errors(overrides, message):
    assert validate_config(MusicVibeConfig(**overrides)) == [message]


def test_validate_default_config():
    assert validate_config(MusicVibeConfig()) == []


@pytest.mark.parametrize("level", ["debug", "INFO", "Warning", "error", "CRITICAL"])
def test_validate_accepts_server_log_levels(level):
    assert validate_config(MusicVibeConfig(log_level=level)) == []


def test_log_level_alias_from_environment_exits(clean_env, monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', "WARN")
    with pytest.raises(SystemExit):
        load_config()


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "musicvibe.log"
    setup_logging(MusicVibeConfig(log_level="debug", log_file=str(log_file)))

    logging.getLogger("musicvibe.test").debug("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert "hello from the test" in log_file.read_text()

    # Cleanup: Close the file handler so later tests log to the console only
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)
        handler.close()
