"""
Centralized Configuration System for MusicVibe

This module provides a unified way to manage configuration from:
1. Environment variables
2. A .env file in the working directory
3. Default values

Priority order (highest to lowest):
1. Environment variables
2. .env file
3. Default values
"""

import os
import sys
from typing import List, Optional
from dataclasses import dataclass, field

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MusicVibeConfig:
    """MusicVibe configuration class"""

    # API server configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    debug_mode: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Database configuration
    database_path: str = "musicvibe.db"
    seed_sample_data: bool = True

    # External APIs
    itunes_search_url: str = "https://itunes.apple.com/search"
    itunes_result_limit: int = 20
    lyrics_api_url: str = "https://api.lyrics.ovh/v1"
    http_user_agent: str = "MusicVibe/1.0"
    http_timeout_seconds: Optional[float] = None  # None means wait indefinitely

    # Logging configuration
    log_level: str = "INFO"
    log_file: str = "musicvibe.log"


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes', 'on')


def load_from_env() -> dict:
    """Load configuration from environment variables"""
    env_config = {}

    # API server configuration
    if os.getenv('API_HOST'):
        env_config['api_host'] = os.getenv('API_HOST')
    if os.getenv('API_PORT'):
        env_config['api_port'] = int(os.getenv('API_PORT'))
    if os.getenv('DEBUG_MODE'):
        env_config['debug_mode'] = _parse_bool(os.getenv('DEBUG_MODE'))
    if os.getenv('CORS_ORIGINS'):
        env_config['cors_origins'] = [origin.strip() for origin in os.getenv('CORS_ORIGINS').split(',') if origin.strip()]

    # Database configuration
    if os.getenv('DATABASE_PATH'):
        env_config['database_path'] = os.getenv('DATABASE_PATH')
    if os.getenv('SEED_SAMPLE_DATA'):
        env_config['seed_sample_data'] = _parse_bool(os.getenv('SEED_SAMPLE_DATA'))

    # External APIs
    if os.getenv('ITUNES_SEARCH_URL'):
        env_config['itunes_search_url'] = os.getenv('ITUNES_SEARCH_URL')
    if os.getenv('ITUNES_RESULT_LIMIT'):
        env_config['itunes_result_limit'] = int(os.getenv('ITUNES_RESULT_LIMIT'))
    if os.getenv('LYRICS_API_URL'):
        env_config['lyrics_api_url'] = os.getenv('LYRICS_API_URL')
    if os.getenv('HTTP_USER_AGENT'):
        env_config['http_user_agent'] = os.getenv('HTTP_USER_AGENT')
    if os.getenv('HTTP_TIMEOUT_SECONDS'):
        env_config['http_timeout_seconds'] = float(os.getenv('HTTP_TIMEOUT_SECONDS'))

    # Logging configuration
    if os.getenv('LOG_LEVEL'):
        env_config['log_level'] = os.getenv('LOG_LEVEL')
    if os.getenv('LOG_FILE') is not None:
        env_config['log_file'] = os.getenv('LOG_FILE')

    return env_config


def load_from_dotenv(env_file_path: str = '.env') -> dict:
    """Load configuration from .env file"""
    env_config = {}

    if os.path.exists(env_file_path):
        try:
            with open(env_file_path, 'r') as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))

            # Re-load from environment after setting .env variables
            env_config = load_from_env()
        except OSError as e:
            print(f"Warning: Error reading .env file: {e}")

    return env_config


def load_config() -> MusicVibeConfig:
    """Load configuration from all sources with proper priority"""

    # Load configuration from different sources
    default_config = MusicVibeConfig()
    dotenv_config = load_from_dotenv()
    env_config = load_from_env()

    # Merge configurations (later configs override earlier ones)
    merged_config = merge_configs(
        default_config.__dict__,
        dotenv_config,
        env_config
    )

    # Create final config object
    config = MusicVibeConfig(**merged_config)

    # Validate configuration
    errors = validate_config(config)
    if errors:
        print("Configuration errors:")
        for error in errors:
            print(f"  - {error}")
        print("\nPlease check the environment variables or the .env file.")
        sys.exit(1)

    return config


def merge_configs(*configs) -> dict:
    """Merge multiple configuration dictionaries"""
    merged = {}
    for config in configs:
        merged.update(config)
    return merged


def validate_config(config: MusicVibeConfig) -> List[str]:
    """Validate configuration and return list of errors"""
    errors = []

    if config.api_port < 1 or config.api_port > 65535:
        errors.append("API port must be between 1 and 65535")

    if not config.database_path:
        errors.append("Database path is required")

    if config.itunes_result_limit < 1 or config.itunes_result_limit > 200:
        errors.append("iTunes result limit must be between 1 and 200")

    if config.http_timeout_seconds is not None and config.http_timeout_seconds <= 0:
        errors.append("HTTP timeout must be positive when set")

    # uvicorn knows no aliases such as WARN or FATAL
    if config.log_level.upper() not in LOG_LEVELS:
        errors.append(f"Unknown log level: {config.log_level}")

    return errors


def get_config() -> MusicVibeConfig:
    """Get the current configuration (main entry point)"""
    return load_config()


if __name__ == "__main__":
    config = load_config()

    print("Current MusicVibe Configuration:")
    print(f"  API: {config.api_host}:{config.api_port}")
    print(f"  Debug Mode: {config.debug_mode}")
    print(f"  Database: {config.database_path}")
    print(f"  Seed Sample Data: {config.seed_sample_data}")
    print(f"  iTunes Search: {config.itunes_search_url} (limit {config.itunes_result_limit})")
    print(f"  Lyrics API: {config.lyrics_api_url}")
    print(f"  Log Level: {config.log_level}")
