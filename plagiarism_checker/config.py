"""
Front-end settings read from the environment (and an optional .env file).

The engine itself takes explicit arguments; only ``app.py`` and
``main.py`` consult this module.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def load_config() -> dict:
    """Build the settings dictionary from the current environment."""
    return {
        'min_match_length': _env_int('PLAGIARISM_MIN_MATCH_LENGTH', 5),
        'max_workers': _env_int('PLAGIARISM_MAX_WORKERS', 1),
        'max_upload_mb': _env_int('PLAGIARISM_MAX_UPLOAD_MB', 5),
        'max_input_chars': _env_int('PLAGIARISM_MAX_INPUT_CHARS', 20000),
        'log_level': os.getenv('LOG_LEVEL', 'INFO'),
        'log_dir': os.getenv('LOG_DIR', 'logs'),
        'structured_logging': _env_bool('LOG_STRUCTURED', True),
    }


APP_CONFIG = load_config()
