"""
Dialog Admin Server - Configuration

Loads server configuration from defaults, an optional JSON file and
environment variables (in that order of precedence, lowest first).
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

# Configure logging
logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "DIALOG_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "server_config.json"

# Default configuration values
DEFAULT_CONFIG = {
    "database_path": "database/dialog.db",
    "host": "0.0.0.0",
    "port": 8000,
    "log_level": "INFO",
    "log_dir": "logs",  # Empty string disables the log file
    "admin_role": "dialog_admin",
    "extra_locales": [],  # Each locale adds a text_<locale> field
    "session_lifetime_hours": 24,
    "session_secret": "",  # Shared with the login service; empty disables signed cookies
    "session_algorithm": "HS256"
}

# Environment variable overrides
ENV_OVERRIDES = {
    "database_path": "DIALOG_DB_PATH",
    "host": "DIALOG_HOST",
    "port": "DIALOG_PORT",
    "log_level": "DIALOG_LOG_LEVEL",
    "log_dir": "DIALOG_LOG_DIR",
    "admin_role": "DIALOG_ADMIN_ROLE",
    "extra_locales": "DIALOG_EXTRA_LOCALES",
    "session_lifetime_hours": "DIALOG_SESSION_LIFETIME_HOURS",
    "session_secret": "DIALOG_SESSION_SECRET",
    "session_algorithm": "DIALOG_SESSION_ALGORITHM"
}


def ParseLocales(raw) -> list:
    """
    Normalize a locale list given as a list or a comma separated string

    Returns:
        List of lower-case locale codes, duplicates removed, order kept
    """
    if isinstance(raw, str):
        raw = raw.split(",")

    locales = []
    for locale in raw or []:
        locale = str(locale).strip().lower()
        if locale and locale not in locales:
            locales.append(locale)
    return locales


def _CoerceValue(key: str, raw: Any) -> Any:
    """Convert a raw config value to the type of its default"""
    default = DEFAULT_CONFIG[key]
    if key == "extra_locales":
        return ParseLocales(raw)
    if isinstance(default, int):
        return int(raw)
    return str(raw)


def LoadConfig(config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Load the server configuration

    Args:
        config_file: Path to a JSON config file (defaults to $DIALOG_CONFIG_FILE
                     or server_config.json in the working directory)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Configuration dictionary with every key of DEFAULT_CONFIG present

    Raises:
        ValueError: If a configured value cannot be converted to its type
    """
    environ = os.environ if environ is None else environ
    config = DEFAULT_CONFIG.copy()

    path = Path(config_file or environ.get(CONFIG_FILE_ENV) or DEFAULT_CONFIG_FILE)
    if path.exists():
        logger.debug(f"Loading configuration from {path}")
        with open(path, 'r', encoding='utf-8') as f:
            file_config = json.load(f)
        for key, value in file_config.items():
            if key not in DEFAULT_CONFIG:
                logger.warning(f"Ignoring unknown configuration key '{key}' in {path}")
                continue
            config[key] = value

    for key, env_name in ENV_OVERRIDES.items():
        if env_name in environ:
            config[key] = environ[env_name]

    for key in DEFAULT_CONFIG:
        try:
            config[key] = _CoerceValue(key, config[key])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for configuration key '{key}': {config[key]!r}") from e

    return config
