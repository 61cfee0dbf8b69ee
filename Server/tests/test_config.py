"""
Tests for server configuration loading
"""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import DEFAULT_CONFIG, LoadConfig, ParseLocales


def test_defaults_without_file(tmp_path):
    """Test defaults are used when no file or env override exists"""
    config = LoadConfig(str(tmp_path / "missing.json"), environ={})

    assert config == DEFAULT_CONFIG


def test_file_then_env_precedence(tmp_path):
    """Test the JSON file overrides defaults and env overrides the file"""
    config_file = tmp_path / "server_config.json"
    config_file.write_text(json.dumps({
        "port": 9000,
        "admin_role": "support_lead",
        "extra_locales": ["EN", "de"],
        "unknown": True
    }))

    config = LoadConfig(str(config_file), environ={"DIALOG_PORT": "9100", "DIALOG_LOG_DIR": ""})

    assert config["port"] == 9100
    assert config["admin_role"] == "support_lead"
    assert config["extra_locales"] == ["en", "de"]
    assert config["log_dir"] == ""
    assert "unknown" not in config


def test_config_file_from_env(tmp_path):
    """Test DIALOG_CONFIG_FILE selects the config file"""
    config_file = tmp_path / "custom.json"
    config_file.write_text(json.dumps({"database_path": "/srv/dialog.db"}))

    config = LoadConfig(environ={"DIALOG_CONFIG_FILE": str(config_file)})

    assert config["database_path"] == "/srv/dialog.db"


def test_invalid_value_raises(tmp_path):
    """Test a non-numeric port is reported"""
    with pytest.raises(ValueError):
        LoadConfig(str(tmp_path / "missing.json"), environ={"DIALOG_PORT": "eighty"})


def test_parse_locales():
    """Test locale lists from env strings and JSON lists"""
    assert ParseLocales("en, DE,,en ") == ["en", "de"]
    assert ParseLocales(["uk"]) == ["uk"]
    assert ParseLocales(None) == []
