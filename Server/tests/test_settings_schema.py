"""
Tests for the auto-responder settings schema

Tests decoding of stored strings, encoding of typed values and payload validation.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exceptions import InvalidInputError
from settings_schema import (
    BuildAutoResponderSchema, DecodeSettings, DecodeValue, EncodeSettings,
    EncodeValue, SettingType, ValidatePayload
)


def test_default_schema():
    """Test the schema always has the enabled flag and the default text"""
    schema = BuildAutoResponderSchema()

    assert [(e.field, e.key, e.type) for e in schema] == [
        ("enabled", "auto_responder_enabled", SettingType.BOOL),
        ("text", "auto_responder_text", SettingType.STRING),
    ]


def test_schema_with_locales():
    """Test extra locales append text fields in the given order"""
    schema = BuildAutoResponderSchema(["en", "uk"])

    assert [e.field for e in schema] == ["enabled", "text", "text_en", "text_uk"]
    assert schema[3].key == "auto_responder_text_uk"
    assert schema[3].default == ""


def test_decode_bool_is_exact_match():
    """Test only "true" decodes to True"""
    enabled = BuildAutoResponderSchema()[0]

    assert DecodeValue(enabled, "true") is True
    for raw in ["TRUE", "True", "1", "on", "false", "", None]:
        assert DecodeValue(enabled, raw) is False


def test_decode_string_defaults_when_absent():
    """Test a missing text row decodes to an empty string"""
    text = BuildAutoResponderSchema()[1]

    assert DecodeValue(text, None) == ""
    assert DecodeValue(text, "") == ""
    assert DecodeValue(text, "hello") == "hello"


def test_encode_values():
    """Test booleans are stored as "true"/"false" and text verbatim"""
    enabled, text = BuildAutoResponderSchema()

    assert EncodeValue(enabled, True) == "true"
    assert EncodeValue(enabled, False) == "false"
    assert EncodeValue(text, " spaced \n") == " spaced \n"


def test_decode_and_encode_settings():
    """Test mapping between payload fields and storage keys"""
    schema = BuildAutoResponderSchema(["en"])

    assert DecodeSettings(schema, {"auto_responder_text_en": "Hi", "unrelated": "x"}) == {
        "enabled": False, "text": "", "text_en": "Hi"
    }
    assert EncodeSettings(schema, {"enabled": True, "text": "a", "text_en": "b"}) == {
        "auto_responder_enabled": "true",
        "auto_responder_text": "a",
        "auto_responder_text_en": "b",
    }


def test_validate_accepts_exact_types():
    """Test a well-formed payload is returned without extra fields"""
    schema = BuildAutoResponderSchema()

    values = ValidatePayload(schema, {"enabled": False, "text": "", "other": 1})

    assert values == {"enabled": False, "text": ""}


@pytest.mark.parametrize("body, message", [
    ({"enabled": "true", "text": "x"}, "Invalid enabled value"),
    ({"enabled": 1, "text": "x"}, "Invalid enabled value"),
    ({"text": "x"}, "Invalid enabled value"),
    ({"enabled": True, "text": 5}, "Invalid text value"),
    ({"enabled": True}, "Invalid text value"),
    ({"enabled": 0, "text": 5}, "Invalid enabled value"),
    (None, "Invalid enabled value"),
    (["enabled"], "Invalid enabled value"),
])
def test_validate_rejects_wrong_types(body, message):
    """Test each type error maps to its message, enabled checked first"""
    with pytest.raises(InvalidInputError) as excinfo:
        ValidatePayload(BuildAutoResponderSchema(), body)

    assert excinfo.value.message == message
    assert excinfo.value.status_code == 400


def test_validate_checks_every_locale():
    """Test a wrong type in a locale text is rejected"""
    schema = BuildAutoResponderSchema(["en"])

    with pytest.raises(InvalidInputError):
        ValidatePayload(schema, {"enabled": True, "text": "a", "text_en": None})
