"""
Dialog Admin Server - Auto-Responder Settings Schema

Every auto-responder setting is declared here with its payload field name,
storage key, type and default. All conversion between typed values and the
strings kept in the key-value table goes through this module.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from exceptions import InvalidInputError

SettingValue = Union[bool, str]

ENABLED_FIELD = "enabled"
TEXT_FIELD = "text"
KEY_PREFIX = "auto_responder_"

INVALID_ENABLED_MESSAGE = "Invalid enabled value"
INVALID_TEXT_MESSAGE = "Invalid text value"


class SettingType(Enum):
    BOOL = "bool"
    STRING = "string"


@dataclass(frozen=True)
class SettingEntry:
    field: str
    key: str
    type: SettingType
    default: SettingValue


def BuildAutoResponderSchema(extra_locales: Optional[List[str]] = None) -> List[SettingEntry]:
    """
    Build the ordered list of auto-responder settings

    The enabled flag and the default text always exist. Each extra locale
    adds a text_<locale> field stored under auto_responder_text_<locale>.
    """
    schema = [
        SettingEntry(ENABLED_FIELD, KEY_PREFIX + "enabled", SettingType.BOOL, False),
        SettingEntry(TEXT_FIELD, KEY_PREFIX + "text", SettingType.STRING, ""),
    ]
    for locale in extra_locales or []:
        field = f"{TEXT_FIELD}_{locale}"
        schema.append(SettingEntry(field, KEY_PREFIX + field, SettingType.STRING, ""))
    return schema


# ---------------------------------------------------------------------------
# Value decoding / encoding
# ---------------------------------------------------------------------------


def DecodeValue(entry: SettingEntry, raw: Optional[str]) -> SettingValue:
    """Decode a stored string (or None when absent) into its typed value."""
    if entry.type == SettingType.BOOL:
        # Exact match only: "TRUE", "1" and missing rows all read as False
        return raw == "true"
    return raw if raw is not None else entry.default


def EncodeValue(entry: SettingEntry, value: SettingValue) -> str:
    """Encode a validated typed value as the string stored in the table."""
    if entry.type == SettingType.BOOL:
        return "true" if value else "false"
    return value


def DecodeSettings(schema: List[SettingEntry], raw_by_key: Dict[str, str]) -> Dict[str, SettingValue]:
    """Map stored rows (key -> raw value) onto payload fields."""
    return {entry.field: DecodeValue(entry, raw_by_key.get(entry.key)) for entry in schema}


def EncodeSettings(schema: List[SettingEntry], values: Dict[str, SettingValue]) -> Dict[str, str]:
    """Map validated payload fields onto stored rows (key -> raw value)."""
    return {entry.key: EncodeValue(entry, values[entry.field]) for entry in schema}


# ---------------------------------------------------------------------------
# Payload validation
# ---------------------------------------------------------------------------


def _HasType(entry: SettingEntry, value) -> bool:
    if entry.type == SettingType.BOOL:
        return isinstance(value, bool)
    return isinstance(value, str)


def ValidatePayload(schema: List[SettingEntry], body) -> Dict[str, SettingValue]:
    """
    Check a decoded JSON body against the schema

    Only types are checked. Fields not in the schema are ignored and a body
    that is not a JSON object is treated as having no fields.

    Args:
        schema: Settings schema
        body: Decoded JSON request body

    Returns:
        Dictionary of field -> value for every schema entry

    Raises:
        InvalidInputError: If the enabled flag is not a boolean or any
                           text field is not a string
    """
    if not isinstance(body, dict):
        body = {}

    values = {}
    for entry in schema:
        value = body.get(entry.field)
        if not _HasType(entry, value):
            if entry.type == SettingType.BOOL:
                raise InvalidInputError(INVALID_ENABLED_MESSAGE)
            raise InvalidInputError(INVALID_TEXT_MESSAGE)
        values[entry.field] = value
    return values
