"""
Field coercion helpers shared by the provider data models.

Each helper raises DeserializationError naming the entity and field, so a
schema change in a provider shows up as one clear log line.
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from reworkbot.utils.exceptions import DeserializationError

_MISSING = object()


def require_mapping(data: Any, entity: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DeserializationError(entity, f"expected a JSON object, got {type(data).__name__}")
    return data


def _raw(data: Mapping[str, Any], key: str, entity: str, required: bool) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        if required:
            raise DeserializationError(entity, f"missing required field '{key}'")
        return None
    return value


def int_field(data: Mapping[str, Any], key: str, entity: str, required: bool = False) -> Optional[int]:
    value = _raw(data, key, entity, required)
    if value is None:
        return None
    # bool is an int subclass but never a valid id or count
    if isinstance(value, bool):
        raise DeserializationError(entity, f"field '{key}' is not an integer: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise DeserializationError(entity, f"field '{key}' is not an integer: {value!r}")


def float_field(data: Mapping[str, Any], key: str, entity: str, required: bool = False) -> Optional[float]:
    value = _raw(data, key, entity, required)
    if value is None:
        return None
    if isinstance(value, bool):
        raise DeserializationError(entity, f"field '{key}' is not a number: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise DeserializationError(entity, f"field '{key}' is not a number: {value!r}")


def str_field(data: Mapping[str, Any], key: str, entity: str, required: bool = False) -> Optional[str]:
    value = _raw(data, key, entity, required)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise DeserializationError(entity, f"field '{key}' is not a string: {value!r}")
    return str(value)


def bool_field(data: Mapping[str, Any], key: str, entity: str, required: bool = False) -> Optional[bool]:
    value = _raw(data, key, entity, required)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if value in (0, 1):
        return bool(value)
    raise DeserializationError(entity, f"field '{key}' is not a boolean: {value!r}")


def datetime_field(data: Mapping[str, Any], key: str, entity: str, required: bool = False) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC."""
    value = _raw(data, key, entity, required)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DeserializationError(entity, f"field '{key}' is not a timestamp: {value!r}")
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise DeserializationError(entity, f"field '{key}' is not a timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
