from __future__ import annotations

import json
from typing import Any, List

from .accessors import get_positional_value, get_value_by_path
from .models import ABSENT, MappingConfig, ResponseFormat

# Container keys commonly wrapping a list of records, probed in order.
ENVELOPE_KEYS = ('data', 'items', 'results', 'records', 'organizations')

UNKNOWN_KEY = 'unknown'


def resolve_record_collection(data: Any, response_format=ResponseFormat.JSON) -> List[Any]:
    """Split a response into the records an entity collection is built from."""
    if data is None or data is ABSENT:
        return []

    if ResponseFormat(response_format) is ResponseFormat.POSITIONAL:
        if isinstance(data, list):
            if data and isinstance(data[0], list):
                return data
            return [data]
        return []

    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ENVELOPE_KEYS:
            value = data.get(key)
            if isinstance(value, list):
                return value
        return [data]
    return []


def _key_text(value: Any) -> str:
    if isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def extract_entity_key(record: Any, config: MappingConfig) -> str:
    """Join key of one record; missing or empty keys become 'unknown'."""
    if config.response_format is ResponseFormat.POSITIONAL:
        value = get_positional_value(record, config.key_index)
    else:
        value = get_value_by_path(record, config.key_path)
    if value is ABSENT or value is None or value == '':
        return UNKNOWN_KEY
    return _key_text(value)
