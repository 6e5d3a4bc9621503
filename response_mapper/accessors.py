from __future__ import annotations

import logging
from typing import Any

from .models import ABSENT, ResponseFormat
from .paths import WILDCARD, parse_index, parse_segment, split_path

logger = logging.getLogger(__name__)


def get_positional_value(record: Any, address) -> Any:
    """Element of a flat positional record, or ABSENT."""
    index = parse_index(address)
    if index is None or not isinstance(record, list):
        return ABSENT
    if index >= len(record):
        return ABSENT
    return record[index]


def get_value_by_path(data: Any, path: str, strict: bool = False) -> Any:
    """Walk a keyed address (`$.a.b[0].c`, `$.items[*]`) through nested data.

    A `[*]` segment returns the whole list it lands on and ends the walk.
    A plain segment against something that is not a dict leaves the current
    value unchanged unless `strict` is set, in which case it yields ABSENT.
    A `key[N]` segment against a list yields ABSENT; against a scalar the
    key step is skipped.
    """
    try:
        current = data
        for part in split_path(path):
            if current is None or current is ABSENT:
                return ABSENT

            key, index = parse_segment(part)
            if index is not None:
                if key and isinstance(current, dict):
                    current = current.get(key, ABSENT)
                elif key and (strict or isinstance(current, list)):
                    # lists have no named keys
                    return ABSENT
                if isinstance(current, list):
                    if index == WILDCARD:
                        return current
                    position = int(index)
                    current = current[position] if position < len(current) else ABSENT
                elif strict:
                    return ABSENT
            elif isinstance(current, dict):
                current = current.get(part, ABSENT)
            elif strict:
                return ABSENT
        return current
    except Exception:
        logger.debug("Failed to resolve %r", path, exc_info=True)
        return ABSENT


def resolve_value(data: Any, address, response_format=ResponseFormat.JSON, strict: bool = False) -> Any:
    """Value at `address` in `data`, or ABSENT. Never raises."""
    if data is None or data is ABSENT:
        return ABSENT
    try:
        if ResponseFormat(response_format) is ResponseFormat.POSITIONAL:
            return get_positional_value(data, address)
    except ValueError:
        return ABSENT
    return get_value_by_path(data, address, strict=strict)
