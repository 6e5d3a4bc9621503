from __future__ import annotations

import json
from typing import Any, List, Union

from .paths import ROOT, WILDCARD, join_key, join_wildcard

Sample = Union[str, int, float, bool, None]


def enumerate_paths(data: Any, prefix: str = ROOT) -> List[str]:
    """List every keyed address reachable in `data`, depth first.

    Lists contribute a single `[*]` address and only their first element is
    explored, on the assumption that elements share a shape.
    """
    paths: List[str] = []
    if data is None:
        return paths

    if isinstance(data, list):
        current = join_wildcard(prefix)
        paths.append(current)
        if data:
            paths.extend(enumerate_paths(data[0], current))
    elif isinstance(data, dict):
        for key, value in data.items():
            current = join_key(prefix, key)
            paths.append(current)
            paths.extend(enumerate_paths(value, current))
    return paths


def find_record_paths(data: Any) -> List[str]:
    """Addresses that point at lists, i.e. candidate record collections."""
    return [p for p in enumerate_paths(data) if p.endswith(f"[{WILDCARD}]")]


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (dict, list))


def _first_record(data: Any):
    """The flat record a positional preview is built from, or None."""
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if isinstance(first, list):
        return first
    if _is_scalar(first):
        return data
    return None


def positional_length(data: Any) -> int:
    record = _first_record(data)
    return len(record) if record is not None else 0


def available_indices(data: Any) -> List[int]:
    return list(range(positional_length(data)))


def _sample(value: Any) -> Sample:
    if isinstance(value, (dict, list)):
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(value)
    return value


def positional_samples(data: Any) -> List[Sample]:
    """Values of the first positional record, for previewing index choices."""
    record = _first_record(data)
    if record is None:
        return []
    return [_sample(v) for v in record]
