from __future__ import annotations

import re
from typing import List, Optional, Tuple

ROOT = '$'
WILDCARD = '*'

# `key[3]`, `key[*]`, `[0]`
_INDEXED_SEGMENT = re.compile(r'^(\w*)\[(\*|\d+)\]$')


def strip_root(path: str) -> str:
    """Drop a leading `$` or `$.` from a keyed address."""
    if path.startswith(ROOT + '.'):
        return path[2:]
    if path.startswith(ROOT):
        return path[1:]
    return path


def split_path(path: str) -> List[str]:
    """Split a keyed address on '.' into its non-empty segments."""
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)
    return [p for p in strip_root(path.strip()).split('.') if p != '']


def parse_segment(segment: str) -> Tuple[str, Optional[str]]:
    """Return (key, index) for a segment.

    `index` is None for a plain key segment, '*' for a wildcard, otherwise
    the digit string inside the brackets.
    """
    m = _INDEXED_SEGMENT.match(segment)
    if not m:
        return segment, None
    return m.group(1), m.group(2)


def join_key(prefix: str, key) -> str:
    return f"{prefix}.{key}"


def join_wildcard(prefix: str) -> str:
    return f"{prefix}[{WILDCARD}]"


def parse_index(address) -> Optional[int]:
    """Parse a positional address; None when it is not a non-negative integer."""
    if isinstance(address, bool):
        return None
    if isinstance(address, int):
        return address if address >= 0 else None
    if not isinstance(address, str):
        return None
    text = address.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)
