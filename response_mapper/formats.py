from __future__ import annotations

from typing import Any, Optional

from .models import ResponseFormat


def looks_positional(data: Any) -> bool:
    """True for a non-empty list whose first item is a list or a scalar.

    Heuristic only. It feeds UI hints and never replaces an explicit choice.
    """
    if not isinstance(data, list) or not data:
        return False
    return not isinstance(data[0], dict)


def detect_format(data: Any) -> ResponseFormat:
    return ResponseFormat.POSITIONAL if looks_positional(data) else ResponseFormat.JSON


def format_mismatch_warning(data: Any, chosen) -> Optional[str]:
    """Advice shown when JSON is selected for data that looks positional."""
    if ResponseFormat(chosen) is ResponseFormat.JSON and looks_positional(data):
        return (
            "This data looks like a positional array. "
            "Switch the response format to Positional to map fields by index."
        )
    return None
