from __future__ import annotations

import json
from typing import Any


class UnparsableOverrideDocument(ValueError):
    """Pasted sample response that is not valid JSON."""


def parse_override_document(text: str) -> Any:
    """Decode a pasted sample response. Blank input means no override."""
    if text is None or not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise UnparsableOverrideDocument(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e


def read_sample_response(file_obj) -> Any:
    """Load a saved sample response from an upload or a file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
    else:
        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
        with open(path, 'rb') as f:
            content = f.read()

    if isinstance(content, bytes):
        content = content.decode('utf-8-sig')
    return parse_override_document(content)
