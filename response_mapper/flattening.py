from __future__ import annotations

import csv
import json
import os
import tempfile
from typing import Any, Dict, List

from .models import ABSENT, ResolvedRecord

KEY_COLUMN = 'Key'
NAME_COLUMN = 'Name'


def display_value(val: Any, placeholder: Any = '—') -> Any:
    """Render a resolved value for a table cell."""
    if val is ABSENT or val is None:
        return placeholder
    if isinstance(val, list):
        if all(isinstance(v, (str, int, float, bool)) or v is None for v in val):
            return ", ".join(["" if v is None else str(v) for v in val])
        try:
            return json.dumps(val, ensure_ascii=False)
        except TypeError:
            return str(val)
    if isinstance(val, dict):
        try:
            return json.dumps(val, ensure_ascii=False)
        except TypeError:
            return str(val)
    return val


def results_to_rows(result: Any, placeholder: Any = '—') -> List[Dict[str, Any]]:
    """Flatten evaluation output into table rows.

    A portfolio result becomes a single row. Entity records become one row
    each, with key and name columns first.
    """
    if result is ABSENT or result is None:
        return []

    if isinstance(result, dict):
        return [{k: display_value(v, placeholder) for k, v in result.items()}]

    rows: List[Dict[str, Any]] = []
    for record in result:
        if not isinstance(record, ResolvedRecord):
            continue
        row: Dict[str, Any] = {KEY_COLUMN: record.entity_key, NAME_COLUMN: record.display_name}
        for label, val in record.fields.items():
            row[label] = display_value(val, placeholder)
        rows.append(row)
    return rows


def row_headers(rows: List[Dict[str, Any]]) -> List[str]:
    headers: List[str] = []
    for row in rows:
        for k in row:
            if k not in headers:
                headers.append(k)
    return headers


def export_rows(rows: List[Dict[str, Any]], output_format: str, file_name: str = '') -> str:
    """Write rows to a temp file as CSV or JSON and return its path."""
    if not file_name or not file_name.strip():
        file_name = "mapped_results"

    ext = f".{output_format.lower()}"
    if not file_name.lower().endswith(ext):
        file_name += ext

    path = os.path.join(tempfile.gettempdir(), os.path.basename(file_name))

    if output_format.upper() == "CSV":
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=row_headers(rows))
            writer.writeheader()
            if rows:
                writer.writerows(rows)
    else:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(rows, f, indent=2, ensure_ascii=False)
    return path
