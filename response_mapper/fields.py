from __future__ import annotations

import uuid
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from .models import FIELD_CATALOG, FieldMapping, TargetCategory, default_field, label_for

_EDITABLE = ('external_path', 'internal_type', 'internal_field')


def field_choices(category) -> List[Tuple[str, str]]:
    """(label, value) pairs for a dropdown of the category's fields."""
    return [(label, value) for value, label in FIELD_CATALOG[TargetCategory(category)]]


def add_mapping(mappings: Sequence[FieldMapping], mapping_id: Optional[str] = None) -> List[FieldMapping]:
    new = FieldMapping(
        id=mapping_id or str(uuid.uuid4()),
        external_path='',
        internal_type=TargetCategory.ATTRIBUTES,
        internal_field=default_field(TargetCategory.ATTRIBUTES),
    )
    return [*mappings, new]


def update_mapping(mappings: Sequence[FieldMapping], mapping_id: str, field: str, value) -> List[FieldMapping]:
    """Return a copy of `mappings` with one attribute of one mapping changed.

    Changing `internal_type` resets `internal_field` to that category's default.
    """
    if field not in _EDITABLE:
        raise ValueError(f"Unknown mapping field: {field}")

    updated: List[FieldMapping] = []
    for m in mappings:
        if m.id != mapping_id:
            updated.append(m)
        elif field == 'internal_type':
            updated.append(m.with_category(value))
        elif field == 'internal_field' and label_for(m.internal_type, value) is None:
            raise ValueError(f"{value!r} is not a {m.internal_type.value} field")
        else:
            updated.append(replace(m, **{field: value}))
    return updated


def remove_mapping(mappings: Sequence[FieldMapping], mapping_id: str) -> List[FieldMapping]:
    return [m for m in mappings if m.id != mapping_id]


def mapping_from_row(row: Sequence, mapping_id: str) -> Optional[FieldMapping]:
    """Build a mapping from a [source, type, field] table row.

    Rows with a blank source are skipped. A field that does not belong to the
    row's category is replaced by the category default.
    """
    if row is None or len(row) < 3:
        return None
    source, category, field_name = (str(c).strip() if c is not None else '' for c in row[:3])
    if not source:
        return None
    try:
        category = TargetCategory(category or TargetCategory.ATTRIBUTES.value)
    except ValueError:
        return None
    if label_for(category, field_name) is None:
        field_name = default_field(category)
    return FieldMapping(id=mapping_id, external_path=source, internal_type=category, internal_field=field_name)


def mappings_from_rows(rows) -> List[FieldMapping]:
    mappings: List[FieldMapping] = []
    for i, row in enumerate(rows or []):
        m = mapping_from_row(list(row), str(i + 1))
        if m is not None:
            mappings.append(m)
    return mappings


def mappings_to_rows(mappings: Sequence[FieldMapping]) -> List[List[str]]:
    return [[m.external_path, m.internal_type.value, m.internal_field] for m in mappings]
