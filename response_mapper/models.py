"""Value types shared by the catalog, resolver and evaluator."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class _Absent:
    """Marker for an address that did not resolve to anything.

    Distinct from None, which is a JSON null that was actually present.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return '<absent>'

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


class ResponseFormat(str, Enum):
    JSON = 'json'
    POSITIONAL = 'positional'


class TargetMode(str, Enum):
    PORTFOLIO = 'portfolio'
    ORGANIZATIONS = 'organizations'


class TargetCategory(str, Enum):
    ATTRIBUTES = 'attributes'
    DATA = 'data'


ATTRIBUTE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ('region', 'Region'),
    ('room_count', 'Room Count'),
    ('brand', 'Brand'),
    ('property_code', 'Property Code'),
)

DATA_FIELDS: Tuple[Tuple[str, str], ...] = (
    ('occupancy', 'Occupancy'),
)

FIELD_CATALOG: Dict[TargetCategory, Tuple[Tuple[str, str], ...]] = {
    TargetCategory.ATTRIBUTES: ATTRIBUTE_FIELDS,
    TargetCategory.DATA: DATA_FIELDS,
}


def default_field(category) -> str:
    return FIELD_CATALOG[TargetCategory(category)][0][0]


def label_for(category, field_name: str) -> Optional[str]:
    """Catalog label of `field_name` within `category`, or None."""
    try:
        entries = FIELD_CATALOG[TargetCategory(category)]
    except ValueError:
        return None
    for value, label in entries:
        if value == field_name:
            return label
    return None


@dataclass(frozen=True)
class FieldMapping:
    id: str
    external_path: str = ''
    internal_type: TargetCategory = TargetCategory.ATTRIBUTES
    internal_field: str = ATTRIBUTE_FIELDS[0][0]

    def __post_init__(self):
        object.__setattr__(self, 'internal_type', TargetCategory(self.internal_type))

    @property
    def output_label(self) -> str:
        return label_for(self.internal_type, self.internal_field) or self.internal_field

    def with_category(self, category) -> 'FieldMapping':
        """Switch category; the field always falls back to the new category's default."""
        category = TargetCategory(category)
        return replace(self, internal_type=category, internal_field=default_field(category))


def _default_mappings() -> List[FieldMapping]:
    return [
        FieldMapping(id='1', external_path='3', internal_type=TargetCategory.ATTRIBUTES, internal_field='region'),
        FieldMapping(id='2', external_path='19', internal_type=TargetCategory.DATA, internal_field='occupancy'),
    ]


@dataclass
class MappingConfig:
    """How a response maps onto internal fields.

    `key_path` locates the entity key for JSON responses, `key_index` for
    positional ones. Both are ignored for the portfolio target.
    """

    target: TargetMode = TargetMode.ORGANIZATIONS
    response_format: ResponseFormat = ResponseFormat.POSITIONAL
    key_path: str = ''
    key_index: int = 1
    mappings: List[FieldMapping] = field(default_factory=_default_mappings)

    def __post_init__(self):
        self.target = TargetMode(self.target)
        self.response_format = ResponseFormat(self.response_format)


@dataclass(frozen=True)
class ResolvedRecord:
    entity_key: str
    display_name: str
    fields: Dict[str, Any]

    def to_dict(self, placeholder: Any = None) -> Dict[str, Any]:
        return {
            'entityKey': self.entity_key,
            'displayName': self.display_name,
            'fields': {k: placeholder if v is ABSENT else v for k, v in self.fields.items()},
        }
