"""Apply a mapping configuration to a response document."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .accessors import resolve_value
from .directory import EntityDirectory, StaticEntityDirectory, display_name_for
from .models import ABSENT, FieldMapping, MappingConfig, ResolvedRecord, TargetMode
from .records import extract_entity_key, resolve_record_collection

logger = logging.getLogger(__name__)

EvaluationResult = Union[Dict[str, Any], List[ResolvedRecord]]


def map_fields(source: Any, mappings: Iterable[FieldMapping], response_format, strict: bool = False) -> Dict[str, Any]:
    """Resolve every mapping against `source`, keyed by output label.

    Later mappings win when two of them share a label.
    """
    out: Dict[str, Any] = {}
    for mapping in mappings:
        out[mapping.output_label] = resolve_value(source, mapping.external_path, response_format, strict=strict)
    return out


def evaluate(
    data: Any,
    config: MappingConfig,
    directory: Optional[EntityDirectory] = None,
    strict: bool = False,
) -> Union[EvaluationResult, Any]:
    """Evaluate `config` against `data`.

    Returns ABSENT when there is no document, a flat dict for the portfolio
    target, and one ResolvedRecord per record (input order) for the
    organizations target.
    """
    if data is None or data is ABSENT:
        return ABSENT

    fmt = config.response_format
    if config.target is TargetMode.PORTFOLIO:
        return map_fields(data, config.mappings, fmt, strict=strict)

    if directory is None:
        directory = StaticEntityDirectory()

    records = resolve_record_collection(data, fmt)
    logger.debug("Evaluating %d mappings over %d %s records", len(config.mappings), len(records), fmt.value)

    resolved: List[ResolvedRecord] = []
    for record in records:
        entity_key = extract_entity_key(record, config)
        resolved.append(
            ResolvedRecord(
                entity_key=entity_key,
                display_name=display_name_for(directory, entity_key),
                fields=map_fields(record, config.mappings, fmt, strict=strict),
            )
        )
    return resolved
