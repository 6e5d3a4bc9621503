from __future__ import annotations

import json
import logging
from typing import Any, List

import gradio as gr

from .catalog import available_indices, enumerate_paths, find_record_paths, positional_samples
from .config import AppSettings, IntegrationConfig, build_integration_payload, schedule_display
from .demo import DEMO_RESPONSE
from .directory import StaticEntityDirectory
from .evaluator import evaluate
from .fields import mappings_from_rows, mappings_to_rows
from .flattening import export_rows, results_to_rows
from .formats import detect_format, format_mismatch_warning
from .io_utils import UnparsableOverrideDocument, parse_override_document, read_sample_response
from .models import MappingConfig, ResponseFormat, TargetMode

logger = logging.getLogger(__name__)

MAPPING_HEADERS = ["Source", "Type", "Field"]

_settings = AppSettings()
_directory = StaticEntityDirectory()


def default_mapping_rows() -> List[List[str]]:
    return mappings_to_rows(MappingConfig().mappings)


def _table_rows(mapping_df) -> List[list]:
    if mapping_df is None:
        return []
    try:
        return mapping_df.fillna('').values.tolist()
    except AttributeError:
        return [list(row) for row in mapping_df]


def build_mapping_config(target, response_format, key_path, key_index, mapping_df) -> MappingConfig:
    try:
        index = int(key_index) if key_index is not None else 0
    except (TypeError, ValueError):
        index = 0
    return MappingConfig(
        target=TargetMode(target or TargetMode.ORGANIZATIONS.value),
        response_format=ResponseFormat(response_format or ResponseFormat.JSON.value),
        key_path=key_path or '',
        key_index=max(0, index),
        mappings=mappings_from_rows(_table_rows(mapping_df)),
    )


def describe_sample(data: Any, response_format: str):
    """Addresses, positional preview and format advice for a loaded sample."""
    paths = enumerate_paths(data)
    samples = positional_samples(data)[: _settings.preview_sample_limit]
    index_preview = [[i, "" if v is None else str(v)] for i, v in zip(available_indices(data), samples)]
    warning = format_mismatch_warning(data, response_format) or ""
    return paths, index_preview, warning


def load_sample_handler(file_obj, override_text, response_format, use_demo=False):
    """Load the sample response from pasted text, else the uploaded file, else demo data."""
    try:
        data = parse_override_document(override_text)
        source = "pasted data"
        if data is None and file_obj is not None:
            data = read_sample_response(file_obj)
            source = "uploaded file"
        if data is None and use_demo:
            data = DEMO_RESPONSE
            source = "demo data"
    except (UnparsableOverrideDocument, ValueError, OSError) as e:
        logger.warning("Could not load sample response: %s", e)
        return None, f"Error parsing JSON: {str(e)}", gr.update(choices=[]), [], ""

    if data is None:
        return None, "No sample data provided.", gr.update(choices=[]), [], ""

    paths, index_preview, warning = describe_sample(data, response_format)
    detected = detect_format(data)
    records = find_record_paths(data)
    message = (
        f"Loaded {source}. Found {len(paths)} paths"
        f" ({len(records)} list{'s' if len(records) != 1 else ''}); looks like {detected.value} data."
    )
    return data, message, gr.update(choices=paths, value=None), index_preview, warning


def format_change_handler(data, response_format):
    if data is None:
        return ""
    return format_mismatch_warning(data, response_format) or ""


def preview_results_handler(data, target, response_format, key_path, key_index, mapping_df):
    if data is None:
        return None, "No sample data loaded."
    config = build_mapping_config(target, response_format, key_path, key_index, mapping_df)
    if not config.mappings:
        return None, "No field mappings defined."

    rows = results_to_rows(evaluate(data, config, _directory), _settings.result_placeholder)
    if config.target is TargetMode.PORTFOLIO:
        return rows, "Single entity result."
    return rows, f"Mapped {len(rows)} record{'s' if len(rows) != 1 else ''}."


def export_results_handler(data, target, response_format, key_path, key_index, mapping_df, output_format, file_name):
    if data is None:
        return None, "No sample data loaded."
    config = build_mapping_config(target, response_format, key_path, key_index, mapping_df)
    if not config.mappings:
        return None, "No field mappings defined."

    rows = results_to_rows(evaluate(data, config, _directory), _settings.result_placeholder)
    try:
        path = export_rows(rows, output_format or "JSON", file_name)
    except (OSError, ValueError) as e:
        logger.warning("Export failed: %s", e)
        return None, f"Error during export: {str(e)}"
    return path, f"Export successful! Saved to {path}"


def save_integration_handler(
    name, description, endpoint, method, auth_type, api_key, request_body, schedule_value, schedule_unit,
    target, response_format, key_path, key_index, mapping_df,
):
    try:
        integration = IntegrationConfig(
            name=name or '',
            description=description or '',
            endpoint=endpoint or '',
            method=method or 'GET',
            auth_type=auth_type or 'none',
            api_key=api_key or '',
            request_body=request_body or '',
            schedule_value=int(schedule_value or 0),
            schedule_unit=schedule_unit or 'hours',
        )
    except (TypeError, ValueError) as e:
        return None, f"Invalid integration settings: {str(e)}"

    mapping = build_mapping_config(target, response_format, key_path, key_index, mapping_df)
    payload = build_integration_payload(integration, mapping)
    shown = dict(payload, authentication={'type': integration.auth_type})
    logger.info("Integration configuration: %s", json.dumps(shown))
    return shown, f"Integration '{integration.name}' configured, syncing every {schedule_display(integration)}."
