"""Integration settings and the application's own runtime settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import MappingConfig, ResponseFormat, TargetMode

HTTP_METHODS = ('GET', 'POST')
AUTH_TYPES = ('none', 'api_key', 'oauth2', 'basic')
SCHEDULE_UNITS = ('hours', 'days')


class AppSettings(BaseSettings):
    """Runtime settings, read from `RESPONSE_MAPPER_*` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='RESPONSE_MAPPER_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    log_level: str = 'INFO'
    server_name: str = '127.0.0.1'
    server_port: int = 7860
    result_placeholder: str = '—'
    preview_sample_limit: int = 20


@dataclass
class IntegrationConfig:
    name: str = 'Property Portfolio Feed'
    description: str = 'Syncs property data from external API'
    endpoint: str = ''
    method: str = 'GET'
    auth_type: str = 'none'
    api_key: str = ''
    request_body: str = ''
    schedule_value: int = 24
    schedule_unit: str = 'hours'

    def __post_init__(self):
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported method: {self.method}")
        if self.auth_type not in AUTH_TYPES:
            raise ValueError(f"Unsupported auth type: {self.auth_type}")
        if self.schedule_unit not in SCHEDULE_UNITS:
            raise ValueError(f"Unsupported schedule unit: {self.schedule_unit}")


def schedule_display(config: IntegrationConfig) -> str:
    return f"{config.schedule_value} {config.schedule_unit}"


def build_integration_payload(integration: IntegrationConfig, mapping: MappingConfig) -> Dict[str, Any]:
    """Summary of a configured integration, as handed to whatever persists it."""
    payload: Dict[str, Any] = {
        'name': integration.name,
        'description': integration.description,
        'endpoint': integration.endpoint,
        'method': integration.method,
    }
    if integration.method == 'POST' and integration.request_body:
        payload['body'] = integration.request_body

    auth: Dict[str, Any] = {'type': integration.auth_type}
    if integration.auth_type == 'api_key':
        auth['apiKey'] = integration.api_key
    payload['authentication'] = auth
    payload['schedule'] = {'value': integration.schedule_value, 'unit': integration.schedule_unit}

    mapping_out: Dict[str, Any] = {
        'target': mapping.target.value,
        'responseFormat': mapping.response_format.value,
    }
    if mapping.target is TargetMode.ORGANIZATIONS:
        if mapping.response_format is ResponseFormat.JSON:
            mapping_out['keyPath'] = mapping.key_path
        else:
            mapping_out['keyIndex'] = mapping.key_index
    mapping_out['fields'] = [
        {
            'source': m.external_path,
            'sourceType': mapping.response_format.value,
            'targetType': m.internal_type.value,
            'targetField': m.internal_field,
        }
        for m in mapping.mappings
    ]
    payload['mapping'] = mapping_out
    return payload
