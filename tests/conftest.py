"""Shared sample responses for the test suite."""

from __future__ import annotations

import pytest

from response_mapper.models import FieldMapping, MappingConfig, ResponseFormat, TargetCategory, TargetMode


@pytest.fixture
def positional_doc() -> list:
    return [
        [1, "RENEW", "Hotel", 72],
        [2, "HNLMC", "Resort", 85],
    ]


@pytest.fixture
def keyed_doc() -> dict:
    return {
        "meta": {"page": 1, "total": 2},
        "data": [
            {"id": "RENEW", "occupancy": 85, "location": {"region": "Oahu"}},
            {"id": "ZZZZZ", "occupancy": None, "location": {}},
        ],
    }


@pytest.fixture
def positional_config() -> MappingConfig:
    return MappingConfig(
        target=TargetMode.ORGANIZATIONS,
        response_format=ResponseFormat.POSITIONAL,
        key_index=1,
        mappings=[FieldMapping(id="1", external_path="3", internal_type=TargetCategory.ATTRIBUTES, internal_field="region")],
    )


@pytest.fixture
def keyed_config() -> MappingConfig:
    return MappingConfig(
        target=TargetMode.ORGANIZATIONS,
        response_format=ResponseFormat.JSON,
        key_path="$.id",
        mappings=[
            FieldMapping(id="1", external_path="$.occupancy", internal_type=TargetCategory.DATA, internal_field="occupancy"),
            FieldMapping(id="2", external_path="$.location.region", internal_type=TargetCategory.ATTRIBUTES, internal_field="region"),
        ],
    )
