"""Tests for API mapping assembly."""

from spec_bridge.mapping.assembly import (
    build_api_mapping,
    build_api_mappings,
    classify_mapping_type,
    generate_migration_notes,
)
from spec_bridge.mapping.catalog import ENDPOINT_MAPPINGS
from spec_bridge.mapping.models import FieldMapping, MappingGroup, MappingType


def _mapping(confidence, source_type="string", target_type="string"):
    return FieldMapping(
        source_path="/a.get.parameters",
        target_path="/a.get.parameters",
        source_field="f",
        target_field="g",
        source_type=source_type,
        target_type=target_type,
        confidence=confidence,
        mapping_type=MappingType.SIMILAR,
    )


def test_classify_mapping_type():
    assert classify_mapping_type(0.95) is MappingType.EXACT
    assert classify_mapping_type(0.9) is MappingType.SIMILAR
    assert classify_mapping_type(0.75) is MappingType.SIMILAR
    assert classify_mapping_type(0.7) is MappingType.INFERRED
    assert classify_mapping_type(0.0) is MappingType.INFERRED


def test_transformation_required_if_any_mapping_requires_it():
    group = MappingGroup(
        endpoint="/a",
        target_endpoint="/b",
        mappings=(_mapping(1.0), _mapping(0.8, "string", "integer")),
    )

    api_mapping = build_api_mapping(group)

    assert api_mapping.transformation_required
    assert api_mapping.source_endpoint == "/a"
    assert api_mapping.target_endpoint == "/b"
    assert api_mapping.mapping_type is MappingType.SIMILAR


def test_no_transformation_when_types_match():
    group = MappingGroup(endpoint="/a", target_endpoint="/a", mappings=(_mapping(1.0),))
    assert not build_api_mapping(group).transformation_required


def test_migration_notes():
    group = MappingGroup(
        endpoint="/a",
        target_endpoint="/b",
        mappings=(_mapping(1.0), _mapping(0.5, "string", "integer")),
    )

    assert generate_migration_notes(group) == [
        "Endpoint: /a",
        "Confidence: 75%",
        "Field mappings: 2 fields mapped",
        "1 fields require transformation",
    ]


def test_migration_notes_for_empty_group():
    group = MappingGroup(endpoint="/a", target_endpoint="/b")
    assert generate_migration_notes(group) == ["Endpoint: /a", "Confidence: 0%"]


def test_build_api_mappings_with_predefined():
    groups = [MappingGroup(endpoint="/a", target_endpoint="/b", mappings=(_mapping(1.0),))]

    assert len(build_api_mappings(groups)) == 1

    combined = build_api_mappings(groups, include_predefined=True)
    assert len(combined) == 1 + len(ENDPOINT_MAPPINGS)
    assert combined[0].source_endpoint == "/a"
    assert combined[1].source_endpoint == "/api/converge/sale"


def test_api_mapping_to_dict():
    group = MappingGroup(endpoint="/a", target_endpoint="/b", mappings=(_mapping(1.0),))
    data = build_api_mapping(group).to_dict()

    assert data["sourceEndpoint"] == "/a"
    assert data["mappingType"] == "exact"
    assert data["transformationRequired"] is False
    assert len(data["fieldMappings"]) == 1
    assert data["migrationNotes"][0] == "Endpoint: /a"
