"""Tests for mapping group aggregation."""

import pytest

from spec_bridge.config import MatchingConfig
from spec_bridge.exceptions import MalformedSpecError
from spec_bridge.mapping.aggregator import MappingAggregator
from spec_bridge.mapping.models import MappingGroup, PathMatch


class FixedStrategy:
    """Pairs paths from a fixed table."""

    def __init__(self, pairs):
        self.pairs = pairs

    def match(self, candidates_a, candidates_b):
        return [PathMatch(path1=a, path2=b, similarity=1.0) for a, b in self.pairs]


def _spec(paths):
    return {"paths": paths}


def test_generates_group_per_matched_endpoint(old_spec, new_spec):
    groups = MappingAggregator().generate_mappings(old_spec, new_spec)

    assert len(groups) == 1
    group = groups[0]
    assert group.endpoint == "/users/{id}"
    assert group.target_endpoint == "/users/{userId}"
    assert group.method == "multiple"
    assert [m.source_field for m in group.mappings] == ["id", "user_name", "age"]
    assert group.transformation_required


def test_group_confidence_is_mean(old_spec, new_spec):
    group = MappingAggregator().generate_mappings(old_spec, new_spec)[0]

    expected = sum(m.confidence for m in group.mappings) / 3
    assert group.confidence == pytest.approx(expected)


def test_empty_group_confidence_is_zero():
    assert MappingGroup(endpoint="/a", target_endpoint="/a").confidence == 0


def test_empty_groups_are_dropped_by_default():
    old = _spec({"/a": {"get": {}}})
    new = _spec({"/a": {"get": {}}})

    assert MappingAggregator().generate_mappings(old, new) == []


def test_empty_groups_can_be_kept():
    old = _spec({"/a": {"get": {}}})
    new = _spec({"/a": {"get": {}}})
    config = MatchingConfig(include_empty_groups=True)

    groups = MappingAggregator(config).generate_mappings(old, new)

    assert len(groups) == 1
    assert groups[0].mappings == ()
    assert groups[0].confidence == 0.0


def test_unmapped_fields_are_attached_to_group():
    old = _spec({"/a": {"get": {"parameters": [{"name": "x", "in": "query"}, {"name": "qqqq"}]}}})
    new = _spec({"/a": {"get": {"parameters": [{"name": "x", "in": "query"}]}}})

    quiet = MappingAggregator().generate_mappings(old, new)[0]
    verbose = MappingAggregator(MatchingConfig(emit_unmapped=True)).generate_mappings(old, new)[0]

    assert quiet.unmapped == ()
    assert [u.source_field for u in verbose.unmapped] == ["qqqq"]
    assert verbose.confidence == quiet.confidence
    assert "unmapped" in verbose.to_dict()
    assert "unmapped" not in quiet.to_dict()


def test_path_threshold_from_config(old_spec, new_spec):
    config = MatchingConfig(path_threshold=0.95)
    assert MappingAggregator(config).generate_mappings(old_spec, new_spec) == []


def test_custom_match_strategy():
    old = _spec({"/pay": {"post": {"parameters": [{"name": "amount", "in": "query"}]}}})
    new = _spec({"/transactions": {"post": {"parameters": [{"name": "amount", "in": "query"}]}}})
    aggregator = MappingAggregator(path_strategy=FixedStrategy([("/pay", "/transactions")]))

    groups = aggregator.generate_mappings(old, new)

    assert groups[0].endpoint == "/pay"
    assert groups[0].target_endpoint == "/transactions"
    assert groups[0].mappings[0].source_path == "/pay.post.parameters"


def test_group_to_dict(old_spec, new_spec):
    data = MappingAggregator().generate_mappings(old_spec, new_spec)[0].to_dict()

    assert data["endpoint"] == "/users/{id}"
    assert data["targetEndpoint"] == "/users/{userId}"
    assert data["method"] == "multiple"
    assert data["mappings"][1] == {
        "sourcePath": "/users/{id}.get.responses.200",
        "targetPath": "/users/{id}.get.responses.200",
        "sourceField": "user_name",
        "targetField": "userName",
        "sourceType": "string",
        "targetType": "string",
        "confidence": 1.0,
        "mappingType": "exact",
        "transformationRequired": False,
    }


def test_malformed_input():
    with pytest.raises(MalformedSpecError):
        MappingAggregator().generate_mappings("openapi: 3.0.0", {})
