"""Field mapping inference between two API specification documents.

Endpoints are paired by path similarity, then parameters and payload fields
of each pair are matched by name and type similarity with a confidence score.
"""

from spec_bridge.mapping.aggregator import MappingAggregator
from spec_bridge.mapping.assembly import build_api_mappings, classify_mapping_type
from spec_bridge.mapping.catalog import find_known_mapping, predefined_api_mappings
from spec_bridge.mapping.fields import SchemaFieldMatcher, transformation_rule
from spec_bridge.mapping.models import (
    ApiMapping,
    FieldMapping,
    MappingGroup,
    MappingType,
    PathMatch,
    UnmappedField,
)
from spec_bridge.mapping.paths import MatchStrategy, PathMatcher
from spec_bridge.mapping.scoring import levenshtein_distance, path_similarity, string_similarity

__all__ = [
    "MappingAggregator",
    "SchemaFieldMatcher",
    "PathMatcher",
    "MatchStrategy",
    "ApiMapping",
    "FieldMapping",
    "MappingGroup",
    "MappingType",
    "PathMatch",
    "UnmappedField",
    "build_api_mappings",
    "classify_mapping_type",
    "find_known_mapping",
    "predefined_api_mappings",
    "transformation_rule",
    "levenshtein_distance",
    "path_similarity",
    "string_similarity",
]
