"""Field-level matching inside a pair of corresponding endpoints."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spec_bridge.mapping.models import FieldMapping, MappingType, UnmappedField
from spec_bridge.mapping.scoring import string_similarity
from spec_bridge.spec.document import (
    MAPPED_METHODS,
    SUCCESS_CODES,
    as_mapping,
    child,
    extract_schema,
    get_operation,
    get_parameters,
    get_response,
    parameter_type,
)
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PARAMETER_THRESHOLD = 0.5
DEFAULT_FIELD_THRESHOLD = 0.4

# Confidence bonuses added on top of name similarity
SAME_LOCATION_BONUS = 0.2
SAME_PARAMETER_TYPE_BONUS = 0.1
SAME_FIELD_TYPE_BONUS = 0.2
SAME_FORMAT_BONUS = 0.1

EXACT_MAPPING_THRESHOLD = 0.9

TRANSFORMATION_RULES: dict[str, dict[str, str]] = {
    "string": {
        "integer": "Convert string to integer using int()",
        "number": "Convert string to number using float()",
        "boolean": "Convert string to boolean (true/false)",
    },
    "integer": {
        "string": "Convert integer to string using str()",
        "number": "Integer is compatible with number type",
    },
    "number": {
        "string": "Convert number to string using str()",
        "integer": "Round number to integer using round()",
    },
    "boolean": {
        "string": 'Convert boolean to string ("true"/"false")',
    },
}


def transformation_rule(source_type: str | None, target_type: str | None) -> str | None:
    """Describe how to convert a value between two declared types.

    Args:
        source_type: Declared type in the old document
        target_type: Declared type in the new document

    Returns:
        A coercion hint, or None when the types match or either is unknown
    """
    if not source_type or not target_type or source_type == target_type:
        return None

    rule = TRANSFORMATION_RULES.get(source_type, {}).get(target_type)
    return rule or f"Manual conversion required from {source_type} to {target_type}"


@dataclass(frozen=True)
class Candidate:
    """Best-scoring candidate for one source parameter or field."""

    name: str
    definition: Mapping[str, Any]
    confidence: float


@dataclass
class MatchResult:
    """Mappings and unmapped records collected for one endpoint pair."""

    mappings: list[FieldMapping] = field(default_factory=list)
    unmapped: list[UnmappedField] = field(default_factory=list)

    def extend(self, other: "MatchResult") -> None:
        self.mappings.extend(other.mappings)
        self.unmapped.extend(other.unmapped)


def _mapping_type(confidence: float) -> MappingType:
    return MappingType.EXACT if confidence > EXACT_MAPPING_THRESHOLD else MappingType.SIMILAR


class SchemaFieldMatcher:
    """Match parameters, request-body fields and response fields.

    A source item maps to its single best-scoring candidate when that score
    exceeds the acceptance threshold. Several source items may map to the
    same target. Items below the threshold are dropped, or recorded as
    UnmappedField when ``emit_unmapped`` is set.
    """

    def __init__(
        self,
        parameter_threshold: float = DEFAULT_PARAMETER_THRESHOLD,
        field_threshold: float = DEFAULT_FIELD_THRESHOLD,
        emit_unmapped: bool = False,
    ):
        """Initialize field matcher.

        Args:
            parameter_threshold: Confidence a parameter match must exceed
            field_threshold: Confidence a schema field match must exceed
            emit_unmapped: Record source items that found no accepted match
        """
        self.parameter_threshold = parameter_threshold
        self.field_threshold = field_threshold
        self.emit_unmapped = emit_unmapped

    def best_parameter_candidate(
        self, param: Mapping[str, Any], candidates: list[Mapping[str, Any]]
    ) -> Candidate | None:
        """Score every candidate parameter and return the best one, accepted or not."""
        # YAML may load names such as `123` as integers
        name = "" if param.get("name") is None else str(param.get("name"))
        best: Candidate | None = None

        for candidate in candidates:
            if not candidate.get("name"):
                continue
            candidate_name = str(candidate["name"])

            if name == candidate_name:
                confidence = 1.0
            else:
                confidence = string_similarity(name, candidate_name)

            if param.get("in") == candidate.get("in"):
                confidence += SAME_LOCATION_BONUS

            if parameter_type(param) == parameter_type(candidate):
                confidence += SAME_PARAMETER_TYPE_BONUS

            confidence = min(confidence, 1.0)

            if best is None or confidence > best.confidence:
                best = Candidate(name=candidate_name, definition=candidate, confidence=confidence)

        return best

    def match_parameter(
        self, param: Mapping[str, Any], candidates: list[Mapping[str, Any]]
    ) -> Candidate | None:
        """Find the accepted match for a parameter.

        Args:
            param: Parameter from the old document
            candidates: Parameters of the corresponding new operation

        Returns:
            The best candidate if its confidence exceeds the parameter
            threshold, otherwise None
        """
        best = self.best_parameter_candidate(param, candidates)
        if best is not None and best.confidence > self.parameter_threshold:
            return best
        return None

    def best_field_candidate(
        self, field_name: str, prop: Mapping[str, Any], candidates: Mapping[str, Any]
    ) -> Candidate | None:
        """Score every candidate property and return the best one, accepted or not."""
        best: Candidate | None = None

        for candidate_name, candidate_value in candidates.items():
            candidate_prop = as_mapping(candidate_value)

            if field_name == candidate_name:
                confidence = 1.0
            else:
                confidence = string_similarity(str(field_name), str(candidate_name))

            if prop.get("type") == candidate_prop.get("type"):
                confidence += SAME_FIELD_TYPE_BONUS

            if prop.get("format") == candidate_prop.get("format"):
                confidence += SAME_FORMAT_BONUS

            confidence = min(confidence, 1.0)

            if best is None or confidence > best.confidence:
                best = Candidate(
                    name=str(candidate_name), definition=candidate_prop, confidence=confidence
                )

        return best

    def match_field(
        self, field_name: str, prop: Mapping[str, Any], candidates: Mapping[str, Any]
    ) -> Candidate | None:
        """Find the accepted match for a schema property.

        Args:
            field_name: Property name in the old schema
            prop: Property definition in the old schema
            candidates: ``properties`` of the corresponding new schema

        Returns:
            The best candidate if its confidence exceeds the field threshold,
            otherwise None
        """
        best = self.best_field_candidate(field_name, prop, candidates)
        if best is not None and best.confidence > self.field_threshold:
            return best
        return None

    def map_parameters(
        self,
        params1: list[Mapping[str, Any]],
        params2: list[Mapping[str, Any]],
        base_path: str,
    ) -> MatchResult:
        result = MatchResult()
        params_path = f"{base_path}.parameters"

        for param in params1:
            if not param.get("name"):
                continue

            name = str(param["name"])

            source_type = parameter_type(param)
            best = self.best_parameter_candidate(param, params2)

            if best is None or best.confidence <= self.parameter_threshold:
                if self.emit_unmapped:
                    result.unmapped.append(
                        UnmappedField(
                            source_path=params_path,
                            source_field=name,
                            source_type=source_type or "unknown",
                            threshold=self.parameter_threshold,
                            best_candidate=best.name if best else None,
                            best_confidence=best.confidence if best else 0.0,
                        )
                    )
                continue

            target_type = parameter_type(best.definition)
            result.mappings.append(
                FieldMapping(
                    source_path=params_path,
                    target_path=params_path,
                    source_field=name,
                    target_field=best.name,
                    source_type=source_type or "unknown",
                    target_type=target_type or "unknown",
                    confidence=best.confidence,
                    mapping_type=_mapping_type(best.confidence),
                    transformation_rule=transformation_rule(source_type, target_type),
                )
            )

        return result

    def map_schema_fields(
        self,
        schema1: Mapping[str, Any],
        schema2: Mapping[str, Any],
        base_path: str,
    ) -> MatchResult:
        """Map the properties of two object schemas.

        Does nothing unless both schemas declare ``properties``.
        """
        result = MatchResult()
        properties1 = schema1.get("properties")
        properties2 = schema2.get("properties")
        if not isinstance(properties1, Mapping) or not isinstance(properties2, Mapping):
            return result

        for field_name, value in properties1.items():
            prop = as_mapping(value)
            best = self.best_field_candidate(field_name, prop, properties2)

            if best is None or best.confidence <= self.field_threshold:
                if self.emit_unmapped:
                    result.unmapped.append(
                        UnmappedField(
                            source_path=base_path,
                            source_field=str(field_name),
                            source_type=prop.get("type") or "object",
                            threshold=self.field_threshold,
                            best_candidate=best.name if best else None,
                            best_confidence=best.confidence if best else 0.0,
                        )
                    )
                continue

            result.mappings.append(
                FieldMapping(
                    source_path=base_path,
                    target_path=base_path,
                    source_field=str(field_name),
                    target_field=best.name,
                    source_type=prop.get("type") or "object",
                    target_type=best.definition.get("type") or "object",
                    confidence=best.confidence,
                    mapping_type=_mapping_type(best.confidence),
                    transformation_rule=transformation_rule(
                        prop.get("type"), best.definition.get("type")
                    ),
                )
            )

        return result

    def map_request_body(self, body1: Any, body2: Any, base_path: str) -> MatchResult:
        schema1 = extract_schema(body1)
        schema2 = extract_schema(body2)
        if schema1 is None or schema2 is None:
            return MatchResult()
        return self.map_schema_fields(schema1, schema2, f"{base_path}.requestBody")

    def map_responses(self, responses1: Any, responses2: Any, base_path: str) -> MatchResult:
        """Map response schemas of the success status codes only."""
        result = MatchResult()

        for code in SUCCESS_CODES:
            response1 = get_response(responses1, code)
            response2 = get_response(responses2, code)
            if response1 is None or response2 is None:
                continue

            schema1 = extract_schema(response1)
            schema2 = extract_schema(response2)
            if schema1 is not None and schema2 is not None:
                result.extend(
                    self.map_schema_fields(schema1, schema2, f"{base_path}.responses.{code}")
                )

        return result

    def map_endpoint(self, path_item1: Any, path_item2: Any, source_path: str) -> MatchResult:
        """Map every method the two path items share.

        Args:
            path_item1: Path item from the old document
            path_item2: Corresponding path item from the new document
            source_path: Old path template, used as the address prefix

        Returns:
            MatchResult with mappings in method, parameter, body, response order
        """
        result = MatchResult()

        for method in MAPPED_METHODS:
            operation1 = get_operation(path_item1, method)
            operation2 = get_operation(path_item2, method)
            if operation1 is None or operation2 is None:
                continue

            base_path = f"{source_path}.{method}"

            result.extend(
                self.map_parameters(
                    get_parameters(operation1), get_parameters(operation2), base_path
                )
            )

            body1 = operation1.get("requestBody")
            body2 = operation2.get("requestBody")
            if body1 is not None and body2 is not None:
                result.extend(self.map_request_body(body1, body2, base_path))

            result.extend(
                self.map_responses(
                    child(operation1, "responses"), child(operation2, "responses"), base_path
                )
            )

        logger.debug(
            "endpoint_fields_matched",
            endpoint=source_path,
            mappings=len(result.mappings),
            unmapped=len(result.unmapped),
        )

        return result
