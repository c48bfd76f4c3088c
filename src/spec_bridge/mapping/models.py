"""Data models for field mapping results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MappingType(Enum):
    """How a correspondence was established."""

    EXACT = "exact"
    SIMILAR = "similar"
    INFERRED = "inferred"
    MANUAL = "manual"


def clamp_confidence(value: float) -> float:
    """Clamp a confidence score to [0, 1]."""
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class PathMatch:
    """A pair of corresponding endpoint paths."""

    path1: str
    path2: str
    similarity: float

    def to_dict(self) -> dict[str, Any]:
        return {"path1": self.path1, "path2": self.path2, "similarity": self.similarity}


@dataclass(frozen=True)
class FieldMapping:
    """Proposed correspondence between a source field and a target field."""

    source_path: str
    target_path: str
    source_field: str
    target_field: str
    source_type: str
    target_type: str
    confidence: float
    mapping_type: MappingType
    transformation_rule: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "confidence", clamp_confidence(self.confidence))

    @property
    def transformation_required(self) -> bool:
        """Check if the value must be converted between types."""
        return self.source_type != self.target_type

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "sourcePath": self.source_path,
            "targetPath": self.target_path,
            "sourceField": self.source_field,
            "targetField": self.target_field,
            "sourceType": self.source_type,
            "targetType": self.target_type,
            "confidence": self.confidence,
            "mappingType": self.mapping_type.value,
            "transformationRequired": self.transformation_required,
        }
        if self.transformation_rule is not None:
            data["transformationRule"] = self.transformation_rule
        return data


@dataclass(frozen=True)
class UnmappedField:
    """A source parameter or field whose best candidate fell below the threshold."""

    source_path: str
    source_field: str
    source_type: str
    threshold: float
    best_candidate: str | None = None
    best_confidence: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "sourcePath": self.source_path,
            "sourceField": self.source_field,
            "sourceType": self.source_type,
            "bestCandidate": self.best_candidate,
            "bestConfidence": self.best_confidence,
            "threshold": self.threshold,
        }


@dataclass(frozen=True)
class MappingGroup:
    """Field mappings for one matched endpoint pair."""

    endpoint: str
    target_endpoint: str
    mappings: tuple[FieldMapping, ...] = ()
    unmapped: tuple[UnmappedField, ...] = ()
    method: str = "multiple"

    @property
    def confidence(self) -> float:
        """Mean confidence of the mappings, or 0 when there are none."""
        if not self.mappings:
            return 0.0
        return sum(m.confidence for m in self.mappings) / len(self.mappings)

    @property
    def transformation_required(self) -> bool:
        return any(m.transformation_required for m in self.mappings)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "endpoint": self.endpoint,
            "targetEndpoint": self.target_endpoint,
            "method": self.method,
            "mappings": [m.to_dict() for m in self.mappings],
            "confidence": self.confidence,
        }
        if self.unmapped:
            data["unmapped"] = [u.to_dict() for u in self.unmapped]
        return data


@dataclass(frozen=True)
class ApiMapping:
    """Endpoint-level mapping handed to migration-note and code generation."""

    source_endpoint: str
    target_endpoint: str
    confidence: float
    mapping_type: MappingType
    transformation_required: bool
    field_mappings: tuple[FieldMapping, ...] = ()
    migration_notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sourceEndpoint": self.source_endpoint,
            "targetEndpoint": self.target_endpoint,
            "confidence": self.confidence,
            "mappingType": self.mapping_type.value,
            "transformationRequired": self.transformation_required,
            "fieldMappings": [m.to_dict() for m in self.field_mappings],
            "migrationNotes": list(self.migration_notes),
        }
