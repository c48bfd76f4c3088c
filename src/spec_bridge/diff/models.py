"""Data models for specification differences."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DifferenceType(Enum):
    """Kinds of structural difference."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class Impact(Enum):
    """Impact of a difference on existing clients."""

    BREAKING = "breaking"  # Existing clients are likely to fail
    NON_BREAKING = "non-breaking"  # Existing clients keep working
    ENHANCEMENT = "enhancement"  # New capability, nothing to migrate


@dataclass(frozen=True)
class SpecDifference:
    """One classified difference between the old and the new document."""

    type: DifferenceType
    path: str
    description: str
    impact: Impact
    confidence: float = 1.0
    old_value: Any = None
    new_value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "confidence", min(max(self.confidence, 0.0), 1.0))

    @property
    def is_breaking(self) -> bool:
        """Check if this is a breaking change."""
        return self.impact is Impact.BREAKING

    def to_dict(self, include_values: bool = True) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Args:
            include_values: Include the old and new values when present

        Returns:
            Dict using the camelCase keys of the exported comparison format
        """
        data: dict[str, Any] = {
            "type": self.type.value,
            "path": self.path,
            "description": self.description,
            "impact": self.impact.value,
            "confidence": self.confidence,
        }
        if include_values:
            if self.old_value is not None:
                data["oldValue"] = self.old_value
            if self.new_value is not None:
                data["newValue"] = self.new_value
        return data


@dataclass(frozen=True)
class DiffSummary:
    """Counts of differences by type and by impact."""

    total_differences: int = 0
    added_count: int = 0
    removed_count: int = 0
    modified_count: int = 0
    breaking_changes: int = 0
    non_breaking_changes: int = 0
    enhancements: int = 0

    @property
    def has_breaking_changes(self) -> bool:
        return self.breaking_changes > 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for JSON serialization."""
        return {
            "totalDifferences": self.total_differences,
            "addedCount": self.added_count,
            "removedCount": self.removed_count,
            "modifiedCount": self.modified_count,
            "breakingChanges": self.breaking_changes,
            "nonBreakingChanges": self.non_breaking_changes,
            "enhancements": self.enhancements,
        }
