"""Compare two specification documents in one call."""

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from spec_bridge.config import BridgeConfig
from spec_bridge.diff.engine import SpecDiffEngine
from spec_bridge.diff.models import DiffSummary, SpecDifference
from spec_bridge.mapping.aggregator import MappingAggregator
from spec_bridge.mapping.models import MappingGroup
from spec_bridge.spec.document import ensure_document
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpecComparison:
    """Differences, summary and field mappings for one pair of documents."""

    differences: list[SpecDifference]
    summary: DiffSummary
    mapping_groups: list[MappingGroup]
    comparison_id: str = field(default_factory=lambda: f"comparison-{uuid.uuid4().hex[:12]}")
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def breaking_differences(self) -> list[SpecDifference]:
        return [diff for diff in self.differences if diff.is_breaking]

    def to_dict(self, include_values: bool = True) -> dict[str, Any]:
        """Convert to the JSON export structure.

        Args:
            include_values: Include old/new values of each difference

        Returns:
            Dict with id, createdAt, summary, differences and fieldMappings
        """
        return {
            "id": self.comparison_id,
            "createdAt": self.created_at.isoformat(),
            "summary": self.summary.to_dict(),
            "differences": [diff.to_dict(include_values) for diff in self.differences],
            "fieldMappings": [group.to_dict() for group in self.mapping_groups],
        }


def compare_specs(
    old_spec: Mapping[str, Any],
    new_spec: Mapping[str, Any],
    config: BridgeConfig | None = None,
) -> SpecComparison:
    """Diff two documents and infer their field mappings.

    Args:
        old_spec: The legacy API document
        new_spec: The replacement API document
        config: Configuration (defaults when None)

    Returns:
        SpecComparison with both output streams

    Raises:
        MalformedSpecError: If either document is not a mapping
    """
    ensure_document(old_spec, "old")
    ensure_document(new_spec, "new")

    config = config or BridgeConfig()
    engine = SpecDiffEngine()

    differences = engine.calculate_differences(old_spec, new_spec)
    summary = engine.generate_summary(differences)
    mapping_groups = MappingAggregator(config.matching).generate_mappings(old_spec, new_spec)

    comparison = SpecComparison(
        differences=differences,
        summary=summary,
        mapping_groups=mapping_groups,
    )

    logger.info(
        "comparison_created",
        comparison_id=comparison.comparison_id,
        differences=summary.total_differences,
        breaking_changes=summary.breaking_changes,
        mapping_groups=len(mapping_groups),
    )

    return comparison
