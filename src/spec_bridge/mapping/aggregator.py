"""Group field mappings per matched endpoint."""

from collections.abc import Mapping
from typing import Any

from spec_bridge.config import MatchingConfig
from spec_bridge.mapping.fields import SchemaFieldMatcher
from spec_bridge.mapping.models import MappingGroup
from spec_bridge.mapping.paths import MatchStrategy, PathMatcher
from spec_bridge.spec.document import ensure_document, get_paths
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)


class MappingAggregator:
    """Infer field mappings between two specification documents.

    Endpoints are paired by a MatchStrategy (PathMatcher by default); each
    pair is then field-matched across the HTTP methods both sides declare.
    """

    def __init__(
        self,
        config: MatchingConfig | None = None,
        path_strategy: MatchStrategy | None = None,
        field_matcher: SchemaFieldMatcher | None = None,
    ):
        """Initialize mapping aggregator.

        Args:
            config: Matching thresholds (defaults when None)
            path_strategy: Endpoint pairing strategy (PathMatcher when None)
            field_matcher: Field matcher (built from config when None)
        """
        self.config = config or MatchingConfig()
        self.path_strategy = path_strategy or PathMatcher(threshold=self.config.path_threshold)
        self.field_matcher = field_matcher or SchemaFieldMatcher(
            parameter_threshold=self.config.parameter_threshold,
            field_threshold=self.config.field_threshold,
            emit_unmapped=self.config.emit_unmapped,
        )

    def generate_mappings(
        self, old_spec: Mapping[str, Any], new_spec: Mapping[str, Any]
    ) -> list[MappingGroup]:
        """Generate one mapping group per matched old endpoint.

        Groups without field mappings carry no actionable information and
        are dropped unless ``include_empty_groups`` is configured.

        Args:
            old_spec: The legacy API document
            new_spec: The replacement API document

        Returns:
            Mapping groups in path-match order

        Raises:
            MalformedSpecError: If either document is not a mapping
        """
        ensure_document(old_spec, "old")
        ensure_document(new_spec, "new")

        paths1 = get_paths(old_spec)
        paths2 = get_paths(new_spec)

        groups: list[MappingGroup] = []
        empty_groups = 0

        for path_match in self.path_strategy.match(paths1.keys(), paths2.keys()):
            result = self.field_matcher.map_endpoint(
                paths1.get(path_match.path1), paths2.get(path_match.path2), path_match.path1
            )
            group = MappingGroup(
                endpoint=path_match.path1,
                target_endpoint=path_match.path2,
                mappings=tuple(result.mappings),
                unmapped=tuple(result.unmapped),
            )

            if not group.mappings:
                empty_groups += 1
                if not self.config.include_empty_groups:
                    continue

            groups.append(group)

        logger.info(
            "mapping_groups_generated",
            groups=len(groups),
            empty_groups=empty_groups,
            field_mappings=sum(len(g.mappings) for g in groups),
        )

        return groups
