"""Turn mapping groups into endpoint-level API mappings."""

from spec_bridge.mapping.catalog import predefined_api_mappings
from spec_bridge.mapping.models import ApiMapping, MappingGroup, MappingType

EXACT_GROUP_THRESHOLD = 0.9
SIMILAR_GROUP_THRESHOLD = 0.7


def classify_mapping_type(confidence: float) -> MappingType:
    """Classify a group confidence as exact (> 0.9), similar (> 0.7) or inferred."""
    if confidence > EXACT_GROUP_THRESHOLD:
        return MappingType.EXACT
    if confidence > SIMILAR_GROUP_THRESHOLD:
        return MappingType.SIMILAR
    return MappingType.INFERRED


def generate_migration_notes(group: MappingGroup) -> list[str]:
    """Build the human-readable notes attached to a mapping group."""
    notes = [
        f"Endpoint: {group.endpoint}",
        f"Confidence: {round(group.confidence * 100)}%",
    ]

    if group.mappings:
        notes.append(f"Field mappings: {len(group.mappings)} fields mapped")

        transformation_count = sum(1 for m in group.mappings if m.transformation_required)
        if transformation_count > 0:
            notes.append(f"{transformation_count} fields require transformation")

    return notes


def build_api_mapping(group: MappingGroup) -> ApiMapping:
    return ApiMapping(
        source_endpoint=group.endpoint,
        target_endpoint=group.target_endpoint,
        confidence=group.confidence,
        mapping_type=classify_mapping_type(group.confidence),
        transformation_required=group.transformation_required,
        field_mappings=group.mappings,
        migration_notes=generate_migration_notes(group),
    )


def build_api_mappings(
    groups: list[MappingGroup], include_predefined: bool = False
) -> list[ApiMapping]:
    """Convert mapping groups to API mappings.

    Args:
        groups: Groups from MappingAggregator.generate_mappings()
        include_predefined: Append the catalog endpoint mappings

    Returns:
        API mappings in group order, followed by catalog mappings if requested
    """
    api_mappings = [build_api_mapping(group) for group in groups]

    if include_predefined:
        api_mappings.extend(predefined_api_mappings())

    return api_mappings
