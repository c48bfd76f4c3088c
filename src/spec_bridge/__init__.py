"""spec-bridge - Compare API specifications and infer field mappings.

The package compares an old and a new OpenAPI-style document, classifies the
structural differences by migration impact, and proposes field-level
correspondences between the two APIs.
"""

__version__ = "0.1.0"
__author__ = "Spec Bridge Team"
__license__ = "Apache-2.0"

from spec_bridge.comparison import SpecComparison, compare_specs  # noqa: E402
from spec_bridge.diff import DiffSummary, SpecDiffEngine, SpecDifference  # noqa: E402
from spec_bridge.exceptions import MalformedSpecError, SpecBridgeError  # noqa: E402
from spec_bridge.mapping import FieldMapping, MappingAggregator, MappingGroup  # noqa: E402

__all__ = [
    "__version__",
    "compare_specs",
    "SpecComparison",
    "SpecDiffEngine",
    "SpecDifference",
    "DiffSummary",
    "MappingAggregator",
    "MappingGroup",
    "FieldMapping",
    "SpecBridgeError",
    "MalformedSpecError",
]
