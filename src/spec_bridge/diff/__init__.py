"""Structural comparison of API specification documents.

The diff engine walks paths, methods, parameters, request bodies, responses,
components, info and servers, and classifies every difference by its impact
on existing clients.
"""

from spec_bridge.diff.engine import SpecDiffEngine
from spec_bridge.diff.models import DifferenceType, DiffSummary, Impact, SpecDifference

__all__ = [
    "SpecDiffEngine",
    "SpecDifference",
    "DiffSummary",
    "DifferenceType",
    "Impact",
]
