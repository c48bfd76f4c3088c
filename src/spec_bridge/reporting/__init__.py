"""Reporting and export of comparison results."""

from spec_bridge.reporting.comparison_report import (
    display_comparison_summary,
    display_differences,
    display_mapping_groups,
    generate_markdown_report,
)
from spec_bridge.reporting.persistence import export_comparison, save_comparison

__all__ = [
    "display_comparison_summary",
    "display_differences",
    "display_mapping_groups",
    "generate_markdown_report",
    "export_comparison",
    "save_comparison",
]
