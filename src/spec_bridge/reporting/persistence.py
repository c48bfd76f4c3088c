"""Export and save comparison results."""

import json
from pathlib import Path

from spec_bridge.comparison import SpecComparison
from spec_bridge.exceptions import ExportError
from spec_bridge.reporting.comparison_report import generate_markdown_report
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)

EXPORT_FORMATS = ("json", "markdown")


def export_comparison(
    comparison: SpecComparison,
    export_format: str = "json",
    include_values: bool = True,
) -> str:
    """Render a comparison in an export format.

    Args:
        comparison: Comparison to export
        export_format: "json" or "markdown"
        include_values: Include old/new values of each difference (JSON only)

    Returns:
        The rendered comparison

    Raises:
        ExportError: If the format is not supported
    """
    export_format = export_format.lower()

    if export_format == "json":
        return json.dumps(comparison.to_dict(include_values), indent=2, default=str)
    if export_format == "markdown":
        return generate_markdown_report(comparison)

    raise ExportError(
        f"Unsupported export format: {export_format}. Use one of: {', '.join(EXPORT_FORMATS)}"
    )


def save_comparison(
    comparison: SpecComparison,
    output_file: Path | str,
    export_format: str = "json",
    include_values: bool = True,
) -> Path:
    """Save a comparison to a file.

    Args:
        comparison: Comparison to save
        output_file: Destination file
        export_format: "json" or "markdown"
        include_values: Include old/new values of each difference (JSON only)

    Returns:
        Path of the written file
    """
    content = export_comparison(comparison, export_format, include_values)

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(
        "comparison_saved",
        file=str(output_path),
        format=export_format,
        differences=comparison.summary.total_differences,
        breaking_changes=comparison.summary.breaking_changes,
    )

    return output_path
