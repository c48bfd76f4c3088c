"""Specification comparison and mapping commands."""

import json
from pathlib import Path

import click

from spec_bridge.cli.context import BridgeContext
from spec_bridge.cli.decorators import handle_errors, pass_context
from spec_bridge.cli.utils import console, echo_info, echo_success, echo_warning, print_table
from spec_bridge.comparison import compare_specs
from spec_bridge.mapping.aggregator import MappingAggregator
from spec_bridge.mapping.assembly import build_api_mappings
from spec_bridge.mapping.catalog import find_known_mapping
from spec_bridge.reporting.comparison_report import (
    display_comparison_summary,
    display_differences,
    display_mapping_groups,
)
from spec_bridge.reporting.persistence import EXPORT_FORMATS, save_comparison
from spec_bridge.spec.loader import load_document
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)

SPEC_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command(name="compare")
@click.argument("old_spec", type=SPEC_FILE)
@click.argument("new_spec", type=SPEC_FILE)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the comparison to this file",
)
@click.option(
    "--format",
    "export_format",
    type=click.Choice(EXPORT_FORMATS, case_sensitive=False),
    help="Export format for --output (default: from configuration, json)",
)
@click.option(
    "--show-mappings",
    is_flag=True,
    help="Also display the inferred field mappings",
)
@pass_context
@handle_errors
def compare(
    ctx: BridgeContext,
    old_spec: Path,
    new_spec: Path,
    output: Path | None,
    export_format: str | None,
    show_mappings: bool,
) -> None:
    """Compare an old and a new API specification.

    Reports every added, removed and modified element of the new document
    classified by its impact on existing clients, and infers how the old
    endpoints' fields map onto the new ones.

    Examples:

        # Show the differences
        spec-bridge compare converge.yaml elavon.yaml

        # Include field mappings
        spec-bridge compare converge.yaml elavon.yaml --show-mappings

        # Write a Markdown report
        spec-bridge compare converge.yaml elavon.yaml -o report.md --format markdown
    """
    config = ctx.config

    old_document = load_document(old_spec)
    new_document = load_document(new_spec)

    comparison = compare_specs(old_document, new_document, config)

    display_comparison_summary(comparison, console)
    display_differences(comparison, console)

    if show_mappings:
        click.echo()
        display_mapping_groups(comparison.mapping_groups, console)

    if output is not None:
        saved = save_comparison(
            comparison,
            output,
            export_format or config.export.default_format,
            config.export.include_values,
        )
        echo_success(f"Comparison written to {saved}")


@click.command(name="mappings")
@click.argument("old_spec", type=SPEC_FILE)
@click.argument("new_spec", type=SPEC_FILE)
@click.option(
    "--include-predefined",
    is_flag=True,
    help="Append the known Converge to Elavon endpoint mappings",
)
@click.option(
    "--emit-unmapped",
    is_flag=True,
    help="List parameters and fields that found no confident match",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the API mappings to this JSON file",
)
@pass_context
@handle_errors
def mappings(
    ctx: BridgeContext,
    old_spec: Path,
    new_spec: Path,
    include_predefined: bool,
    emit_unmapped: bool,
    output: Path | None,
) -> None:
    """Infer endpoint and field mappings between two specifications.

    Examples:

        spec-bridge mappings converge.yaml elavon.yaml --emit-unmapped

        spec-bridge mappings converge.yaml elavon.yaml -o mappings.json
    """
    matching = ctx.config.matching
    if emit_unmapped:
        matching = matching.model_copy(update={"emit_unmapped": True})

    old_document = load_document(old_spec)
    new_document = load_document(new_spec)

    groups = MappingAggregator(matching).generate_mappings(old_document, new_document)
    display_mapping_groups(groups, console)

    api_mappings = build_api_mappings(groups, include_predefined=include_predefined)
    if api_mappings:
        print_table(
            "API Mappings",
            ["Source", "Target", "Type", "Confidence", "Notes"],
            [
                [
                    m.source_endpoint,
                    m.target_endpoint,
                    m.mapping_type.value,
                    f"{m.confidence:.0%}",
                    "; ".join(m.migration_notes),
                ]
                for m in api_mappings
            ],
        )

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump([m.to_dict() for m in api_mappings], f, indent=2)

        logger.info("api_mappings_saved", file=str(output), count=len(api_mappings))
        echo_success(f"{len(api_mappings)} API mappings written to {output}")


@click.command(name="lookup")
@click.argument("pattern")
@handle_errors
def lookup(pattern: str) -> None:
    """Look up a known Converge to Elavon mapping by endpoint or variable name.

    Examples:

        spec-bridge lookup sale

        spec-bridge lookup ssl_amount
    """
    mapping = find_known_mapping(pattern)

    if mapping is None:
        echo_warning(f"No known mapping for '{pattern}'")
        return

    echo_info(f"{mapping.source_endpoint} → {mapping.target_endpoint}")
    print_table(
        "Known Mapping",
        ["Field", "Value"],
        [
            ["Type", mapping.mapping_type.value],
            ["Confidence", f"{mapping.confidence:.0%}"],
            ["Transformation required", mapping.transformation_required],
            ["Notes", "; ".join(mapping.migration_notes)],
        ],
    )
