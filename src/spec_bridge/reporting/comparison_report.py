"""Comparison report generation and display."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from spec_bridge.comparison import SpecComparison
from spec_bridge.diff.models import DifferenceType, Impact
from spec_bridge.mapping.models import MappingGroup

IMPACT_COLORS = {
    Impact.BREAKING: "red",
    Impact.NON_BREAKING: "green",
    Impact.ENHANCEMENT: "blue",
}

CHANGE_ICONS = {
    DifferenceType.ADDED: "➕",
    DifferenceType.REMOVED: "➖",
    DifferenceType.MODIFIED: "🔄",
}

IMPACT_HEADINGS = {
    Impact.BREAKING: "Breaking Changes",
    Impact.NON_BREAKING: "Non-breaking Changes",
    Impact.ENHANCEMENT: "Enhancement Changes",
}


def display_comparison_summary(
    comparison: SpecComparison,
    console: Console | None = None,
) -> None:
    """Display the difference counts of a comparison.

    Args:
        comparison: Comparison to display
        console: Rich console (created if None)
    """
    if console is None:
        console = Console()

    summary = comparison.summary

    if summary.total_differences == 0:
        console.print(
            Panel.fit(
                "[green]✓ No differences detected between the specifications[/green]",
                border_style="green",
            )
        )
        return

    if summary.has_breaking_changes:
        console.print(
            Panel.fit(
                f"[bold red]⚠️  {summary.breaking_changes} BREAKING CHANGES DETECTED[/bold red]\n"
                "Existing clients of the old API need migration work",
                border_style="red",
            )
        )
        console.print()

    table = Table(title="🔍 Old → New Specification Comparison Summary")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right")

    table.add_row("Total differences", str(summary.total_differences))
    table.add_row("Added", str(summary.added_count))
    table.add_row("Removed", str(summary.removed_count))
    table.add_row("Modified", str(summary.modified_count))
    table.add_row("[red]Breaking[/red]", str(summary.breaking_changes))
    table.add_row("[green]Non-breaking[/green]", str(summary.non_breaking_changes))
    table.add_row("[blue]Enhancements[/blue]", str(summary.enhancements))
    table.add_row("Mapping groups", str(len(comparison.mapping_groups)))

    console.print(table)


def display_differences(comparison: SpecComparison, console: Console | None = None) -> None:
    """Display every difference, breaking changes first."""
    if console is None:
        console = Console()

    if not comparison.differences:
        return

    table = Table(title="Specification Differences")
    table.add_column("Path", style="cyan")
    table.add_column("Change", style="yellow")
    table.add_column("Impact", justify="center")
    table.add_column("Confidence", justify="right")
    table.add_column("Description", style="white", max_width=50)

    impact_order = list(IMPACT_COLORS)
    for diff in sorted(comparison.differences, key=lambda d: impact_order.index(d.impact)):
        color = IMPACT_COLORS[diff.impact]
        table.add_row(
            diff.path,
            f"{CHANGE_ICONS[diff.type]} {diff.type.value}",
            f"[{color}]{diff.impact.value}[/{color}]",
            f"{diff.confidence:.0%}",
            diff.description,
        )

    console.print(table)


def display_mapping_groups(groups: list[MappingGroup], console: Console | None = None) -> None:
    """Display one table of field mappings per endpoint group."""
    if console is None:
        console = Console()

    if not groups:
        console.print("[yellow]No field mappings inferred[/yellow]")
        return

    for group in groups:
        table = Table(
            title=f"{group.endpoint} → {group.target_endpoint} "
            f"(confidence {group.confidence:.0%})"
        )
        table.add_column("Source Field", style="cyan")
        table.add_column("Target Field", style="green")
        table.add_column("Types", style="white")
        table.add_column("Confidence", justify="right")
        table.add_column("Transformation", style="yellow", max_width=45)

        for mapping in group.mappings:
            types = mapping.source_type
            if mapping.transformation_required:
                types = f"{mapping.source_type} → {mapping.target_type}"
            table.add_row(
                f"{mapping.source_path}.{mapping.source_field}",
                mapping.target_field,
                types,
                f"{mapping.confidence:.0%}",
                mapping.transformation_rule or "",
            )

        console.print(table)

        if group.unmapped:
            unmapped = ", ".join(u.source_field for u in group.unmapped)
            console.print(f"[dim]Unmapped: {unmapped}[/dim]")

        console.print()


def generate_markdown_report(comparison: SpecComparison) -> str:
    """Generate a Markdown report of a comparison.

    Args:
        comparison: Comparison to render

    Returns:
        Markdown document
    """
    summary = comparison.summary
    lines = [
        "# OpenAPI Specification Comparison Report",
        "",
        f"**Generated**: {comparison.created_at.strftime('%Y-%m-%d %H:%M:%S %Z')}",
        f"**Comparison ID**: {comparison.comparison_id}",
        "",
        "## Summary",
        "",
        f"- **Total Differences**: {summary.total_differences}",
        f"- **Added**: {summary.added_count}",
        f"- **Removed**: {summary.removed_count}",
        f"- **Modified**: {summary.modified_count}",
        f"- **Breaking Changes**: {summary.breaking_changes}",
        f"- **Non-Breaking Changes**: {summary.non_breaking_changes}",
        f"- **Enhancements**: {summary.enhancements}",
        "",
        "## Differences",
        "",
    ]

    for impact, heading in IMPACT_HEADINGS.items():
        diffs = [d for d in comparison.differences if d.impact is impact]
        if not diffs:
            continue

        lines.extend([f"### {heading}", ""])
        for diff in diffs:
            lines.append(f"{CHANGE_ICONS[diff.type]} **{diff.path}**: {diff.description}")
            if diff.old_value is not None and diff.new_value is not None:
                lines.append(f"   - Old: `{json.dumps(diff.old_value, default=str)}`")
                lines.append(f"   - New: `{json.dumps(diff.new_value, default=str)}`")
            lines.append("")

    if comparison.mapping_groups:
        lines.extend(["## Field Mappings", ""])

        for group in comparison.mapping_groups:
            lines.extend(
                [f"### {group.endpoint} (Confidence: {round(group.confidence * 100)}%)", ""]
            )
            for mapping in group.mappings:
                icon = "🔄" if mapping.transformation_required else "✅"
                line = f"{icon} `{mapping.source_field}` → `{mapping.target_field}`"
                if mapping.transformation_required:
                    line += f" ({mapping.source_type} → {mapping.target_type})"
                lines.append(line)
                if mapping.transformation_rule:
                    lines.append(f"   - Transformation: {mapping.transformation_rule}")
                lines.append("")

    lines.extend(["---", "*Generated by spec-bridge*"])

    return "\n".join(lines)
