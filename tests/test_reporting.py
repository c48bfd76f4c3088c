"""Tests for comparison reports and exports."""

import io
import json

import pytest
from rich.console import Console

from spec_bridge import compare_specs
from spec_bridge.comparison import SpecComparison
from spec_bridge.diff.engine import SpecDiffEngine
from spec_bridge.exceptions import ExportError
from spec_bridge.reporting import (
    display_comparison_summary,
    display_differences,
    display_mapping_groups,
    export_comparison,
    generate_markdown_report,
    save_comparison,
)


def _console():
    return Console(file=io.StringIO(), width=200)


def _output(console):
    return console.file.getvalue()


def test_markdown_report_sections(old_spec, new_spec):
    comparison = compare_specs(old_spec, new_spec)
    report = generate_markdown_report(comparison)

    assert report.startswith("# OpenAPI Specification Comparison Report")
    assert f"**Comparison ID**: {comparison.comparison_id}" in report
    assert f"- **Total Differences**: {comparison.summary.total_differences}" in report
    assert "### Breaking Changes" in report
    assert "➖ **paths./pay**: Endpoint removed: /pay" in report
    assert "➕ **paths./users/{userId}**: New endpoint added: /users/{userId}" in report
    assert "### Non-breaking Changes" in report
    assert '🔄 **info.title**: API title changed' in report
    assert '   - Old: `"Converge API"`' in report
    assert '   - New: `"Elavon API"`' in report


def test_markdown_report_field_mappings(old_spec, new_spec):
    report = generate_markdown_report(compare_specs(old_spec, new_spec))

    assert "## Field Mappings" in report
    assert "### /users/{id} (Confidence: " in report
    assert "✅ `user_name` → `userName`" in report
    assert "🔄 `age` → `age` (string → integer)" in report
    assert "   - Transformation: Convert string to integer using int()" in report


def test_markdown_report_skips_empty_sections(old_spec):
    report = generate_markdown_report(compare_specs(old_spec, old_spec))

    assert "- **Total Differences**: 0" in report
    assert "### Breaking Changes" not in report
    assert "## Field Mappings" in report


def test_markdown_report_without_mappings():
    engine = SpecDiffEngine()
    comparison = SpecComparison(differences=[], summary=engine.generate_summary([]), mapping_groups=[])

    assert "## Field Mappings" not in generate_markdown_report(comparison)


def test_export_json(old_spec, new_spec):
    comparison = compare_specs(old_spec, new_spec)
    data = json.loads(export_comparison(comparison, "json"))

    assert data["id"] == comparison.comparison_id
    assert data["summary"]["breakingChanges"] == comparison.summary.breaking_changes


def test_export_json_without_values(old_spec, new_spec):
    comparison = compare_specs(old_spec, new_spec)
    data = json.loads(export_comparison(comparison, "JSON", include_values=False))

    assert all("oldValue" not in d for d in data["differences"])


def test_export_unknown_format(old_spec, new_spec):
    with pytest.raises(ExportError, match="html"):
        export_comparison(compare_specs(old_spec, new_spec), "html")


def test_save_comparison(tmp_path, old_spec, new_spec):
    comparison = compare_specs(old_spec, new_spec)

    saved = save_comparison(comparison, tmp_path / "reports" / "report.md", "markdown")

    assert saved.exists()
    assert saved.read_text(encoding="utf-8") == generate_markdown_report(comparison)


def test_display_summary_with_breaking_changes(old_spec, new_spec):
    console = _console()
    display_comparison_summary(compare_specs(old_spec, new_spec), console)

    output = _output(console)
    assert "BREAKING CHANGES DETECTED" in output
    assert "Total differences" in output


def test_display_summary_without_differences(old_spec):
    console = _console()
    display_comparison_summary(compare_specs(old_spec, old_spec), console)

    assert "No differences detected" in _output(console)


def test_display_differences(old_spec, new_spec):
    console = _console()
    display_differences(compare_specs(old_spec, new_spec), console)

    output = _output(console)
    assert "paths./pay" in output
    assert "breaking" in output


def test_display_mapping_groups(old_spec, new_spec):
    console = _console()
    display_mapping_groups(compare_specs(old_spec, new_spec).mapping_groups, console)

    output = _output(console)
    assert "userName" in output
    assert "Convert string to integer" in output


def test_display_no_mapping_groups():
    console = _console()
    display_mapping_groups([], console)

    assert "No field mappings inferred" in _output(console)
