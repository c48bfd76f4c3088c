"""Command-line interface for spec-bridge."""
