"""Shared utilities for spec-bridge."""
