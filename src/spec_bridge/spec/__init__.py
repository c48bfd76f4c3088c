"""Specification document access and loading."""

from spec_bridge.spec.document import (
    COMPONENT_TYPES,
    HTTP_METHODS,
    MAPPED_METHODS,
    SUCCESS_CODES,
    ensure_document,
    extract_schema,
)
from spec_bridge.spec.loader import load_document

__all__ = [
    "COMPONENT_TYPES",
    "HTTP_METHODS",
    "MAPPED_METHODS",
    "SUCCESS_CODES",
    "ensure_document",
    "extract_schema",
    "load_document",
]
