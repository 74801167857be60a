"""
Field mapping auto-match and validation engine for CSV imports.
"""

from mapping_engine.domain.field_mapping import (
    FieldDescriptor,
    FieldMapping,
    MappingEntry,
    ValidationReport,
)
from mapping_engine.mappers import (
    apply_mapping,
    auto_match,
    get_available_fields,
    normalize,
    set_mapping_entry,
    similarity,
)
from mapping_engine.validators import validate

__all__ = [
    "FieldDescriptor",
    "FieldMapping",
    "MappingEntry",
    "ValidationReport",
    "apply_mapping",
    "auto_match",
    "get_available_fields",
    "normalize",
    "set_mapping_entry",
    "similarity",
    "validate",
]
