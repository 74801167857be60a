"""
mapping_engine/domain package marker.
"""

from mapping_engine.domain.field_mapping import (
    UNASSIGNED,
    FieldDescriptor,
    FieldMapping,
    MappingEntry,
    MappingSummary,
    MatchCandidate,
    ValidationReport,
)

__all__ = [
    "FieldDescriptor",
    "FieldMapping",
    "MappingEntry",
    "MappingSummary",
    "MatchCandidate",
    "UNASSIGNED",
    "ValidationReport",
]
