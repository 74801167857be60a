"""
mapping_engine/mappers package marker.
"""

from mapping_engine.mappers.field_matcher import (
    RESERVED_COLUMNS,
    FieldMatcher,
    MatchingThresholds,
    auto_match,
)
from mapping_engine.mappers.mapping_edits import (
    get_available_fields,
    set_mapping_entry,
    summarize_mapping,
)
from mapping_engine.mappers.mapping_transformer import apply_mapping, map_row
from mapping_engine.mappers.normalizer import normalize
from mapping_engine.mappers.similarity import COMMON_VARIATIONS, similarity, synonym_match

__all__ = [
    "COMMON_VARIATIONS",
    "FieldMatcher",
    "MatchingThresholds",
    "RESERVED_COLUMNS",
    "apply_mapping",
    "auto_match",
    "get_available_fields",
    "map_row",
    "normalize",
    "set_mapping_entry",
    "similarity",
    "summarize_mapping",
    "synonym_match",
]
