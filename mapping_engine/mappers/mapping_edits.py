"""
mapping_engine/mappers/mapping_edits.py

Single-entry edits and read helpers used while a person reviews a mapping.
"""

from __future__ import annotations

from typing import Sequence

from mapping_engine.domain.field_mapping import (
    FieldDescriptor,
    FieldMapping,
    MappingEntry,
    MappingSummary,
)


def set_mapping_entry(
    mapping: FieldMapping,
    column: str,
    field_key: str | None,
) -> FieldMapping:
    """
    Return a copy of `mapping` with the entry for `column` replaced by a
    user choice. `field_key=None` skips the column.

    The result may assign one field twice; validation reports that.
    """

    updated = dict(mapping)
    updated[column] = MappingEntry(field_key=field_key or None, auto_matched=False)
    return updated


def get_available_fields(
    mapping: FieldMapping,
    fields: Sequence[FieldDescriptor],
    current_column: str,
) -> list[FieldDescriptor]:
    """
    Fields not taken by any column other than `current_column`, in schema order.
    """

    taken = {
        entry.field_key
        for column, entry in mapping.items()
        if column != current_column and entry.is_assigned
    }
    return [descriptor for descriptor in fields if descriptor.key not in taken]


def summarize_mapping(mapping: FieldMapping) -> MappingSummary:
    return MappingSummary(
        mapped_count=sum(1 for entry in mapping.values() if entry.is_assigned),
        total_columns=len(mapping),
        auto_matched_count=sum(
            1 for entry in mapping.values() if entry.is_assigned and entry.auto_matched
        ),
    )
