"""
mapping_engine/mappers/mapping_transformer.py

Rename CSV row columns to target field names according to a mapping.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from mapping_engine.domain.field_mapping import FieldMapping, extract_field_name


def map_row(row: Mapping[str, str], mapping: FieldMapping) -> dict[str, str]:
    """
    Map one source row into a record keyed by field name.

    Skipped and unknown columns are dropped. When two columns target the same
    field the later column in row order wins.
    """

    mapped: dict[str, str] = {}
    for column, value in row.items():
        entry = mapping.get(column)
        if entry is None or not entry.is_assigned:
            continue
        mapped[extract_field_name(entry.field_key)] = value
    return mapped


def apply_mapping(
    rows: Iterable[Mapping[str, str]],
    mapping: FieldMapping,
) -> list[dict[str, str]]:
    """
    Apply the mapping to every row. Callers gate on validation beforehand.
    """

    return [map_row(row, mapping) for row in rows]
