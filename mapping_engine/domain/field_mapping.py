"""
mapping_engine/domain/field_mapping.py

Domain models for CSV column to object field mapping sessions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

DEFAULT_DATA_TYPE = "TEXT"


def extract_field_name(field_key: str) -> str:
    """
    Return the trailing segment of a dot-qualified field key.

    `custom_objects.contact.email` -> `email`
    """

    return field_key.split(".")[-1]


def data_type_display(raw: Any) -> str:
    """
    Render a schema data type tag as a plain string.

    Some schema payloads carry the type as an object with `id`/`label`
    members instead of a string.
    """

    if isinstance(raw, str):
        return raw
    if isinstance(raw, dict):
        if isinstance(raw.get("id"), str):
            return raw["id"]
        if isinstance(raw.get("label"), str):
            return raw["label"]
    return DEFAULT_DATA_TYPE


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One target field on the destination object.

    Identity is `key`; `name` and `data_type` are descriptive only.
    """

    key: str
    name: str
    data_type: str = DEFAULT_DATA_TYPE
    required: bool = False
    id: str | None = None

    @property
    def field_name(self) -> str:
        return extract_field_name(self.key)

    @property
    def label(self) -> str:
        return self.name or self.field_name


@dataclass(frozen=True)
class MappingEntry:
    """
    Assignment of one CSV column. `field_key=None` means the column is skipped.
    """

    field_key: str | None = None
    auto_matched: bool = False

    @property
    def is_assigned(self) -> bool:
        return bool(self.field_key)


UNASSIGNED = MappingEntry(field_key=None, auto_matched=False)

# Column label -> entry, insertion-ordered in source column order.
FieldMapping = dict[str, MappingEntry]


@dataclass(frozen=True)
class MatchCandidate:
    """
    Best field found for a column together with how it was found.
    """

    field_key: str
    confidence: float
    strategy: str


@dataclass(frozen=True)
class ValidationReport:
    """
    Outcome of validating a mapping against the field schema.
    """

    can_proceed: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MappingSummary:
    """
    Counts shown next to the mapping table.
    """

    mapped_count: int
    total_columns: int
    auto_matched_count: int


def assigned_field_keys(mapping: FieldMapping) -> list[str]:
    """
    Field keys referenced by assigned entries, in column order, duplicates kept.
    """

    return [entry.field_key for entry in mapping.values() if entry.is_assigned]


def find_field(fields: Sequence[FieldDescriptor], field_key: str) -> FieldDescriptor | None:
    for descriptor in fields:
        if descriptor.key == field_key:
            return descriptor
    return None
