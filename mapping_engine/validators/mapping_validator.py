"""
mapping_engine/validators/mapping_validator.py

Validation of a (possibly user-edited) column -> field mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from mapping_engine.domain.field_mapping import (
    FieldDescriptor,
    FieldMapping,
    ValidationReport,
    assigned_field_keys,
    extract_field_name,
    find_field,
)
from mapping_engine.logging_utils import log_event

logger = logging.getLogger(__name__)

DUPLICATE_FIELD_ASSIGNMENT = "duplicate_field_assignment"
REQUIRED_FIELD_UNMAPPED = "required_field_unmapped"


@dataclass(frozen=True)
class MappingErrorDetail:
    """
    Structured mapping validity problem.
    """

    code: str
    message: str
    field_key: str
    context: dict[str, Any] | None = None


class MappingValidator:
    """
    Checks duplicate assignment and required-field coverage.

    Problems are reported, never raised; the caller decides whether to
    block the import on `can_proceed`.
    """

    def __init__(self, *, fields: Sequence[FieldDescriptor]) -> None:
        self._fields = tuple(fields)

    def collect_errors(self, mapping: FieldMapping) -> list[MappingErrorDetail]:
        """
        Run both checks and return every problem found, duplicates first.
        """

        assigned = assigned_field_keys(mapping)
        errors = self._duplicate_errors(mapping, assigned)
        errors.extend(self._required_errors(set(assigned)))
        return errors

    def validate(self, mapping: FieldMapping) -> ValidationReport:
        errors = self.collect_errors(mapping)
        report = ValidationReport(
            can_proceed=not errors,
            errors=tuple(error.message for error in errors),
            warnings=(),
        )
        log_event(
            logger,
            logging.DEBUG,
            "mapping_validated",
            can_proceed=report.can_proceed,
            codes=[error.code for error in errors],
        )
        return report

    def _duplicate_errors(
        self,
        mapping: FieldMapping,
        assigned: Sequence[str],
    ) -> list[MappingErrorDetail]:
        seen: set[str] = set()
        duplicated: list[str] = []
        for field_key in assigned:
            if field_key in seen and field_key not in duplicated:
                duplicated.append(field_key)
            seen.add(field_key)

        errors: list[MappingErrorDetail] = []
        for field_key in duplicated:
            label = self._label_for(field_key)
            columns = [column for column, entry in mapping.items() if entry.field_key == field_key]
            errors.append(
                MappingErrorDetail(
                    code=DUPLICATE_FIELD_ASSIGNMENT,
                    message=(
                        f'Multiple CSV columns are mapped to "{label}". '
                        "Each field can only be mapped once."
                    ),
                    field_key=field_key,
                    context={"columns": columns},
                )
            )
        return errors

    def _required_errors(self, assigned: set[str]) -> list[MappingErrorDetail]:
        return [
            MappingErrorDetail(
                code=REQUIRED_FIELD_UNMAPPED,
                message=f'Required field "{descriptor.label}" is not mapped to any CSV column.',
                field_key=descriptor.key,
            )
            for descriptor in self._fields
            if descriptor.required and descriptor.key not in assigned
        ]

    def _label_for(self, field_key: str) -> str:
        descriptor = find_field(self._fields, field_key)
        if descriptor is not None and descriptor.name:
            return descriptor.name
        return extract_field_name(field_key)


def validate(mapping: FieldMapping, fields: Sequence[FieldDescriptor]) -> ValidationReport:
    """
    Validate a mapping against the field schema.
    """

    return MappingValidator(fields=fields).validate(mapping)
