"""
mapping_engine/schemas/field_mapping.py

Request and response schemas for the field mapping endpoints.

The wire shapes are camelCase (`fieldKey`, `dataType`, `autoMatched`,
`canProceed`) to match what the import UI already sends and renders.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from mapping_engine.domain.field_mapping import (
    DEFAULT_DATA_TYPE,
    FieldDescriptor,
    FieldMapping,
    MappingEntry,
    ValidationReport,
    data_type_display,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldDescriptorSchema(_CamelModel):
    """
    One target field as supplied by the object schema.
    """

    key: str = Field(..., min_length=1, validation_alias=AliasChoices("key", "fieldKey"))
    name: str = ""
    data_type: str = Field(
        default=DEFAULT_DATA_TYPE,
        validation_alias=AliasChoices("dataType", "data_type"),
        serialization_alias="dataType",
    )
    required: bool = False
    id: str | None = None

    @field_validator("data_type", mode="before")
    @classmethod
    def _coerce_data_type(cls, value: Any) -> str:
        return data_type_display(value)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    def to_domain(self) -> FieldDescriptor:
        return FieldDescriptor(
            key=self.key,
            name=self.name,
            data_type=self.data_type,
            required=self.required,
            id=self.id,
        )

    @classmethod
    def from_domain(cls, value: FieldDescriptor) -> "FieldDescriptorSchema":
        return cls(
            key=value.key,
            name=value.name,
            data_type=value.data_type,
            required=value.required,
            id=value.id,
        )


class MappingEntrySchema(_CamelModel):
    """
    Assignment of one CSV column; `fieldKey=null` skips the column.
    """

    field_key: str | None = None
    auto_matched: bool = False


def mapping_to_domain(mapping: dict[str, MappingEntrySchema]) -> FieldMapping:
    return {
        column: MappingEntry(field_key=entry.field_key or None, auto_matched=entry.auto_matched)
        for column, entry in mapping.items()
    }


def mapping_from_domain(mapping: FieldMapping) -> dict[str, MappingEntrySchema]:
    return {
        column: MappingEntrySchema(field_key=entry.field_key, auto_matched=entry.auto_matched)
        for column, entry in mapping.items()
    }


class AutoMatchRequest(_CamelModel):
    columns: list[str] = Field(default_factory=list)
    fields: list[FieldDescriptorSchema] = Field(default_factory=list)


class AutoMatchResponse(_CamelModel):
    mapping: dict[str, MappingEntrySchema]
    matched_count: int = Field(..., ge=0)
    total_columns: int = Field(..., ge=0)


class ValidateMappingRequest(_CamelModel):
    mapping: dict[str, MappingEntrySchema] = Field(default_factory=dict)
    fields: list[FieldDescriptorSchema] = Field(default_factory=list)


class ValidationReportResponse(_CamelModel):
    """
    Mapping validation outcome. `warnings` is always present.
    """

    can_proceed: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, report: ValidationReport) -> "ValidationReportResponse":
        return cls(
            can_proceed=report.can_proceed,
            errors=list(report.errors),
            warnings=list(report.warnings),
        )


class ApplyMappingRequest(_CamelModel):
    rows: list[dict[str, str]] = Field(default_factory=list)
    mapping: dict[str, MappingEntrySchema] = Field(default_factory=dict)


class ApplyMappingResponse(_CamelModel):
    rows: list[dict[str, str]]


class AvailableFieldsRequest(_CamelModel):
    mapping: dict[str, MappingEntrySchema] = Field(default_factory=dict)
    fields: list[FieldDescriptorSchema] = Field(default_factory=list)
    column: str


class AvailableFieldsResponse(_CamelModel):
    fields: list[FieldDescriptorSchema]
