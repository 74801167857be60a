"""
mapping_engine/api/routers/field_mapping.py

Stateless field mapping HTTP endpoints used by the import UI.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mapping_engine.config import get_mapping_settings
from mapping_engine.mappers.field_matcher import FieldMatcher
from mapping_engine.mappers.mapping_edits import get_available_fields, summarize_mapping
from mapping_engine.mappers.mapping_transformer import apply_mapping
from mapping_engine.schemas.field_mapping import (
    ApplyMappingRequest,
    ApplyMappingResponse,
    AutoMatchRequest,
    AutoMatchResponse,
    AvailableFieldsRequest,
    AvailableFieldsResponse,
    FieldDescriptorSchema,
    ValidateMappingRequest,
    ValidationReportResponse,
    mapping_from_domain,
    mapping_to_domain,
)
from mapping_engine.validators.mapping_validator import validate

router = APIRouter(prefix="/field-mapping", tags=["field-mapping"])


def get_field_matcher() -> FieldMatcher:
    settings = get_mapping_settings()
    return FieldMatcher(
        thresholds=settings.thresholds,
        log_decisions=settings.log_decisions,
    )


@router.post("/auto-match", response_model=AutoMatchResponse)
def auto_match_columns(
    payload: AutoMatchRequest,
    matcher: FieldMatcher = Depends(get_field_matcher),
) -> AutoMatchResponse:
    """
    Propose a column -> field mapping for freshly uploaded headers.
    """

    fields = [item.to_domain() for item in payload.fields]
    mapping = matcher.auto_match(payload.columns, fields)
    summary = summarize_mapping(mapping)
    return AutoMatchResponse(
        mapping=mapping_from_domain(mapping),
        matched_count=summary.mapped_count,
        total_columns=summary.total_columns,
    )


@router.post("/validate", response_model=ValidationReportResponse)
def validate_mapping(payload: ValidateMappingRequest) -> ValidationReportResponse:
    """
    Re-validate the mapping after a user edit.
    """

    report = validate(
        mapping_to_domain(payload.mapping),
        [item.to_domain() for item in payload.fields],
    )
    return ValidationReportResponse.from_domain(report)


@router.post("/apply", response_model=ApplyMappingResponse)
def apply_field_mapping(payload: ApplyMappingRequest) -> ApplyMappingResponse:
    """
    Rename row columns to field names. Does not re-validate.
    """

    return ApplyMappingResponse(rows=apply_mapping(payload.rows, mapping_to_domain(payload.mapping)))


@router.post("/available-fields", response_model=AvailableFieldsResponse)
def available_fields(payload: AvailableFieldsRequest) -> AvailableFieldsResponse:
    """
    Fields a dropdown for `column` may still offer.
    """

    fields = get_available_fields(
        mapping_to_domain(payload.mapping),
        [item.to_domain() for item in payload.fields],
        payload.column,
    )
    return AvailableFieldsResponse(fields=[FieldDescriptorSchema.from_domain(item) for item in fields])
