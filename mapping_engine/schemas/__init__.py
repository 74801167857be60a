"""
mapping_engine/schemas package marker.
"""

from mapping_engine.schemas.field_mapping import (
    ApplyMappingRequest,
    ApplyMappingResponse,
    AutoMatchRequest,
    AutoMatchResponse,
    AvailableFieldsRequest,
    AvailableFieldsResponse,
    FieldDescriptorSchema,
    MappingEntrySchema,
    ValidateMappingRequest,
    ValidationReportResponse,
)

__all__ = [
    "ApplyMappingRequest",
    "ApplyMappingResponse",
    "AutoMatchRequest",
    "AutoMatchResponse",
    "AvailableFieldsRequest",
    "AvailableFieldsResponse",
    "FieldDescriptorSchema",
    "MappingEntrySchema",
    "ValidateMappingRequest",
    "ValidationReportResponse",
]
