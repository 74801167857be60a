"""
mapping_engine/validators package marker.
"""

from mapping_engine.validators.mapping_validator import MappingErrorDetail, MappingValidator, validate

__all__ = [
    "MappingErrorDetail",
    "MappingValidator",
    "validate",
]
