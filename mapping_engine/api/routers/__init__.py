"""
mapping_engine/api/routers package marker.
"""

from mapping_engine.api.routers.field_mapping import router as field_mapping_router

__all__ = [
    "field_mapping_router",
]
