"""
mapping_engine/api package marker.
"""
