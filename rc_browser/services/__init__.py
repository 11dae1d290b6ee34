"""
Collaborators around the core: the map layer that evaluates compiled
clauses against its own copy of the records.
"""

from .map_layer import MapLayer

__all__ = ["MapLayer"]
