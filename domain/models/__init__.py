"""
Domain models - pure data structures representing business entities.
"""

from domain.models.manager import COUNTER_FIELDS, POINTS_FIELDS, Manager

__all__ = ["Manager", "COUNTER_FIELDS", "POINTS_FIELDS"]
