# database/__init__.py
"""Database package for LightBnB API."""

from .connection import DatabaseConnection
from .queries import QueryPlan, InvalidLimitError, build_property_search_query
from .repository import LightBnbRepository, QueryOutcome

__all__ = [
    "DatabaseConnection",
    "QueryPlan",
    "InvalidLimitError",
    "build_property_search_query",
    "LightBnbRepository",
    "QueryOutcome"
]
