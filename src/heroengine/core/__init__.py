"""Core logic: hero comparison, tie handling, projections and boundary rendering."""

from heroengine.core.compare import (
    CategoryResult,
    Comparator,
    ComparisonResult,
    Winner,
    compare_entities,
    compare_statlines,
    compare_values,
    parse_identifier,
    parse_identifiers,
)
from heroengine.core.errors import NotFoundError, ValidationError
from heroengine.core.projection import find_by_name, get_entity, get_statline, list_all

__all__ = [
    "CategoryResult",
    "Comparator",
    "ComparisonResult",
    "Winner",
    "compare_entities",
    "compare_statlines",
    "compare_values",
    "parse_identifier",
    "parse_identifiers",
    "NotFoundError",
    "ValidationError",
    "find_by_name",
    "get_entity",
    "get_statline",
    "list_all",
]
