"""
Single source of truth for hero comparison. Enforces explicit TIE when values are equal.

Per category: FIRST if a > b, SECOND if b > a, TIE otherwise. Tied categories do not increment
either side's wins. Overall: whoever won more categories, TIE when the counts match.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from heroengine.config import CATEGORIES
from heroengine.core.errors import NotFoundError, ValidationError
from heroengine.data.catalog import Accessor
from heroengine.data.entity import Entity, Statline

_INT_RE = re.compile(r"^[+-]?\d+$")

VALIDATION_MESSAGE = "Both id1 and id2 are required and must be valid numbers."


class Winner(Enum):
    FIRST = "first"
    SECOND = "second"
    TIE = "tie"

    def flipped(self) -> "Winner":
        """FIRST <-> SECOND; TIE stays TIE."""
        if self is Winner.FIRST:
            return Winner.SECOND
        if self is Winner.SECOND:
            return Winner.FIRST
        return Winner.TIE


@dataclass(frozen=True)
class CategoryResult:
    """Result of comparing one category between two heroes."""

    name: str
    value_a: int
    value_b: int
    winner: Winner


@dataclass(frozen=True)
class ComparisonResult:
    """Six category results in canonical order plus the overall winner."""

    id_a: int
    id_b: int
    categories: Tuple[CategoryResult, ...]
    overall_winner: Winner

    @property
    def wins_a(self) -> int:
        return sum(1 for c in self.categories if c.winner is Winner.FIRST)

    @property
    def wins_b(self) -> int:
        return sum(1 for c in self.categories if c.winner is Winner.SECOND)

    @property
    def ties(self) -> int:
        return sum(1 for c in self.categories if c.winner is Winner.TIE)


def compare_values(a: int, b: int) -> Winner:
    """Strict comparison, no epsilon: the values are integers."""
    if a > b:
        return Winner.FIRST
    if b > a:
        return Winner.SECOND
    return Winner.TIE


def compare_statlines(a: Statline, b: Statline) -> Tuple[Tuple[CategoryResult, ...], Winner]:
    """Compare all six categories in canonical order. Returns (category results, overall winner)."""
    results = []
    wins_a = 0
    wins_b = 0
    for category in CATEGORIES:
        value_a = a[category]
        value_b = b[category]
        winner = compare_values(value_a, value_b)
        if winner is Winner.FIRST:
            wins_a += 1
        elif winner is Winner.SECOND:
            wins_b += 1
        results.append(CategoryResult(name=category, value_a=value_a, value_b=value_b, winner=winner))
    return tuple(results), compare_values(wins_a, wins_b)


def compare_entities(a: Entity, b: Entity) -> ComparisonResult:
    """Compare two heroes already in hand; ids are echoed from the entities."""
    categories, overall = compare_statlines(a.powerstats, b.powerstats)
    return ComparisonResult(id_a=a.id, id_b=b.id, categories=categories, overall_winner=overall)


def parse_identifier(raw: Any) -> Optional[int]:
    """
    Parse an identifier as int. Returns None when absent or unparsable.
    Accepts ints and integer strings (surrounding whitespace ignored); rejects bools, floats, "".
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        s = raw.strip()
        if _INT_RE.match(s):
            return int(s)
    return None


def parse_identifiers(id_a: Any, id_b: Any) -> Tuple[int, int]:
    """Both ids parsed, or ValidationError if either is absent or unparsable."""
    a = parse_identifier(id_a)
    b = parse_identifier(id_b)
    if a is None or b is None:
        raise ValidationError(VALIDATION_MESSAGE, fields=["id1", "id2"])
    return a, b


class Comparator:
    """
    Compares two heroes by id through an explicitly supplied accessor.

    Nothing is cached: each call resolves both ids and recomputes.
    """

    def __init__(self, accessor: Accessor) -> None:
        self.accessor = accessor

    def compare(self, id_a: Any, id_b: Any) -> ComparisonResult:
        """
        Validate both ids before any lookup (ValidationError), then resolve both
        (NotFoundError if either misses, without saying which), then compare.
        """
        a, b = parse_identifiers(id_a, id_b)
        entity_a = self.accessor.lookup(a)
        entity_b = self.accessor.lookup(b)
        if entity_a is None or entity_b is None:
            raise NotFoundError()
        categories, overall = compare_statlines(entity_a.powerstats, entity_b.powerstats)
        return ComparisonResult(id_a=a, id_b=b, categories=categories, overall_winner=overall)
