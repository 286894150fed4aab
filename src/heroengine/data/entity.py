"""
Typed hero records: Statline (six powerstats) and Entity.

Both are frozen; the catalog builds them once at load time and nothing mutates them afterwards.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from heroengine.config import CATEGORIES


@dataclass(frozen=True)
class Statline:
    """Six powerstats in canonical order, each an int in [0, 100]."""

    intelligence: int
    strength: int
    speed: int
    durability: int
    power: int
    combat: int

    def __getitem__(self, category: str) -> int:
        if category not in CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def items(self) -> Iterator[Tuple[str, int]]:
        """(category, value) pairs in canonical order."""
        for category in CATEGORIES:
            yield category, getattr(self, category)

    def to_dict(self) -> Dict[str, int]:
        return dict(self.items())


@dataclass(frozen=True)
class Entity:
    """One cataloged hero."""

    id: int
    name: str
    image: str
    powerstats: Statline

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "powerstats": self.powerstats.to_dict(),
        }
