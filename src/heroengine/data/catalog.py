"""
In-memory hero catalog: the accessor every lookup in heroengine goes through.

A catalog is immutable once built. A miss on lookup returns None; it is an expected outcome,
not an error, and callers decide how to surface it.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Tuple

import pandas as pd

from heroengine.config import CATEGORIES
from heroengine.data.entity import Entity


class Accessor(Protocol):
    """Anything that resolves an identifier to an Entity (or None on a miss)."""

    def lookup(self, entity_id: int) -> Optional[Entity]:
        ...


class Catalog:
    """Ordered, immutable collection of entities indexed by id."""

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self._entities: Tuple[Entity, ...] = tuple(entities)
        self._by_id: Dict[int, Entity] = {}
        for entity in self._entities:
            if entity.id in self._by_id:
                raise ValueError(f"Duplicate entity id {entity.id}")
            self._by_id[entity.id] = entity

    def lookup(self, entity_id: int) -> Optional[Entity]:
        """Entity with this id, or None."""
        return self._by_id.get(entity_id)

    def find_by_name(self, name: str) -> Optional[Entity]:
        """First entity whose name matches case-insensitively (surrounding whitespace ignored)."""
        wanted = name.strip().casefold()
        if not wanted:
            return None
        for entity in self._entities:
            if entity.name.casefold() == wanted:
                return entity
        return None

    def all(self) -> List[Entity]:
        return list(self._entities)

    def ids(self) -> List[int]:
        return [e.id for e in self._entities]

    def to_frame(self) -> pd.DataFrame:
        """One row per entity: id, name, image, then the six categories in canonical order."""
        columns = ["id", "name", "image", *CATEGORIES]
        rows = [
            {"id": e.id, "name": e.name, "image": e.image, **e.powerstats.to_dict()}
            for e in self._entities
        ]
        return pd.DataFrame(rows, columns=columns)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog({len(self._entities)} entities)"
