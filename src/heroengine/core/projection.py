"""Single-entity reads: delegate to the accessor and turn a miss into NotFoundError."""

from typing import Any, List

from heroengine.core.compare import parse_identifier
from heroengine.core.errors import NotFoundError
from heroengine.data.catalog import Accessor, Catalog
from heroengine.data.entity import Entity, Statline


def get_entity(accessor: Accessor, entity_id: Any) -> Entity:
    """
    Entity for this id. Text ids match only their canonical form ("1", not "01" or "+1");
    anything else cannot match and is a miss too.
    """
    parsed = parse_identifier(entity_id)
    if isinstance(entity_id, str) and str(parsed) != entity_id:
        parsed = None
    entity = accessor.lookup(parsed) if parsed is not None else None
    if entity is None:
        raise NotFoundError()
    return entity


def get_statline(accessor: Accessor, entity_id: Any) -> Statline:
    """Statline alone, not wrapped in the entity."""
    return get_entity(accessor, entity_id).powerstats


def find_by_name(catalog: Catalog, name: str) -> Entity:
    entity = catalog.find_by_name(name)
    if entity is None:
        raise NotFoundError()
    return entity


def list_all(catalog: Catalog) -> List[Entity]:
    """Every entity in catalog order; an empty catalog gives an empty list."""
    return catalog.all()
