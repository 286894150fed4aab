"""Hero catalog: typed entities, JSON loading and the in-memory accessor."""

from heroengine.data.catalog import Accessor, Catalog
from heroengine.data.entity import Entity, Statline
from heroengine.data.errors import AccessorFailure, InvalidRecordError
from heroengine.data.load import (
    build_catalog,
    load_catalog,
    read_catalog_json,
    validate_powerstats,
    validate_record,
)

__all__ = [
    "Accessor",
    "Catalog",
    "Entity",
    "Statline",
    "AccessorFailure",
    "InvalidRecordError",
    "build_catalog",
    "load_catalog",
    "read_catalog_json",
    "validate_powerstats",
    "validate_record",
]
