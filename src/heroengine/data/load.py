"""
Load the hero catalog from its JSON source.

The source is one array of records {id, name, image, powerstats{six categories}}. Every record is
validated here, once, so the comparator can assume well-formed entities. If the file cannot be
read or a record is malformed we fail fast with AccessorFailure / InvalidRecordError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from heroengine.config import Config, DEFAULT_CONFIG
from heroengine.data.catalog import Catalog
from heroengine.data.entity import Entity, Statline
from heroengine.data.errors import AccessorFailure, InvalidRecordError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["id", "name", "image", "powerstats"]


def _is_int(value: Any) -> bool:
    # bool is an int subclass; a JSON `true` is not a valid stat or id
    return isinstance(value, int) and not isinstance(value, bool)


def read_catalog_json(path: Union[str, Path]) -> List[Any]:
    """Read and parse the catalog file. Raises AccessorFailure if unreadable or not a JSON array."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise AccessorFailure(f"Cannot read catalog at {p}: {e}", path=str(p)) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise AccessorFailure(f"Catalog at {p} is not valid JSON: {e}", path=str(p)) from e
    if not isinstance(data, list):
        raise AccessorFailure(
            f"Catalog at {p} must be a JSON array, got {type(data).__name__}", path=str(p)
        )
    return data


def validate_powerstats(
    powerstats: Any,
    index: int,
    config: Config = DEFAULT_CONFIG,
) -> Statline:
    """All six categories must be present as ints within [stat_min, stat_max]. Extra keys are dropped."""
    if not isinstance(powerstats, dict):
        raise InvalidRecordError(
            f"Record {index}: powerstats must be an object.", index=index, fields=["powerstats"]
        )
    missing = [c for c in config.categories if c not in powerstats]
    if missing:
        raise InvalidRecordError(
            f"Record {index}: powerstats requires {list(config.categories)}. Missing: {missing}.",
            index=index,
            fields=missing,
        )
    bad = [
        c for c in config.categories
        if not _is_int(powerstats[c]) or not config.stat_min <= powerstats[c] <= config.stat_max
    ]
    if bad:
        raise InvalidRecordError(
            f"Record {index}: powerstats must be integers in "
            f"[{config.stat_min}, {config.stat_max}]. Invalid: {bad}.",
            index=index,
            fields=bad,
        )
    return Statline(**{c: powerstats[c] for c in config.categories})


def validate_record(record: Any, index: int, config: Config = DEFAULT_CONFIG) -> Entity:
    """Turn one raw record into an Entity or raise InvalidRecordError naming the offending fields."""
    if not isinstance(record, dict):
        raise InvalidRecordError(f"Record {index}: must be an object.", index=index)
    missing = [f for f in REQUIRED_FIELDS if f not in record]
    if missing:
        raise InvalidRecordError(
            f"Record {index}: requires {REQUIRED_FIELDS}. Missing: {missing}.",
            index=index,
            fields=missing,
        )
    if not _is_int(record["id"]):
        raise InvalidRecordError(f"Record {index}: id must be an integer.", index=index, fields=["id"])
    name = record["name"]
    if not isinstance(name, str) or not name.strip():
        raise InvalidRecordError(
            f"Record {index}: name must be a non-empty string.", index=index, fields=["name"]
        )
    if not isinstance(record["image"], str):
        raise InvalidRecordError(f"Record {index}: image must be a string.", index=index, fields=["image"])
    return Entity(
        id=record["id"],
        name=name,
        image=record["image"],
        powerstats=validate_powerstats(record["powerstats"], index, config),
    )


def build_catalog(records: List[Any], config: Config = DEFAULT_CONFIG) -> Catalog:
    """Validate every record and build a Catalog, rejecting duplicate ids."""
    entities: List[Entity] = []
    seen: Dict[int, int] = {}
    for i, record in enumerate(records):
        entity = validate_record(record, i, config)
        if entity.id in seen:
            raise InvalidRecordError(
                f"Record {i}: duplicate id {entity.id} (first seen at record {seen[entity.id]}).",
                index=i,
                fields=["id"],
            )
        seen[entity.id] = i
        entities.append(entity)
    return Catalog(entities)


def load_catalog(
    path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None,
) -> Catalog:
    """
    Read, validate and index the catalog at `path` (default: config.data_path).
    Raises AccessorFailure (or its subclass InvalidRecordError) if the data is unusable.
    """
    cfg = config or DEFAULT_CONFIG
    p = Path(path) if path is not None else cfg.data_path
    logger.info("Loading hero catalog from %s", p)
    records = read_catalog_json(p)
    try:
        catalog = build_catalog(records, cfg)
    except InvalidRecordError as e:
        e.path = str(p)
        raise
    logger.info("Loaded %d heroes from %s", len(catalog), p)
    return catalog
