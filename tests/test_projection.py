"""Single-entity reads: delegation to the accessor, NotFoundError on a miss."""

import pytest

from heroengine.config import CATEGORIES
from heroengine.core.errors import NotFoundError
from heroengine.core.projection import find_by_name, get_entity, get_statline, list_all
from heroengine.data.catalog import Catalog


def test_get_entity(catalog) -> None:
    hero = get_entity(catalog, 1)
    assert hero.name == "A-Bomb"
    assert get_entity(catalog, "3").name == "Bane"


@pytest.mark.parametrize("hero_id", [9999, "9999", "abc", "", None, "01", "+1", " 1"])
def test_get_entity_miss(catalog, hero_id) -> None:
    with pytest.raises(NotFoundError, match="Superhero not found"):
        get_entity(catalog, hero_id)


# --- Scenario 6: statline alone ---
def test_get_statline_has_exactly_six_keys(catalog) -> None:
    stats = get_statline(catalog, 2).to_dict()
    assert list(stats) == list(CATEGORIES)
    assert stats == {
        "intelligence": 100,
        "strength": 18,
        "speed": 23,
        "durability": 28,
        "power": 32,
        "combat": 32,
    }
    assert "id" not in stats and "name" not in stats


def test_get_statline_miss(catalog) -> None:
    with pytest.raises(NotFoundError):
        get_statline(catalog, "xyz")


def test_get_entity_canonical_text_and_int_ids(catalog) -> None:
    assert get_entity(catalog, "1").id == 1
    assert get_entity(catalog, 1).id == 1
    with pytest.raises(NotFoundError):
        get_statline(catalog, "01")


def test_find_by_name_case_insensitive(catalog) -> None:
    assert find_by_name(catalog, "ant-man").id == 2
    assert find_by_name(catalog, "  BANE ").id == 3
    with pytest.raises(NotFoundError):
        find_by_name(catalog, "Nobody")
    with pytest.raises(NotFoundError):
        find_by_name(catalog, "")


def test_list_all_keeps_catalog_order(catalog, heroes) -> None:
    assert list_all(catalog) == heroes


def test_list_all_empty_catalog() -> None:
    assert list_all(Catalog()) == []
