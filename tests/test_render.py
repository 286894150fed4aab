"""Boundary rendering: 1 / 2 / "tie" vocabulary and the comparison response shape."""

from conftest import make_entity
from heroengine.core.compare import Comparator, Winner, compare_entities
from heroengine.core.render import (
    comparison_to_dict,
    format_comparison_text,
    format_entity_markdown,
    render_winner,
)


def test_render_winner_vocabulary() -> None:
    assert render_winner(Winner.FIRST) == 1
    assert render_winner(Winner.SECOND) == 2
    assert render_winner(Winner.TIE) == "tie"


def test_comparison_to_dict_shape(catalog) -> None:
    out = comparison_to_dict(Comparator(catalog).compare(2, 3))
    assert set(out) == {"id1", "id2", "categories", "overall_winner"}
    assert out["id1"] == 2
    assert out["id2"] == 3
    assert out["overall_winner"] == 2
    assert out["categories"][0] == {
        "name": "intelligence",
        "winner": 1,
        "id1_value": 100,
        "id2_value": 90,
    }
    assert [c["winner"] for c in out["categories"][1:]] == [2, 2, 2, 2, 2]


def test_comparison_to_dict_tie(catalog) -> None:
    out = comparison_to_dict(Comparator(catalog).compare(1, 2))
    assert out["overall_winner"] == "tie"
    assert [c["winner"] for c in out["categories"]] == [2, 1, 2, 1, 2, 1]


def test_format_entity_markdown(catalog) -> None:
    card = format_entity_markdown(catalog.lookup(2))
    assert "• Name: Ant-Man" in card
    assert '<img src="https://example.test/2.jpg" alt="Ant-Man"/>' in card
    assert "  • Intelligence: 100" in card
    assert card.strip().endswith("• Combat: 32")


def test_format_comparison_text() -> None:
    a = make_entity(1, "Left", 90, 10, 50, 50, 50, 50)
    b = make_entity(2, "Right", 10, 90, 50, 50, 50, 40)
    text = format_comparison_text(compare_entities(a, b), "Left", "Right")
    assert text.splitlines()[0] == "Left (#1) vs Right (#2)"
    assert "Overall: Left (2-1, 3 tied)" in text
