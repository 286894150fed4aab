"""
Boundary rendering of core results to plain JSON-ready structures.

Winner vocabulary at the boundary: 1 for FIRST, 2 for SECOND, "tie" for TIE.
"""

from typing import Any, Dict, Union

from heroengine.core.compare import CategoryResult, ComparisonResult, Winner
from heroengine.data.entity import Entity, Statline

WINNER_LABELS: Dict[Winner, Union[int, str]] = {
    Winner.FIRST: 1,
    Winner.SECOND: 2,
    Winner.TIE: "tie",
}


def render_winner(winner: Winner) -> Union[int, str]:
    return WINNER_LABELS[winner]


def category_to_dict(category: CategoryResult) -> Dict[str, Any]:
    return {
        "name": category.name,
        "winner": render_winner(category.winner),
        "id1_value": category.value_a,
        "id2_value": category.value_b,
    }


def comparison_to_dict(result: ComparisonResult) -> Dict[str, Any]:
    """{id1, id2, categories[6], overall_winner}; categories keep canonical order."""
    return {
        "id1": result.id_a,
        "id2": result.id_b,
        "categories": [category_to_dict(c) for c in result.categories],
        "overall_winner": render_winner(result.overall_winner),
    }


def entity_to_dict(entity: Entity) -> Dict[str, Any]:
    return entity.to_dict()


def statline_to_dict(statline: Statline) -> Dict[str, int]:
    return statline.to_dict()


def format_entity_markdown(entity: Entity) -> str:
    """Markdown card: name, image tag, then one bullet per powerstat."""
    lines = [
        f"Here is the data for {entity.name}:",
        "",
        f"• Name: {entity.name}",
        f'• Image: <img src="{entity.image}" alt="{entity.name}"/>',
        "• Powerstats:",
    ]
    for category, value in entity.powerstats.items():
        lines.append(f"  • {category.capitalize()}: {value}")
    return "\n".join(lines)


def format_comparison_text(result: ComparisonResult, name_a: str, name_b: str) -> str:
    """Plain-text table for the CLI: one row per category, then the overall line."""
    labels = {Winner.FIRST: name_a, Winner.SECOND: name_b, Winner.TIE: "tie"}
    width = max(len(c.name) for c in result.categories)
    rows = [f"{name_a} (#{result.id_a}) vs {name_b} (#{result.id_b})"]
    for c in result.categories:
        rows.append(f"  {c.name:<{width}}  {c.value_a:>3}  {c.value_b:>3}  -> {labels[c.winner]}")
    rows.append(
        f"Overall: {labels[result.overall_winner]} "
        f"({result.wins_a}-{result.wins_b}, {result.ties} tied)"
    )
    return "\n".join(rows)
