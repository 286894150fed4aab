"""
Slide-ready hero comparison: paired horizontal bars per powerstat, category winners marked.
"""

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

from heroengine.core.compare import ComparisonResult, Winner

COLOR_A = "#1a5276"
COLOR_B = "#922b21"
COLOR_TIE = "#7f8c8d"


def render_comparison(
    result: ComparisonResult,
    name_a: str,
    name_b: str,
    outpath: str = "outputs/compare.png",
    subtitle: Optional[str] = None,
) -> str:
    """
    Render a PNG comparing two heroes across the six categories and return its absolute path.

    Each category gets two bars (hero A on top); the winner's label is bold, ties are grey.
    """
    path = Path(outpath)
    path.parent.mkdir(parents=True, exist_ok=True)

    names = [c.name.capitalize() for c in result.categories]
    n = len(names)
    fig, ax = plt.subplots(figsize=(10, 6), dpi=150)
    fig.patch.set_facecolor("white")

    height = 0.38
    ys = list(range(n))
    ax.barh([y - height / 2 for y in ys], [c.value_a for c in result.categories], height=height, color=COLOR_A, label=name_a)
    ax.barh([y + height / 2 for y in ys], [c.value_b for c in result.categories], height=height, color=COLOR_B, label=name_b)
    ax.set_yticks(ys)
    ax.set_yticklabels(names, fontsize=12)
    ax.invert_yaxis()
    ax.set_xlim(0, 110)
    ax.set_xlabel("Powerstat", fontsize=11)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    for y, c in zip(ys, result.categories):
        if c.winner is Winner.TIE:
            ax.text(102, y, "tie", va="center", fontsize=10, color=COLOR_TIE)
            continue
        label, color = (name_a, COLOR_A) if c.winner is Winner.FIRST else (name_b, COLOR_B)
        ax.text(102, y, label, va="center", fontsize=10, fontweight="bold", color=color)

    if result.overall_winner is Winner.TIE:
        headline = f"{name_a} vs {name_b}: tie ({result.wins_a}-{result.wins_b})"
    else:
        overall = name_a if result.overall_winner is Winner.FIRST else name_b
        headline = f"{name_a} vs {name_b}: {overall} wins ({result.wins_a}-{result.wins_b})"
    fig.suptitle(headline, fontsize=18, fontweight="bold")
    if subtitle:
        ax.set_title(subtitle, fontsize=12)
    ax.legend(loc="lower right", fontsize=9)

    try:
        fig.savefig(path, dpi=150, bbox_inches="tight", facecolor="white")
    finally:
        plt.close(fig)
    return str(path.resolve())
