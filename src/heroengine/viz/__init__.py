"""Charts for hero comparisons."""

from heroengine.viz.compare_chart import render_comparison

__all__ = ["render_comparison"]
