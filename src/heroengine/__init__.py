"""heroengine: read-only superhero catalog and pairwise powerstat comparison."""

__version__ = "1.0.0"
