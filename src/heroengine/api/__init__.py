"""HTTP boundary (FastAPI) over the catalog and comparator."""

from heroengine.api.app import CatalogProvider, create_app

__all__ = ["CatalogProvider", "create_app"]
