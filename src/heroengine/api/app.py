"""
HTTP boundary for the hero catalog and comparator.

Routes:
  GET /                                   welcome text
  GET /health                             catalog readiness
  GET /api/superheroes                    all heroes, catalog order
  GET /api/superheroes/compare?id1=&id2=  category-by-category comparison
  GET /api/superheroes/search?name=       hero by name (case-insensitive)
  GET /api/superheroes/{id}               one hero
  GET /api/superheroes/{id}/powerstats    one hero's powerstats only

Status mapping: ValidationError -> 400, NotFoundError -> 404, AccessorFailure -> 503.
"""

import logging
import time
from functools import partial
from typing import Callable, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from heroengine.config import Config, DEFAULT_CONFIG
from heroengine.core.compare import Comparator, parse_identifiers
from heroengine.core.errors import NOT_FOUND_MESSAGE, NotFoundError, ValidationError
from heroengine.core.projection import find_by_name, get_entity, get_statline, list_all
from heroengine.core.render import comparison_to_dict, entity_to_dict, statline_to_dict
from heroengine.data.catalog import Catalog
from heroengine.data.errors import AccessorFailure
from heroengine.data.load import load_catalog

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Superhero data unavailable"


class CatalogProvider:
    """
    Hands the catalog to request handlers.

    Either wraps a catalog given up front, or loads one on first use. A failed load is not
    remembered, so the next request tries again; the failure itself propagates as AccessorFailure.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        loader: Optional[Callable[[], Catalog]] = None,
    ) -> None:
        self._catalog = catalog
        self._loader = loader

    def __call__(self) -> Catalog:
        if self._catalog is None:
            if self._loader is None:
                raise AccessorFailure("No catalog or loader configured")
            self._catalog = self._loader()
        return self._catalog


def _not_found_text() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)


def build_router(provider: CatalogProvider) -> APIRouter:
    router = APIRouter(tags=["Superheroes"])

    @router.get("/superheroes")
    def all_superheroes(catalog: Catalog = Depends(provider)):
        return [entity_to_dict(e) for e in list_all(catalog)]

    # Declared before /superheroes/{hero_id} so "compare" and "search" are not read as ids.
    @router.get("/superheroes/compare")
    def compare_superheroes(
        id1: Optional[str] = None,
        id2: Optional[str] = None,
    ):
        # Ids are checked before the catalog is touched, so bad input is a 400 even when data is down.
        try:
            parse_identifiers(id1, id2)
        except ValidationError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        try:
            result = Comparator(provider()).compare(id1, id2)
        except NotFoundError as e:
            logger.debug("Compare miss for id1=%r id2=%r", id1, id2)
            return JSONResponse(status_code=404, content={"error": str(e)})
        return comparison_to_dict(result)

    @router.get("/superheroes/search")
    def search_superhero(name: str = "", catalog: Catalog = Depends(provider)):
        try:
            return entity_to_dict(find_by_name(catalog, name))
        except NotFoundError:
            return _not_found_text()

    @router.get("/superheroes/{hero_id}")
    def superhero(hero_id: str, catalog: Catalog = Depends(provider)):
        try:
            return entity_to_dict(get_entity(catalog, hero_id))
        except NotFoundError:
            logger.debug("No superhero with id %r", hero_id)
            return _not_found_text()

    @router.get("/superheroes/{hero_id}/powerstats")
    def superhero_powerstats(hero_id: str, catalog: Catalog = Depends(provider)):
        try:
            return statline_to_dict(get_statline(catalog, hero_id))
        except NotFoundError:
            logger.debug("No superhero with id %r", hero_id)
            return _not_found_text()

    return router


def create_app(
    catalog: Optional[Catalog] = None,
    config: Optional[Config] = None,
    loader: Optional[Callable[[], Catalog]] = None,
) -> FastAPI:
    """
    Build the FastAPI app. Pass `catalog` to serve a fixed in-memory catalog (tests);
    otherwise the catalog is loaded from `loader` or, by default, config.data_path.
    """
    cfg = config or DEFAULT_CONFIG
    if catalog is None and loader is None:
        loader = partial(load_catalog, cfg.data_path, cfg)
    provider = CatalogProvider(catalog=catalog, loader=loader)

    app = FastAPI(title="Superheroes API", version="1.0.0")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.3fs)",
            request.method,
            request.url.path,
            response.status_code,
            time.perf_counter() - start,
        )
        return response

    @app.exception_handler(AccessorFailure)
    async def accessor_failure_handler(request: Request, exc: AccessorFailure):
        logger.error("Catalog unavailable while serving %s: %s", request.url.path, exc)
        return JSONResponse(status_code=503, content={"error": UNAVAILABLE_MESSAGE})

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Save the World!"

    @app.get("/health")
    def health(catalog: Catalog = Depends(provider)):
        return {"status": "ok", "heroes": len(catalog)}

    app.include_router(build_router(provider), prefix="/api")
    app.state.catalog_provider = provider
    return app
