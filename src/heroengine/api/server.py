"""Run the API with uvicorn."""

import logging
from typing import Optional

import uvicorn

from heroengine.api.app import create_app
from heroengine.config import Config, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def serve(config: Optional[Config] = None) -> None:
    """Load the catalog eagerly so a bad data file fails at startup, then serve until interrupted."""
    from heroengine.data.load import load_catalog

    cfg = config or DEFAULT_CONFIG
    catalog = load_catalog(cfg.data_path, cfg)
    app = create_app(catalog=catalog, config=cfg)
    logger.info("Server running on http://%s:%d", cfg.host, cfg.port)
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())
