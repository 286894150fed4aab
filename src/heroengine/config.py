"""Configuration with defaults for heroengine."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional, Tuple

# Canonical display and comparison order.
CATEGORIES: Tuple[str, ...] = (
    "intelligence",
    "strength",
    "speed",
    "durability",
    "power",
    "combat",
)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "superheroes.json"


@dataclass(frozen=True)
class Config:
    """Default config: catalog location, stat bounds, server and logging settings."""

    # Data
    data_path: Path = DEFAULT_DATA_PATH
    categories: Tuple[str, ...] = CATEGORIES
    stat_min: int = 0
    stat_max: int = 100

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    log_level: str = "INFO"


# Singleton default config; override via env or explicit args in APIs
DEFAULT_CONFIG = Config()


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"Port must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def config_from_env(environ: Optional[Mapping[str, str]] = None, base: Optional[Config] = None) -> Config:
    """
    Build a Config from environment variables on top of `base` (DEFAULT_CONFIG).

    HEROENGINE_DATA: catalog JSON path.
    HEROENGINE_HOST: bind host.
    TEST_PORT, then PORT: bind port (first one set wins).
    HEROENGINE_LOG_LEVEL: logging level name.
    """
    env = os.environ if environ is None else environ
    cfg = base or DEFAULT_CONFIG
    overrides = {}
    if env.get("HEROENGINE_DATA"):
        overrides["data_path"] = Path(env["HEROENGINE_DATA"])
    if env.get("HEROENGINE_HOST"):
        overrides["host"] = env["HEROENGINE_HOST"]
    port = env.get("TEST_PORT") or env.get("PORT")
    if port:
        overrides["port"] = _parse_port(port)
    if env.get("HEROENGINE_LOG_LEVEL"):
        overrides["log_level"] = env["HEROENGINE_LOG_LEVEL"].upper()
    return replace(cfg, **overrides) if overrides else cfg
