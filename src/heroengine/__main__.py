"""CLI entrypoint: python -m heroengine [list|show|stats|compare|chart|serve|app]."""

import json
import logging
import sys
from pathlib import Path

# Ensure src is on path when run as python -m heroengine
if __name__ == "__main__":
    src = Path(__file__).resolve().parent.parent
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

from heroengine.config import Config, config_from_env
from heroengine.core.compare import Comparator
from heroengine.core.errors import NotFoundError, ValidationError
from heroengine.core.projection import find_by_name, get_entity, get_statline
from heroengine.core.render import (
    comparison_to_dict,
    format_comparison_text,
    format_entity_markdown,
)
from heroengine.data.errors import AccessorFailure
from heroengine.data.load import load_catalog

logger = logging.getLogger("heroengine")


def _list(cfg: Config) -> None:
    frame = load_catalog(cfg.data_path, cfg).to_frame()
    if frame.empty:
        print("No heroes in catalog.")
        return
    print(frame.drop(columns=["image"]).to_string(index=False))


def _show(cfg: Config, hero_id: str | None, name: str | None, markdown: bool) -> None:
    catalog = load_catalog(cfg.data_path, cfg)
    entity = find_by_name(catalog, name) if name else get_entity(catalog, hero_id)
    if markdown:
        print(format_entity_markdown(entity))
    else:
        print(json.dumps(entity.to_dict(), indent=2))


def _stats(cfg: Config, hero_id: str) -> None:
    catalog = load_catalog(cfg.data_path, cfg)
    print(json.dumps(get_statline(catalog, hero_id).to_dict(), indent=2))


def _compare(cfg: Config, id1: str, id2: str, as_json: bool) -> None:
    catalog = load_catalog(cfg.data_path, cfg)
    result = Comparator(catalog).compare(id1, id2)
    if as_json:
        print(json.dumps(comparison_to_dict(result), indent=2))
        return
    a = catalog.lookup(result.id_a)
    b = catalog.lookup(result.id_b)
    print(format_comparison_text(result, a.name, b.name))


def _chart(cfg: Config, id1: str, id2: str, outpath: str) -> None:
    from heroengine.viz.compare_chart import render_comparison

    catalog = load_catalog(cfg.data_path, cfg)
    result = Comparator(catalog).compare(id1, id2)
    a = catalog.lookup(result.id_a)
    b = catalog.lookup(result.id_b)
    print(render_comparison(result, a.name, b.name, outpath=outpath))


def _serve(cfg: Config) -> None:
    from heroengine.api.server import serve

    serve(cfg)


def _app() -> None:
    import subprocess
    app_path = Path(__file__).resolve().parent / "app" / "streamlit_app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)], check=True)


def main(argv: list[str] | None = None) -> int:
    import argparse
    from dataclasses import replace

    p = argparse.ArgumentParser(prog="heroengine", description="Superhero catalog and comparison")
    p.add_argument("--data", help="Catalog JSON path (default: HEROENGINE_DATA or packaged data)")
    p.add_argument("--log-level", help="Logging level (default: HEROENGINE_LOG_LEVEL or INFO)")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("list", help="Table of all heroes")
    sp = sub.add_parser("show", help="One hero by id or name")
    sp.add_argument("id", nargs="?")
    sp.add_argument("--name")
    sp.add_argument("--markdown", action="store_true", help="Render as a Markdown card")
    sp = sub.add_parser("stats", help="Powerstats for one hero")
    sp.add_argument("id")
    sp = sub.add_parser("compare", help="Compare two heroes category by category")
    sp.add_argument("id1")
    sp.add_argument("id2")
    sp.add_argument("--json", action="store_true", help="Print the API response shape")
    sp = sub.add_parser("chart", help="Render a comparison PNG")
    sp.add_argument("id1")
    sp.add_argument("id2")
    sp.add_argument("--out", default="outputs/compare.png")
    sp = sub.add_parser("serve", help="Run the HTTP API")
    sp.add_argument("--host")
    sp.add_argument("--port", type=int)
    sub.add_parser("app", help="Run Streamlit app")
    args = p.parse_args(argv)

    cfg = config_from_env()
    if args.data:
        cfg = replace(cfg, data_path=Path(args.data))
    if args.log_level:
        cfg = replace(cfg, log_level=args.log_level.upper())
    if args.cmd == "serve":
        if args.host:
            cfg = replace(cfg, host=args.host)
        if args.port:
            cfg = replace(cfg, port=args.port)
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.cmd == "show" and not (args.id or args.name):
        p.error("show requires an id or --name")

    try:
        if args.cmd == "list":
            _list(cfg)
        elif args.cmd == "show":
            _show(cfg, args.id, args.name, args.markdown)
        elif args.cmd == "stats":
            _stats(cfg, args.id)
        elif args.cmd == "compare":
            _compare(cfg, args.id1, args.id2, args.json)
        elif args.cmd == "chart":
            _chart(cfg, args.id1, args.id2, args.out)
        elif args.cmd == "serve":
            _serve(cfg)
        else:
            _app()
    except (ValidationError, NotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except AccessorFailure as e:
        logger.error("Superhero data unavailable: %s", e)
        print(f"Error: superhero data unavailable ({e})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
