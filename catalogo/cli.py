#!/usr/bin/env python3
"""
Catálogo SCIAN → BMX CLI — catalog conversion, one-shot search, and API server.

USAGE:
  python -m catalogo.cli convert                                # data/catalogo.csv → public/catalogo.json
  python -m catalogo.cli convert --csv export.csv --output out.json

  python -m catalogo.cli search "agricultura"                   # Grouped matches (first 200)
  python -m catalogo.cli search "soya" --max-results 500
  python -m catalogo.cli search "granos" --json granos.json --xlsx granos.xlsx

  python -m catalogo.cli serve                                  # Start API server
  python -m catalogo.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from catalogo.config import SOURCE_CSV, CATALOG_JSON, DISPLAY_CAP_OPTIONS, DEFAULT_DISPLAY_CAP
from catalogo.data.loader import CatalogLoadError, convert_csv_to_json
from catalogo.data.store import CatalogStore
from catalogo.search.pipeline import status_message


def cmd_convert(args) -> int:
    """Build catalogo.json from the source CSV. Non-zero exit on bad input."""
    csv_path = Path(args.csv)
    out_path = Path(args.output)
    try:
        count = convert_csv_to_json(csv_path, out_path)
    except CatalogLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"catalogo.json generado ({count} filas)")
    print(f"  {out_path}")
    return 0


def _print_result(result) -> None:
    if not result.term:
        print("\n  Ingresa una palabra clave para filtrar los resultados\n")
        return
    print(f"\n  {status_message(result)}\n")
    for g in result.groups:
        print(f"  {g.category}")
        print("  " + "-" * 68)
        for r in g.items:
            print(f"    {r.code:<14}{r.description}")
        print()


def cmd_search(args) -> int:
    """Search the catalog once and print grouped matches."""
    store = CatalogStore(Path(args.catalog)).load()
    result = store.search(args.query, args.max_results)
    _print_result(result)

    if args.json:
        path = Path(args.json)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
        print(f"  JSON saved to: {path}")
    if args.xlsx:
        from catalogo.reports.search_report import write_search_workbook
        path = write_search_workbook(result, args.xlsx)
        print(f"  Excel saved to: {path}")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Catálogo SCIAN → BMX on port {args.port}...")
    uvicorn.run("catalogo.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalogo",
        description="Catálogo SCIAN → BMX — activity-code lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # convert subcommand
    convert_parser = subparsers.add_parser("convert", help="Convert the source CSV to catalogo.json")
    convert_parser.add_argument("--csv", default=str(SOURCE_CSV), help=f"Source CSV (default {SOURCE_CSV})")
    convert_parser.add_argument("--output", default=str(CATALOG_JSON), help=f"Output JSON (default {CATALOG_JSON})")
    convert_parser.set_defaults(func=cmd_convert)

    # search subcommand
    search_parser = subparsers.add_parser("search", help="Search the catalog by keyword")
    search_parser.add_argument("query", help="Keyword matched against DescripcionCIAN")
    search_parser.add_argument("--max-results", type=int, choices=DISPLAY_CAP_OPTIONS,
                               default=DEFAULT_DISPLAY_CAP, help="Records to show")
    search_parser.add_argument("--catalog", default=str(CATALOG_JSON), help="catalogo.json to search")
    search_parser.add_argument("--json", help="Also write the result as JSON")
    search_parser.add_argument("--xlsx", help="Also write the result as an Excel sheet")
    search_parser.set_defaults(func=cmd_search)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
