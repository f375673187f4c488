"""CLI entrypoint for prizepicks-ingest."""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from prizepicks_ingest.errors import PrizePicksError
from prizepicks_ingest.pipeline import fetch_all_projections, hydrate
from prizepicks_ingest.settings import Settings


def _log_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def _cmd_props(args: argparse.Namespace) -> int:
    props = hydrate(Settings(), log=_log_stderr)
    rows = [prop.as_row() for prop in props]
    if args.jsonl:
        for row in rows:
            print(json.dumps(row, sort_keys=True))
    else:
        print(json.dumps(rows, indent=2, sort_keys=True))
    return 0


def _cmd_snapshot(args: argparse.Namespace) -> int:
    snapshot = fetch_all_projections(Settings(), log=_log_stderr)
    summary = {"projections": len(snapshot.projections), **snapshot.graph.counts()}
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prizepicks-ingest")
    subparsers = parser.add_subparsers(dest="command")

    props = subparsers.add_parser("props", help="Print normalized, tier-deduped props as JSON.")
    props.add_argument("--jsonl", action="store_true", help="Emit one JSON object per line.")
    props.set_defaults(func=_cmd_props)

    snapshot = subparsers.add_parser("snapshot", help="Print resource counts for one snapshot.")
    snapshot.set_defaults(func=_cmd_snapshot)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0
    try:
        return int(func(args))
    except (PrizePicksError, ValidationError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
