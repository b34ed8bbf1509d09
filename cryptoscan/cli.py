"""
cryptoscan command line — list rules, analyze a package dumped as JSON.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from cryptoscan.config import settings
from cryptoscan.core.crypto_rules import build_catalog
from cryptoscan.core.scan_engine import ScanEngine
from cryptoscan.models.project_models import Package

logger = logging.getLogger("cryptoscan.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptoscan",
        description="Detect weak cryptographic cipher usage in parsed syntax trees",
    )
    parser.add_argument(
        "--rule-id-offset",
        type=int,
        default=None,
        help="Base for rule ids (defaults to CRYPTOSCAN_RULE_ID_OFFSET)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("rules", help="List available rules, one JSON object per line")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a package JSON file")
    analyze_parser.add_argument("path", help="Path to a JSON-serialized package")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    offset = settings.rule_id_offset if args.rule_id_offset is None else args.rule_id_offset
    try:
        catalog = build_catalog(offset)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "rules":
        for rule in catalog:
            print(rule)
        return 0

    if args.command == "analyze":
        path = Path(args.path)
        try:
            package = Package.model_validate_json(path.read_text(encoding="utf-8"))
        except OSError as exc:
            logger.error(f"Cannot read {path}: {exc}")
            return 2
        except ValidationError as exc:
            logger.error(f"{path} is not a valid package: {exc}")
            return 2

        result = ScanEngine(catalog=catalog).run(package)
        print(result.model_dump_json(indent=2))
        return 1 if result.issues else 0

    parser.error(f"Unsupported command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
