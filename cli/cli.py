#!/usr/bin/env python3
"""Command-line interface for resolving legacy crypto configuration flags."""

import argparse
import json
import sys
import traceback
from pathlib import Path
import logging
from typing import Dict, List, Mapping, Optional

# Ensure project root is on the import path when executing from the CLI folder
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from flags import ConfigurationError, LegacyCryptoRegistry
from logic import ClosureResolver, LEGACY_CRYPTO_RULES, Resolution
from version import __version_display__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve configuration flags, auto-enabling every implied flag.")
    parser.add_argument(
        "flags",
        nargs="*",
        metavar="FLAG",
        help="Flags to enable, e.g. MBEDTLS_ECP_C MBEDTLS_PK_PARSE_C.")
    parser.add_argument(
        "--flags-file",
        help="JSON file mapping flag names to true/false. "
             "Flags given on the command line are enabled on top of it.")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print NAME=0|1 for every known flag instead of only the active ones.")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the rule that enabled each derived flag.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the known flags by category and exit.")
    parser.add_argument( '-log',
        '--loglevel',
        default='warning',
        help='Provide logging level. Example --loglevel debug, default=warning' )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version_display__}")

    return parser


def load_base_flags(flag_names: List[str], flags_file: Optional[str]) -> Dict[str, bool]:
    base: Dict[str, bool] = {}
    if flags_file:
        path = Path(flags_file)
        try:
            data = json.loads(path.read_text())
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Flags file not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Flags file {path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Flags file {path} must contain a JSON object")
        base.update(data)

    for name in flag_names:
        base[name.strip()] = True
    return base


def format_flags(flags: Mapping[str, bool], show_all: bool) -> List[str]:
    if show_all:
        return [f"{key}={int(value)}" for key, value in sorted(flags.items())]
    return [key for key, value in sorted(flags.items()) if value]


def format_explanation(resolution: Resolution) -> List[str]:
    lines = []
    for key, rule in resolution.activations:
        lines.append(f"{key}: {rule.predicate.describe()}")
        if rule.reason:
            lines.append(f"    {rule.reason}")
    if not lines:
        lines.append("No flags were derived.")
    return lines


def format_vocabulary() -> List[str]:
    lines = []
    for category, definitions in sorted(LegacyCryptoRegistry.get_flags_by_category().items()):
        lines.append(f"{category.display_name}:")
        for definition in definitions:
            lines.append(f"  {definition.key:<50} {definition.display_name}")
    return lines


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=args.loglevel.upper(),
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    except ValueError:
        parser.error(f"Unknown logging level: {args.loglevel}")

    if args.list:
        print("\n".join(format_vocabulary()))
        return 0

    try:
        base = load_base_flags(args.flags, args.flags_file)
        resolution = ClosureResolver(LEGACY_CRYPTO_RULES).explain(base)
    except (ConfigurationError, TypeError, ValueError, FileNotFoundError) as exc:
        parser.error(str(exc))
    except Exception as exc:  # pragma: no cover - defensive catch-all
        print(f"Error: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1

    print("\n".join(format_flags(resolution.flags, args.all)))
    if args.explain:
        print()
        print("\n".join(format_explanation(resolution)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
