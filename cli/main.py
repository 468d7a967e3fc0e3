from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dosname.config import DEFAULT_PROFILE, ConfigError, get_profile, load_profiles
from dosname.listing import analyze_names, archive_paths, find_binary
from dosname.reporting import build_synthetic_report, build_technical_report
from dosname.version import get_app_version

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dosname", description="Convert archive filenames to MS-DOS 8.3 names")
    parser.add_argument("names", nargs="*", help="Filenames to convert")
    parser.add_argument("--listing", help="Archive content listing, one name per line ('-' for stdin)")
    parser.add_argument(
        "--find-binary",
        metavar="ARCHIVE",
        help="Print the program to launch from ARCHIVE, using --listing as its content",
    )
    parser.add_argument("--config", type=Path, help="Custom YAML configuration")
    parser.add_argument("--profile", default=DEFAULT_PROFILE, help=f"Rule profile (default: {DEFAULT_PROFILE})")
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--report", action="store_true", help="Print the summary report")
    parser.add_argument("--technical", action="store_true", help="Print the technical report")
    parser.add_argument("--strict", action="store_true", help="Exit code 2 when warnings are present")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")
    return parser


def _read_listing(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        profile = get_profile(load_profiles(args.config), args.profile)
    except ConfigError as exc:
        print(f"dosname: {exc}", file=sys.stderr)
        return 3

    listing = ""
    if args.listing:
        try:
            listing = _read_listing(args.listing)
        except OSError as exc:
            print(f"dosname: cannot read listing {args.listing}: {exc.strerror or exc}", file=sys.stderr)
            return 4

    if args.find_binary:
        program = find_binary(args.find_binary, listing)
        if program:
            print(program)
        return 0 if program else 1

    names = list(args.names)
    names.extend(archive_paths(listing))
    if not names:
        parser.error("no filenames given")

    summary = analyze_names(names, profile)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
    elif args.report:
        print(build_synthetic_report(summary))
    else:
        for item in summary.names:
            print(item.dos_name)

    if args.technical and not args.json:
        print()
        print(build_technical_report(summary))

    if summary.has_errors:
        return 1
    if args.strict and summary.has_warnings:
        logger.warning("warnings present with --strict")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
