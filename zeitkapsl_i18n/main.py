from __future__ import annotations

import argparse
import asyncio
import re
import sys
from pathlib import Path
from typing import Any, List, Optional

from .core.config import settings
from .core.errors import I18NError
from .core.i18n import I18N, resolve
from .core.logging_config import get_logger, setup_logging
from .core.validation import check_table, has_errors
from .core.values import Template
from .features.auto_translate import draft_missing, write_draft
from .infra.export import DEFAULT_CSV_FILE, export_csv, export_web_json
from .infra.importer import import_csv, write_import
from .infra.regions import add_region
from .infra.stats import coverage, format_coverage

log = get_logger(__name__)

_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")


def parse_arg(raw: str) -> Any:
    if _NUMBER_RE.match(raw):
        return float(raw) if "." in raw else int(raw)
    return raw


def lookup_arg(locale: str, key: str, raw: str) -> Any:
    """Counts for plural templates are numbers, every other argument stays text."""
    value = I18N.table(I18N.pick_locale(locale)).get(key)
    if isinstance(value, Template) and value.is_plural:
        return parse_arg(raw)
    return raw


def cmd_lookup(args: argparse.Namespace) -> int:
    if args.arg is None:
        result = resolve(args.locale, args.key)
    else:
        result = resolve(args.locale, args.key, lookup_arg(args.locale, args.key, args.arg))
    if isinstance(result, tuple):
        print("\n".join(result))
    else:
        print(result)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    issues = check_table()
    for issue in issues:
        if args.quiet and issue.level == "info":
            continue
        print(issue)
    errors = sum(1 for issue in issues if issue.level == "error")
    warnings = sum(1 for issue in issues if issue.level == "warning")
    print(f"{errors} errors, {warnings} warnings")
    return 1 if has_errors(issues) else 0


def cmd_stats(args: argparse.Namespace) -> int:
    print(format_coverage(coverage()))
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    directory = Path(args.dir)
    if args.platform == "json":
        for path in export_web_json(directory):
            print(path)
    else:
        print(export_csv(directory / DEFAULT_CSV_FILE))
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    source = Path(args.file) if args.file else Path(args.dir) / DEFAULT_CSV_FILE
    for path in write_import(import_csv(source), args.out):
        print(path)
    return 0


def cmd_add_region(args: argparse.Namespace) -> int:
    directory = args.dir or args.locale_dir or settings.LOCALE_DIR or "locales"
    for path in add_region(args.region, directory, base=args.base):
        print(path)
    return 0


def cmd_auto_translate(args: argparse.Namespace) -> int:
    drafts = asyncio.run(draft_missing(args.locale))
    out = args.out or f"{args.locale}.draft.json"
    print(write_draft(drafts, out))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zeitkapsl-i18n", description="zeitkapsl translation table tools")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", action="store_true", help="also log to logs/")
    parser.add_argument("--locale-dir", default=None, help="read locale JSON files from this directory")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("lookup", help="resolve a key for a locale")
    p.add_argument("locale")
    p.add_argument("key")
    p.add_argument("--arg", default=None, help="argument for template keys")
    p.set_defaults(func=cmd_lookup)

    p = sub.add_parser("check", help="validate the translation table")
    p.add_argument("--quiet", action="store_true", help="hide coverage notes")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("stats", help="show translation coverage")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("export", help="export to another format")
    p.add_argument("--platform", choices=("json", "csv"), required=True)
    p.add_argument("--dir", default=".", help="directory to export to")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("import", help="read a translation CSV back into locale JSON files")
    p.add_argument("--platform", choices=("csv",), default="csv")
    p.add_argument("--dir", default=".", help="directory holding translations.csv")
    p.add_argument("--file", default=None, help="CSV file to read (overrides --dir)")
    p.add_argument("--out", default="imported", help="directory for the imported JSON files")
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("add-region", help="scaffold a regional overlay locale")
    p.add_argument("--region", required=True, help="region code, e.g. de-CH")
    p.add_argument("--base", default=None, help="locale the region extends (default: first locale of its language)")
    p.add_argument("--dir", default=None, help="locale directory to write to (default: --locale-dir, LOCALE_DIR or ./locales)")
    p.set_defaults(func=cmd_add_region)

    p = sub.add_parser("auto-translate", help="draft missing strings with an OpenAI model")
    p.add_argument("--locale", required=True)
    p.add_argument("--out", default=None, help="draft file (default: <locale>.draft.json)")
    p.set_defaults(func=cmd_auto_translate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_file=args.log_file, debug=args.debug)
    try:
        I18N.load_locales(args.locale_dir, force=args.locale_dir is not None)
        return args.func(args)
    except I18NError as e:
        log.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
