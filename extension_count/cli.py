#!/usr/bin/env python3
"""
extension-count command line.
Scans one or more paths and prints per-extension file counts as a table or JSON.
"""

import argparse
import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .aggregate import aggregate, aggregate_each
from .config import (
    coerce_bool,
    coerce_choice,
    coerce_int,
    find_config,
    load_config,
    normalize_patterns,
)
from .errors import ExtensionCountError
from .labels import DEFAULT_LABELS_FILE, load_labels
from .render import (
    DEFAULT_LIMIT,
    DEFAULT_WIDTH,
    SORT_KEYS,
    format_json,
    format_text,
    write_output,
)
from .report import Report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extension-count",
        description="Count file extensions in one or more directories",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Folders or files to scan",
    )
    parser.add_argument(
        "--ci",
        action="store_true",
        default=None,
        help="Disable ANSI colors",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of a table",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help=f"Limit the number of files listed per extension, 0 = unlimited (default: {DEFAULT_LIMIT})",
    )
    parser.add_argument(
        "--sort",
        choices=SORT_KEYS,
        default=None,
        help="Sort rows by count, extension, or file path count (default: count)",
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        default=None,
        help="Reverse row order",
    )
    parser.add_argument(
        "--labels",
        default=None,
        help=f"Label file mapping extensions to names (default: ./{DEFAULT_LABELS_FILE})",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (default: auto-detect .extension-count.json)",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore config file",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Gitignore-style pattern to skip (repeatable)",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        default=None,
        help="Also skip paths matched by each root's .gitignore",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        default=None,
        help="Descend into symlinked directories",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report the roots that can be scanned even if others fail",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Write output to a file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log scan progress to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def output_width() -> int:
    if sys.stdout.isatty():
        return shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns
    return DEFAULT_WIDTH


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    cwd = Path.cwd()
    config_path = find_config(cwd, args.config, args.no_config)
    config = load_config(config_path) if config_path else {}
    if config_path:
        logger.debug("Using config %s", config_path)

    limit = args.limit if args.limit is not None else coerce_int(config.get("limit"), DEFAULT_LIMIT)
    if limit < 0:
        parser.error("--limit must be 0 or greater")
    sort_key = args.sort or coerce_choice(config.get("sort"), SORT_KEYS, "count")
    reverse = args.reverse or coerce_bool(config.get("reverse"), False)
    ci = args.ci or coerce_bool(config.get("ci"), False)
    use_gitignore = args.gitignore or coerce_bool(config.get("gitignore"), False)
    follow_symlinks = args.follow_symlinks or coerce_bool(config.get("follow_symlinks"), False)
    exclude = normalize_patterns(config.get("exclude")) + args.exclude

    labels_value = args.labels or config.get("labels") or DEFAULT_LABELS_FILE
    labels_path = Path(str(labels_value))
    if not labels_path.is_absolute():
        labels_path = cwd / labels_path

    failed = False
    try:
        labels = load_labels(labels_path)
        if args.keep_going:
            outcomes = aggregate_each(args.inputs, labels, exclude, use_gitignore, follow_symlinks)
            for outcome in outcomes:
                if not outcome.ok:
                    logger.error("%s", outcome.error)
                    failed = True
            report = Report(tables=tuple(o.table for o in outcomes if o.ok))
        else:
            report = aggregate(args.inputs, labels, exclude, use_gitignore, follow_symlinks)
    except ExtensionCountError as e:
        logger.error("%s", e)
        return 1

    if args.json:
        output = format_json(report)
    else:
        output = format_text(
            report,
            sort_key=sort_key,
            reverse=reverse,
            limit=limit,
            color=not ci and args.out is None,
            width=output_width(),
        )

    out_path = Path(args.out) if args.out else None
    write_output(output, out_path)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
