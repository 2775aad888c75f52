"""
Group discovered files by extension and build one table per root.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence

import pathspec

from .errors import ScanError
from .extensions import extension_of
from .labels import resolve_label
from .paths import PathLike
from .report import FileRow, OutputTable, Report, RootOutcome
from .walker import build_ignore_spec, read_ignore_file, walk

logger = logging.getLogger(__name__)


def build_table(title: str, files: Iterable[PathLike], labels: Mapping[str, str]) -> OutputTable:
    grouped: dict[str, list[str]] = {}
    total = 0
    for file in files:
        grouped.setdefault(extension_of(file), []).append(os.fspath(file))
        total += 1

    rows = tuple(
        FileRow(
            extension=extension,
            label=resolve_label(labels, extension),
            count=len(paths),
            files=tuple(paths),
        )
        for extension, paths in sorted(grouped.items())
    )
    return OutputTable(title=title, total_files=total, rows=rows)


def root_ignore_spec(
    root: Path,
    exclude: Sequence[str],
    use_gitignore: bool,
) -> Optional[pathspec.PathSpec]:
    patterns = list(exclude)
    if use_gitignore:
        gitignore = root / ".gitignore"
        try:
            patterns.extend(read_ignore_file(gitignore))
        except OSError as e:
            raise ScanError(gitignore, e) from e
    return build_ignore_spec(patterns)


def scan_root(
    root: PathLike,
    labels: Mapping[str, str],
    exclude: Sequence[str] = (),
    use_gitignore: bool = False,
    follow_symlinks: bool = False,
) -> OutputTable:
    title = os.fspath(root)
    path = Path(root)
    logger.debug("Scanning %s", title)
    spec = root_ignore_spec(path, exclude, use_gitignore)
    files = walk(title, ignore=spec, follow_symlinks=follow_symlinks)
    table = build_table(title, files, labels)
    logger.debug(
        "%s: %d files across %d extensions", title, table.total_files, len(table.rows)
    )
    return table


def aggregate(
    roots: Iterable[PathLike],
    labels: Mapping[str, str],
    exclude: Sequence[str] = (),
    use_gitignore: bool = False,
    follow_symlinks: bool = False,
) -> Report:
    """
    Scan each root in order and return their tables as a Report.

    The first root that fails aborts the whole call: the ScanError propagates
    and no report is returned.
    """
    tables = [
        scan_root(root, labels, exclude, use_gitignore, follow_symlinks)
        for root in roots
    ]
    return Report(tables=tuple(tables))


def aggregate_each(
    roots: Iterable[PathLike],
    labels: Mapping[str, str],
    exclude: Sequence[str] = (),
    use_gitignore: bool = False,
    follow_symlinks: bool = False,
) -> list[RootOutcome]:
    """
    Like aggregate, but a failing root is recorded in its RootOutcome and the
    remaining roots are still scanned.
    """
    outcomes = []
    for root in roots:
        title = os.fspath(root)
        try:
            table = scan_root(root, labels, exclude, use_gitignore, follow_symlinks)
        except ScanError as e:
            logger.debug("Scan of %s failed: %s", title, e)
            outcomes.append(RootOutcome(root=title, error=e))
            continue
        outcomes.append(RootOutcome(root=title, table=table))
    return outcomes
