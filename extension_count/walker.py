"""
Recursive file discovery.

Walks a root depth-first and yields every regular file beneath it, in the
order the directory listing returns entries. Paths are joined onto the root
exactly as it was given, so "./src" yields "./src/a.ts". Symlinked
directories are only descended into on request, and then with cycle
detection. Entries that are neither files nor directories (broken links,
sockets, devices) are skipped.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, Optional

import pathspec

from .errors import CycleError, ScanError
from .paths import PathLike

logger = logging.getLogger(__name__)


def read_ignore_file(path: Path) -> list[str]:
    if not path.is_file():
        return []
    patterns = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                patterns.append(line)
    return patterns


def build_ignore_spec(patterns: Iterable[str]) -> Optional[pathspec.PathSpec]:
    patterns = [p for p in patterns if p]
    if not patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def should_ignore(rel_path: str, spec: Optional[pathspec.PathSpec]) -> bool:
    return spec is not None and spec.match_file(rel_path)


def _stat(path: str) -> os.stat_result:
    try:
        return os.stat(path)
    except OSError as e:
        raise ScanError(Path(path), e) from e


def _list_dir(directory: str) -> Iterator[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise ScanError(Path(directory), e) from e
    return iter(entries)


def iter_files(
    root: PathLike,
    ignore: Optional[pathspec.PathSpec] = None,
    follow_symlinks: bool = False,
) -> Iterator[str]:
    root = os.fspath(root)
    root_stat = _stat(root)

    if stat.S_ISREG(root_stat.st_mode):
        yield root
        return
    if not stat.S_ISDIR(root_stat.st_mode):
        logger.debug("Skipping special root %s", root)
        return

    # (relative prefix, identities of the directories above it, pending entries)
    stack = [("", frozenset({(root_stat.st_dev, root_stat.st_ino)}), _list_dir(root))]
    while stack:
        rel_dir, ancestors, entries = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        path = entry.path
        rel_path = f"{rel_dir}{entry.name}"
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
            is_link = entry.is_symlink()
        except OSError as e:
            raise ScanError(Path(path), e) from e

        if is_dir:
            if should_ignore(rel_path + "/", ignore):
                logger.debug("Ignoring directory %s", path)
                continue
            if is_link and not follow_symlinks:
                logger.debug("Not following directory symlink %s", path)
                continue
            try:
                dir_stat = entry.stat()
            except OSError as e:
                raise ScanError(Path(path), e) from e
            identity = (dir_stat.st_dev, dir_stat.st_ino)
            if identity in ancestors:
                raise CycleError(Path(path))
            stack.append((rel_path + "/", ancestors | {identity}, _list_dir(path)))
        elif is_file:
            if should_ignore(rel_path, ignore):
                logger.debug("Ignoring file %s", path)
                continue
            yield path
        else:
            logger.debug("Skipping special entry %s", path)


def walk(
    root: PathLike,
    ignore: Optional[pathspec.PathSpec] = None,
    follow_symlinks: bool = False,
) -> list[str]:
    """
    Collect every regular file under root as display strings built from the
    root as given. Raises ScanError on the first I/O failure.
    """
    return list(iter_files(root, ignore=ignore, follow_symlinks=follow_symlinks))
