"""
Text and JSON rendering of a Report.

Rendering never changes the report: rows are re-sorted into a new list and
long file lists are truncated for display only.
"""

import io
from pathlib import Path
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .report import FileRow, OutputTable, Report

SORT_KEYS = ["count", "ext", "files"]
DEFAULT_LIMIT = 10
DEFAULT_WIDTH = 200


def sort_rows(rows: Iterable[FileRow], key: str = "count", reverse: bool = False) -> list[FileRow]:
    if key == "count":
        sort_key = lambda row: (-row.count, row.extension)
    elif key == "ext":
        sort_key = lambda row: (row.extension, -row.count)
    elif key == "files":
        sort_key = lambda row: (-len(row.files), row.extension)
    else:
        raise ValueError(f"Unknown sort key: {key}")
    # extensions are unique per table, so reversing the key order is exact
    return sorted(rows, key=sort_key, reverse=reverse)


def display_files(files: Iterable[str], limit: Optional[int] = DEFAULT_LIMIT) -> list[str]:
    files = list(files)
    if limit and len(files) > limit:
        return files[:limit] + [f"{len(files) - limit} more files"]
    return files


def row_label(row: FileRow) -> str:
    return row.label if row.label is not None else row.extension


def make_console(file, color: bool, width: int) -> Console:
    return Console(
        file=file,
        width=width,
        force_terminal=color,
        no_color=not color,
        color_system="standard" if color else None,
        highlight=False,
    )


def render_table(
    console: Console,
    table: OutputTable,
    sort_key: str = "count",
    reverse: bool = False,
    limit: Optional[int] = DEFAULT_LIMIT,
) -> None:
    console.print(Text.assemble("Results for: ", (table.title, "yellow")), soft_wrap=True)
    console.print(Text.assemble("Total files: ", (str(table.total_files), "bold")), soft_wrap=True)

    grid = Table(box=box.SIMPLE, show_header=True, header_style="bold", show_lines=True)
    grid.add_column("Extension", style="blue", no_wrap=True)
    grid.add_column("Count", justify="right", style="bold", no_wrap=True)
    grid.add_column("Files", overflow="fold")

    for row in sort_rows(table.rows, sort_key, reverse):
        grid.add_row(
            Text(row_label(row)),
            Text(str(row.count)),
            Text("\n".join(display_files(row.files, limit))),
        )
    console.print(grid)


def format_text(
    report: Report,
    sort_key: str = "count",
    reverse: bool = False,
    limit: Optional[int] = DEFAULT_LIMIT,
    color: bool = True,
    width: int = DEFAULT_WIDTH,
) -> str:
    buffer = io.StringIO()
    console = make_console(buffer, color, width)
    for table in report:
        render_table(console, table, sort_key, reverse, limit)
        console.print()
    return buffer.getvalue().rstrip("\n")


def format_json(report: Report) -> str:
    return report.to_json(indent=2)


def printable(text: str) -> str:
    # undecodable file name bytes arrive as lone surrogates
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def write_output(output: str, out_path: Optional[Path]) -> None:
    output = printable(output)
    if out_path is None:
        print(output)
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(output)
        f.write("\n")
