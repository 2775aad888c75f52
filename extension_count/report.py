"""
Report data model.

A Report holds one OutputTable per scanned root; each table holds one
FileRow per distinct extension. Everything is frozen once built. The JSON
form is a list of tables:

    [{"title": ..., "total_files": ..., "rows": [
        {"extension": ".ts", "label": "TypeScript", "count": 2, "files": [...]}
    ]}]
"""

import json
from dataclasses import asdict, dataclass
from typing import Iterator, Optional

from .errors import ExtensionCountError


@dataclass(frozen=True)
class FileRow:
    extension: str
    label: Optional[str]
    count: int
    files: tuple[str, ...]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["files"] = list(self.files)
        return data


@dataclass(frozen=True)
class OutputTable:
    title: str
    total_files: int
    rows: tuple[FileRow, ...]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "total_files": self.total_files,
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass(frozen=True)
class Report:
    tables: tuple[OutputTable, ...] = ()

    def __iter__(self) -> Iterator[OutputTable]:
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)

    def __getitem__(self, index: int) -> OutputTable:
        return self.tables[index]

    def to_list(self) -> list[dict]:
        return [table.to_dict() for table in self.tables]

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_list(), indent=indent)


@dataclass(frozen=True)
class RootOutcome:
    """Result of scanning one root when failures are collected instead of raised."""

    root: str
    table: Optional[OutputTable] = None
    error: Optional[ExtensionCountError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
