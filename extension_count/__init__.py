"""
Count files by extension across one or more directory trees.
"""

__version__ = "0.3.0"

from .aggregate import aggregate, aggregate_each, build_table
from .errors import CycleError, ExtensionCountError, LabelsError, ScanError
from .extensions import extension_of
from .labels import load_labels, resolve_label
from .report import FileRow, OutputTable, Report, RootOutcome
from .walker import walk

__all__ = [
    "CycleError",
    "ExtensionCountError",
    "FileRow",
    "LabelsError",
    "OutputTable",
    "Report",
    "RootOutcome",
    "ScanError",
    "aggregate",
    "aggregate_each",
    "build_table",
    "extension_of",
    "load_labels",
    "resolve_label",
    "walk",
]
