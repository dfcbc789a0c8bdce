"""Lookup of file readers by the file extension they handle."""

from __future__ import annotations

from .csv_reader import CSVReader
from .file_reader import FileReader
from .free_reader import FreeTextReader
from .json_reader import JSONReader


def get_readers() -> dict[str, FileReader]:
    """A fresh reader for each supported extension, keyed by that extension."""
    readers: list[FileReader] = [CSVReader(), JSONReader(), FreeTextReader()]
    return {reader.supported_file_extension(): reader for reader in readers}