"""Reader for JSON files holding an array of observation objects."""

from __future__ import annotations

import json
import logging
import os
from typing import TextIO

from .file_reader import FileReader
from .records import RubberDuckData

logger = logging.getLogger(__name__)

_REQUIRED = ("longitude", "latitude", "date")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _well_formed(entry: object) -> bool:
    if not isinstance(entry, dict) or any(key not in entry for key in _REQUIRED):
        return False
    if not (_is_number(entry["latitude"]) and _is_number(entry["longitude"])):
        return False
    if not isinstance(entry["date"], str):
        return False
    return isinstance(entry.get("description", ""), str)


class JSONReader(FileReader):
    """Reads objects with ``latitude``, ``longitude``, ``date`` and an
    optional ``description``."""

    def read_stream(self, data: RubberDuckData, stream: TextIO) -> None:
        """Parse a JSON array from ``stream`` and append its entries to ``data``."""
        try:
            document = json.load(stream)
        except (json.JSONDecodeError, UnicodeDecodeError):
            document = None
        if not isinstance(document, list):
            logger.warning(
                "could not parse as JSON, top level object is not an array"
            )
            return

        logger.info("file contains %d entries", len(document))
        for index, entry in enumerate(document):
            if not _well_formed(entry):
                logger.warning("entry %d is malformed", index)
                continue
            data.insert(
                float(entry["latitude"]),
                float(entry["longitude"]),
                self._parse_date(entry["date"]),
                entry.get("description", ""),
            )

    def read_file(self, data: RubberDuckData, path: str | os.PathLike) -> None:
        try:
            with open(path, encoding="utf-8") as stream:
                self.read_stream(data, stream)
        except OSError:
            logger.warning('could not open JSON file "%s"', path)

    def supported_file_extension(self) -> str:
        return "json"