"""Reader for comma-separated observation files with a header row."""

from __future__ import annotations

import csv
import io
import logging
import os
from pathlib import Path

from .file_reader import FileReader
from .records import RubberDuckData

logger = logging.getLogger(__name__)

_REQUIRED = ("date", "latitude", "longitude")
_OPTIONAL = ("description",)


def _locate_columns(header: list[str]) -> dict[str, int]:
    wanted = set(_REQUIRED + _OPTIONAL)
    positions: dict[str, int] = {}
    for col, name in enumerate(cell.strip() for cell in header):
        if name in wanted:
            positions[name] = col
    missing = [name for name in _REQUIRED if name not in positions]
    if missing:
        raise ValueError(f"csv header is missing column(s): {', '.join(missing)}")
    return positions


def _parse_float(text: str, name: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"invalid {name} value {text!r}") from None


class CSVReader(FileReader):
    """Reads ``date, latitude, longitude, description`` columns in any order."""

    def read_view(self, data: RubberDuckData, view: str) -> None:
        """Parse CSV text and append its rows to ``data``."""
        rows = csv.reader(io.StringIO(view), skipinitialspace=True)
        try:
            header = next(rows)
        except (StopIteration, csv.Error):
            logger.warning("failed to parse csv from string")
            return
        positions = _locate_columns(header)

        for row in rows:
            cells = [cell.strip() for cell in row]
            if not any(cells):
                continue

            def cell(name: str) -> str:
                col = positions.get(name)
                return cells[col] if col is not None and col < len(cells) else ""

            date = self._parse_date(cell("date"))
            latitude = _parse_float(cell("latitude"), "latitude")
            longitude = _parse_float(cell("longitude"), "longitude")
            data.insert(latitude, longitude, date, cell("description"))

    def read_file(self, data: RubberDuckData, path: str | os.PathLike) -> None:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            logger.warning('failed to parse csv from file "%s"', path)
            return
        self.read_view(data, text)

    def supported_file_extension(self) -> str:
        return "csv"