"""Reader for free-text observation notes separated by blank lines.

Each entry must mention a date and a position somewhere in its text. Dates
may be ISO (``2024-06-10`` or ``2024/06/10``), day-month-year
(``10 June 2024``) or month-day-year (``June 10 2024``). Positions may be
decimal degrees (``51.5074, -0.1278``) or degrees, minutes and seconds
(``51° 30' 26" N, 0° 7' 39" W``).
"""

from __future__ import annotations

import datetime
import logging
import os
import re
from collections.abc import Iterator
from typing import TextIO

from .file_reader import FileReader
from .records import Coordinate, RubberDuckData

logger = logging.getLogger(__name__)

_DEGREE = "\u00b0"

_MONTHS = (
    r"(Jan(?:uary)?"
    r"|Feb(?:ruary)?"
    r"|Mar(?:ch)?"
    r"|Apr(?:il)?"
    r"|May|June?"
    r"|July?"
    r"|Aug(?:ust)?"
    r"|Sep(?:tember)?"
    r"|Oct(?:ober)?"
    r"|Nov(?:ember)?"
    r"|Dec(?:ember)?)"
)
_YEAR = r"(\d{4})"
_DAY = r"(\d{2})"
_MONTH = r"(\d{2})"
_DATE_SEP = r"(?:-|/)"
_WS = r"\s"

_ISO = _YEAR + _DATE_SEP + _MONTH + _DATE_SEP + _DAY
_DMY = _DAY + _WS + _MONTHS + _WS + _YEAR
_MDY = _MONTHS + _WS + _DAY + _WS + _YEAR

DATE_PATTERN = _ISO + "|" + _DMY + "|" + _MDY

ISO_DATE_YEAR_GROUP = 1
ISO_DATE_MONTH_GROUP = 2
ISO_DATE_DAY_GROUP = 3
DMY_DATE_DAY_GROUP = 4
DMY_DATE_MONTH_GROUP = 5
DMY_DATE_YEAR_GROUP = 6
MDY_DATE_MONTH_GROUP = 7
MDY_DATE_DAY_GROUP = 8
MDY_DATE_YEAR_GROUP = 9

_LAT_DEG = r"(?:(?P<lat_deg>\d{1,2})(?:" + _DEGREE + r")?\s*)?"
_LAT_MIN = r"(?:(?P<lat_min>\d{1,2})'\s*)"
_LAT_SEC = r"(?P<lat_sec>\d{1,2}(?:\.\d+)?)(?:\"|'')\s*"
_LAT_NS = r"(?P<lat_card>[NS])"
_DMS_LAT = _LAT_DEG + _LAT_MIN + _LAT_SEC + _LAT_NS

_LON_DEG = r"(?:(?P<lon_deg>\d{1,3})(?:" + _DEGREE + r")?\s*)?"
_LON_MIN = r"(?:(?P<lon_min>\d{1,2})'\s*)?"
_LON_SEC = r"(?P<lon_sec>\d{1,2}(?:\.\d+)?)(?:\"|'')\s*"
_LON_EW = r"(?P<lon_card>[EW])"
_DMS_LON = _LON_DEG + _LON_MIN + _LON_SEC + _LON_EW

_DD_LAT = r"(?P<dd_lat>[+\-]?\d{1,2}\.\d+)(?:" + _DEGREE + r")?"
_DD_LON = r"(?P<dd_lon>[+\-]?\d{1,3}\.\d+)(?:" + _DEGREE + r")?"

_CO_SEP = r"(?:,|\s)\s*"
DMS_PATTERN = _DMS_LAT + _CO_SEP + _DMS_LON
DD_PATTERN = _DD_LAT + _CO_SEP + _DD_LON
COORD_PATTERN = DMS_PATTERN + "|" + DD_PATTERN

DATE_RE = re.compile(DATE_PATTERN)
DMS_RE = re.compile(DMS_PATTERN)
DD_RE = re.compile(DD_PATTERN)
COORD_RE = re.compile(COORD_PATTERN)

_MONTH_NUMBERS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}


def _first_group(match: re.Match, *groups: int) -> str | None:
    return next(
        (match.group(g) for g in groups if match.group(g) is not None), None
    )


def _month_of(match: re.Match) -> int | None:
    numeric = match.group(ISO_DATE_MONTH_GROUP)
    if numeric is not None:
        return int(numeric)
    name = _first_group(match, DMY_DATE_MONTH_GROUP, MDY_DATE_MONTH_GROUP)
    if name is None:
        logger.error("no matching month")
        return None
    return _MONTH_NUMBERS[name[:3]]


def parse_date(text: str) -> datetime.date | None:
    """Find the first date in ``text``; ``None`` if there is no valid one."""
    match = DATE_RE.search(text)
    if match is None:
        logger.warning("no date string match found")
        return None

    year = _first_group(
        match, ISO_DATE_YEAR_GROUP, DMY_DATE_YEAR_GROUP, MDY_DATE_YEAR_GROUP
    )
    day = _first_group(
        match, ISO_DATE_DAY_GROUP, DMY_DATE_DAY_GROUP, MDY_DATE_DAY_GROUP
    )
    month = _month_of(match)
    if year is None or day is None or month is None:
        logger.warning("missing year, month, or day")
        return None

    try:
        return datetime.date(int(year), month, int(day))
    except ValueError:
        logger.warning("parsed an invalid date")
        return None


def _in_range(latitude: float, longitude: float) -> bool:
    return -90.0 <= latitude <= 90.0 and -180.0 < longitude <= 180.0


def _dms_value(match: re.Match, prefix: str) -> float:
    value = 0.0
    for suffix, divisor in (("deg", 1), ("min", 60), ("sec", 3600)):
        part = match.group(f"{prefix}_{suffix}")
        if part is not None:
            value += float(part) / divisor
    return value


def _from_dms(match: re.Match) -> Coordinate | None:
    latitude = _dms_value(match, "lat")
    if match.group("lat_card") == "S":
        latitude = -latitude
    longitude = _dms_value(match, "lon")
    if match.group("lon_card") == "W":
        longitude = -longitude

    if _in_range(latitude, longitude):
        return Coordinate(latitude, longitude)
    logger.warning("parsed invalid coordinates %s, %s", latitude, longitude)
    return None


def parse_coord(text: str) -> Coordinate | None:
    """Find the first position in ``text``; ``None`` if there is no valid one."""
    match = COORD_RE.search(text)
    if match is None:
        logger.warning("no coordinates found in text")
        return None

    if match.group("dd_lat") is None:
        return _from_dms(match)

    try:
        latitude = float(match.group("dd_lat"))
        longitude = float(match.group("dd_lon"))
    except (TypeError, ValueError):
        logger.warning("unable to parse decimal degree lat or long")
        return None
    if _in_range(latitude, longitude):
        return Coordinate(latitude, longitude)
    logger.warning("parsed invalid coordinates %s, %s", latitude, longitude)
    return None


def _entries(stream: TextIO) -> Iterator[str]:
    """Yield blank-line separated entries, each line followed by a space."""
    lines: list[str] = []
    for raw in stream:
        line = raw.rstrip("\n")
        if line:
            lines.append(line)
        elif lines:
            yield "".join(f"{part} " for part in lines)
            lines = []
    if lines:
        yield "".join(f"{part} " for part in lines)


class FreeTextReader(FileReader):
    """Reads free-text entries that each mention a date and a position."""

    def read_stream(self, data: RubberDuckData, stream: TextIO) -> None:
        """Parse entries from ``stream`` and append the complete ones to ``data``."""
        for text in _entries(stream):
            date = parse_date(text)
            coord = parse_coord(text)
            if date is not None and coord is not None:
                data.insert(coord.latitude, coord.longitude, date, text)

    def read_file(self, data: RubberDuckData, path: str | os.PathLike) -> None:
        try:
            with open(path, encoding="utf-8") as stream:
                self.read_stream(data, stream)
        except OSError:
            logger.warning('could not open text file "%s"', path)

    def supported_file_extension(self) -> str:
        return "txt"