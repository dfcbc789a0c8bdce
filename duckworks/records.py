"""Observation records: coordinates, dates and free-form descriptions."""

from __future__ import annotations

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A position given as latitude and longitude in decimal degrees."""

    latitude: float = 0.0
    longitude: float = 0.0


class RubberDuckData:
    """Column-wise store of observations.

    Each observation has a coordinate, a date (``None`` when the source
    date could not be read) and a description.
    """

    def __init__(self) -> None:
        self._coordinates: list[Coordinate] = []
        self._dates: list[datetime.date | None] = []
        self._descriptions: list[str] = []

    def coordinates(self) -> list[Coordinate]:
        """Coordinates of all observations, in insertion order."""
        return list(self._coordinates)

    def dates(self) -> list[datetime.date | None]:
        """Dates of all observations, in insertion order."""
        return list(self._dates)

    def descriptions(self) -> list[str]:
        """Descriptions of all observations, in insertion order."""
        return list(self._descriptions)

    def insert(
        self,
        latitude: float,
        longitude: float,
        date: datetime.date | None,
        description: str = "",
    ) -> None:
        """Append one observation."""
        self._coordinates.append(Coordinate(float(latitude), float(longitude)))
        self._dates.append(date)
        self._descriptions.append(description)

    def __len__(self) -> int:
        return len(self._coordinates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self)} observations>)"