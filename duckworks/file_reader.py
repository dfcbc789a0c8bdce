"""Common interface of readers that load observations from files."""

from __future__ import annotations

import abc
import datetime
import os
import re

from .records import RubberDuckData

_ISO_DATE = re.compile(r"\s*(\d{4})-(\d{1,2})-(\d{1,2})")


class FileReader(abc.ABC):
    """A reader that parses one kind of file into a ``RubberDuckData``."""

    @abc.abstractmethod
    def read_file(self, data: RubberDuckData, path: str | os.PathLike) -> None:
        """Read the observations in ``path`` and append them to ``data``."""

    @abc.abstractmethod
    def supported_file_extension(self) -> str:
        """The file extension, without the dot, that this reader parses."""

    @staticmethod
    def _parse_date(text: str) -> datetime.date | None:
        """Read a leading ``YYYY-MM-DD`` date; ``None`` if there is none."""
        match = _ISO_DATE.match(text)
        if match is None:
            return None
        try:
            return datetime.date(*(int(part) for part in match.groups()))
        except ValueError:
            return None