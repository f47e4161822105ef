"""Exception types raised by the city search package."""

from pathlib import Path
from typing import Any


class CitySearchError(Exception):
    """Base class for all city search errors."""


class UnknownPointError(CitySearchError, KeyError):
    """A referenced point name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown city: {self.name!r}"


class InvalidMetricError(CitySearchError, ValueError):
    """A metric code outside the supported set was requested."""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Invalid metric code: {self.code!r} (expected 0, 1 or 2)"


class DatasetFormatError(CitySearchError, ValueError):
    """A dataset line does not match the expected format."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(line_number, line, reason)

    def __str__(self) -> str:
        return f"{self.reason} at line {self.line_number}: {self.line!r}"


class DatasetNotFoundError(CitySearchError, FileNotFoundError):
    """The dataset file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(str(path))

    def __str__(self) -> str:
        return f"Failed to open the dataset file: {self.path}"
