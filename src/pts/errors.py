"""
Exceptions raised by the pts pipeline.

Input and parse errors are also ``ValueError`` subclasses so callers that only
care about "bad data" can catch them generically.
"""
from __future__ import annotations

from pathlib import Path


class PtsError(Exception):
    """Base class for every error pts reports to the user."""


class ValidationError(PtsError, ValueError):
    pass


class UnknownTeam(ValidationError):
    def __init__(self, raw_team_key: str) -> None:
        self.raw_team_key = raw_team_key
        super().__init__(f"invalid team key: {raw_team_key}")


class YearOutOfRange(ValidationError):
    def __init__(self, year: int, current_year: int) -> None:
        self.year = year
        self.current_year = current_year
        super().__init__(f"year must be between 1901 and {current_year} (got {year})")


class YearNotNumeric(ValidationError):
    def __init__(self, raw_year: str) -> None:
        self.raw_year = raw_year
        super().__init__(f"year must be a number (got {raw_year!r})")


class FetchFailed(PtsError):
    def __init__(self, url: str, cause: BaseException | str) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to fetch {url}: {cause}")


class ParseFailed(PtsError, ValueError):
    pass


class CacheReadFailed(PtsError):
    def __init__(self, path: Path, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read cache file {path}: {cause}")


class CacheWriteFailed(PtsError):
    def __init__(self, path: Path, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to write cache file {path}: {cause}")


class ExportFailed(PtsError):
    def __init__(self, path: Path, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to write {path}: {cause}")
