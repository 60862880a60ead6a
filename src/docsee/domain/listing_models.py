from __future__ import annotations

"""
Remote Listing and Fetch Data Models.

Defines the Data Transfer Objects exchanged with the GitHub network
clients: one element of a directory listing, and the explicit outcome of
a single file body download.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# DIRECTORY LISTING
# -----------------------------------------------------------------------------

class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "dir"
    OTHER = "other"


@dataclass(frozen=True)
class ListingEntry:
    """
    One child returned by the contents API for a directory query.

    Attributes:
        name: Base name of the entry.
        path: Repository-relative path, used for nested queries.
        kind: File, directory, or any other type the API reports.
        content_url: Raw download URL. None for directories and some files.
    """
    name: str
    path: str
    kind: EntryKind
    content_url: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "ListingEntry":
        """Build an entry from one element of the contents API JSON array."""
        raw_kind = item.get("type", "")
        try:
            kind = EntryKind(raw_kind)
        except ValueError:
            kind = EntryKind.OTHER

        return cls(
            name=str(item.get("name", "")),
            path=str(item.get("path", "")),
            kind=kind,
            content_url=item.get("download_url"),
        )

# -----------------------------------------------------------------------------
# FILE BODY FETCH
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of downloading a single file body.

    Attributes:
        ok: True when the body was retrieved.
        text: Body text. Empty on failure.
        error: Failure detail. Empty on success.
    """
    ok: bool
    text: str = ""
    error: str = ""

    @classmethod
    def success(cls, text: str) -> "FetchResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class FileFetchFailure:
    """
    Report of an isolated file failure collected during aggregation.

    Attributes:
        name: Tree entry name of the file.
        url: URL that could not be fetched.
        error: Descriptive failure message.
    """
    name: str
    url: str
    error: str
