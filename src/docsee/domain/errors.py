from __future__ import annotations

"""
Domain Exception Hierarchy.

Fatal conditions are modelled as exceptions and propagate to the
pipeline boundary. Isolated per-file failures never use these types;
they travel as FetchResult values instead.
"""

from typing import Optional


class DocseeError(Exception):
    """Base class for every error raised by the application."""


class ConfigurationError(DocseeError):
    """Invalid repository slug, missing credential or unusable settings."""


class ListingFetchError(DocseeError):
    """
    A directory listing query failed.

    Attributes:
        url: The contents API endpoint that was queried.
        status_code: HTTP status of the response, None on transport errors.
        reason: Human readable failure detail.
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")
