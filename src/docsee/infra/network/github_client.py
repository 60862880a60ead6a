from __future__ import annotations

import logging
from typing import List
from urllib.parse import quote

import requests

from docsee.domain.constants import GITHUB_API_URL
from docsee.domain.errors import ListingFetchError
from docsee.domain.listing_models import FetchResult, ListingEntry
from docsee.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT, build_headers

logger = logging.getLogger(__name__)


def contents_url(owner: str, repository: str, path: str = "") -> str:
    """
    Build the contents API endpoint for a repository-relative path.

    Path segments are percent-encoded so names such as 'C#' or 'what?'
    address the directory itself.
    """
    encoded = quote(path.strip("/"), safe="/")
    return f"{GITHUB_API_URL}/repos/{owner}/{repository}/contents/{encoded}"


def fetch_directory_listing(
        token: str,
        owner: str,
        repository: str,
        path: str = "",
) -> List[ListingEntry]:
    """
    Query the immediate children of a repository directory.

    Raises:
        ListingFetchError: On transport errors, non-success status, or a
            payload that is not a directory listing.
    """
    url = contents_url(owner, repository, path)
    logger.debug(f"Network: Listing {url}")

    try:
        response = requests.get(url, headers=build_headers(token), timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.RequestException as e:
        raise ListingFetchError(url, str(e)) from e

    if not response.ok:
        reason = response.reason or f"HTTP {response.status_code}"
        raise ListingFetchError(url, reason, status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        raise ListingFetchError(url, "Malformed JSON payload", status_code=response.status_code) from e

    # The endpoint answers with a single object when the path is a file
    if not isinstance(data, list):
        raise ListingFetchError(url, "Expected a directory listing", status_code=response.status_code)

    return [ListingEntry.from_api(item) for item in data if isinstance(item, dict)]


def fetch_file_body(url: str) -> FetchResult:
    """Download a raw file body. Never raises for network or HTTP failures."""
    headers = {"User-Agent": USER_AGENT}
    try:
        response = requests.get(url, headers=headers, timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.Timeout:
        return FetchResult.failure(f"Timed out after {DEFAULT_TIMEOUT}s")
    except requests.exceptions.RequestException as e:
        return FetchResult.failure(str(e))

    if not response.ok:
        return FetchResult.failure(f"HTTP {response.status_code} {response.reason or ''}".strip())

    return FetchResult.success(response.text)
