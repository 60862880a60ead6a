from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory stand-in for the GitHub contents API and raw file host,
   driven by a nested dict layout.
"""

import os
import sys
from typing import Any, Dict, Iterable, List, Optional, Type

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from docsee.domain.errors import ListingFetchError  # noqa: E402
from docsee.domain.listing_models import EntryKind, FetchResult, ListingEntry  # noqa: E402

RAW_HOST = "https://raw.test/"


# -----------------------------------------------------------------------------
# Fake GitHub
# -----------------------------------------------------------------------------
class FakeGitHub:
    """
    Serve listings and bodies from a nested dict.

    A dict value is a directory, a str value is a file body. Paths use '/'.
    """

    def __init__(
            self,
            layout: Dict[str, Any],
            failing_listings: Iterable[str] = (),
            failing_files: Iterable[str] = (),
            null_urls: Iterable[str] = (),
    ) -> None:
        self.layout = layout
        self.failing_listings = set(failing_listings)
        self.failing_files = set(failing_files)
        self.null_urls = set(null_urls)
        self.listed: List[str] = []
        self.fetched: List[str] = []

    def _node(self, path: str) -> Any:
        node: Any = self.layout
        for part in [p for p in path.split("/") if p]:
            node = node[part]
        return node

    def list(self, token: str, owner: str, repository: str, path: str = "") -> List[ListingEntry]:
        self.listed.append(path)
        if path in self.failing_listings:
            raise ListingFetchError(f"https://api.test/{owner}/{repository}/contents/{path}", "Not Found", 404)

        entries = []
        for name, value in self._node(path).items():
            child = f"{path}/{name}" if path else name
            if isinstance(value, dict):
                entries.append(ListingEntry(name=name, path=child, kind=EntryKind.DIRECTORY))
            else:
                url: Optional[str] = None if child in self.null_urls else RAW_HOST + child
                entries.append(ListingEntry(name=name, path=child, kind=EntryKind.FILE, content_url=url))
        return entries

    def fetch(self, url: str) -> FetchResult:
        self.fetched.append(url)
        path = url[len(RAW_HOST):]
        if path in self.failing_files:
            return FetchResult.failure("HTTP 404 Not Found")
        return FetchResult.success(self._node(path))


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_github() -> Type[FakeGitHub]:
    """Return the FakeGitHub class so tests can build their own layouts."""
    return FakeGitHub


@pytest.fixture
def scenario_layout() -> Dict[str, Any]:
    """
    Root with a.md ("hello world") and docs/ holding an empty b.md and c.txt.
    """
    return {
        "a.md": "hello world",
        "docs": {
            "b.md": "",
            "c.txt": "ignored text body",
        },
    }


@pytest.fixture
def mock_config_dict(tmp_path) -> Dict[str, Any]:
    """Return a complete configuration dictionary writing into tmp_path."""
    return {
        "repository": "octo/docs",
        "output_path": str(tmp_path / "index.html"),
        "template_path": "",
        "env_file": str(tmp_path / ".env"),
        "workers": 1,
        "print_tree": False,
    }
