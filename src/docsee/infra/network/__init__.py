from __future__ import annotations

"""
Network Communication Infrastructure.

Exposes the GitHub contents API clients consumed by the traversal engine.
"""

from docsee.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT, build_headers
from docsee.infra.network.github_client import (
    contents_url,
    fetch_directory_listing,
    fetch_file_body,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "build_headers",
    "contents_url",
    "fetch_directory_listing",
    "fetch_file_body",
]
