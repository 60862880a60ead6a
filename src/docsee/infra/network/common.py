from __future__ import annotations

from typing import Dict, Optional

from docsee import __version__
from docsee.domain.constants import GITHUB_ACCEPT_HEADER

USER_AGENT = f"docsee-client/{__version__}"
DEFAULT_TIMEOUT = 10


def build_headers(token: Optional[str] = None) -> Dict[str, str]:
    """Assemble request headers, adding GitHub auth when a token is supplied."""
    headers = {"User-Agent": USER_AGENT}
    if token:
        headers["Authorization"] = f"token {token}"
        headers["Accept"] = GITHUB_ACCEPT_HEADER
    return headers
