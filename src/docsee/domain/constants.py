from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the traversal engine, the
network clients and the presentation layer.
"""

from typing import Tuple

# Case-sensitive suffixes that qualify a file as documentation
MARKDOWN_EXTENSIONS: Tuple[str, ...] = (".md", ".mdx")

GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"

TOKEN_ENV_VAR = "GITHUB_TOKEN"
DEFAULT_ENV_FILE = ".env"
DEFAULT_OUTPUT_FILE = "index.html"
DEFAULT_TEMPLATE_FILE = "template.html"

CONTENT_PLACEHOLDER = "{{content}}"
ANALYSIS_PLACEHOLDER = "{{analysis}}"
