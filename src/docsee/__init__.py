from __future__ import annotations

"""
docsee: markdown documentation explorer for remote GitHub repositories.

Recursively discovers .md/.mdx files through the GitHub contents API,
aggregates word and size statistics, and renders a navigable HTML page.
"""

__version__ = "1.0.0"
