from __future__ import annotations

"""
Remote Document Tree Builder.

Turns the directory-by-directory GitHub contents API into an in-memory
DocumentTree that keeps only markdown files. Traversal is depth-first and
follows the order returned by the API. Directory nodes are always kept,
even when nothing below them qualifies.
"""

import logging
from typing import Callable, List, Optional

from docsee.domain.constants import MARKDOWN_EXTENSIONS
from docsee.domain.listing_models import EntryKind, ListingEntry
from docsee.domain.tree_models import DocumentTree, leaf, subtree
from docsee.infra.network import fetch_directory_listing

logger = logging.getLogger(__name__)

ListingFetcher = Callable[[str, str, str, str], List[ListingEntry]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        token: str,
        owner: str,
        repository: str,
        path: str = "",
        *,
        fetch_listing: Optional[ListingFetcher] = None,
) -> DocumentTree:
    """
    Recursively build the markdown tree rooted at a repository path.

    Args:
        token: GitHub token presented to the listing API.
        owner: Repository owner.
        repository: Repository name.
        path: Repository-relative directory. Empty string is the root.
        fetch_listing: Listing collaborator, defaults to the GitHub client.

    Returns:
        DocumentTree: Insertion-ordered mapping of entry names to leaves
        and subtrees.

    Raises:
        ListingFetchError: If any listing query fails. The failure is not
            caught here, so no partial tree is ever returned.
    """
    fetcher = fetch_listing or fetch_directory_listing
    entries = fetcher(token, owner, repository, path)
    logger.debug(f"Listed '{path or '/'}': {len(entries)} entries")

    tree: DocumentTree = {}
    for entry in entries:
        if entry.kind is EntryKind.DIRECTORY:
            tree[entry.name] = subtree(
                build_tree(token, owner, repository, entry.path, fetch_listing=fetcher)
            )
        elif entry.kind is EntryKind.FILE and is_markdown_file(entry.name):
            tree[entry.name] = leaf(entry.content_url)

    return tree


def is_markdown_file(name: str) -> bool:
    """Case-sensitive suffix match against the markdown extensions."""
    return name.endswith(MARKDOWN_EXTENSIONS)
