from __future__ import annotations

"""
Document Tree Data Models.

Provides the recursive tagged-variant types used to describe the markdown
layout of a remote repository. Every entry carries an explicit NodeKind
discriminant so consumers never need to inspect Python types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Discriminant of a TreeEntry."""
    LEAF = "leaf"
    SUBTREE = "subtree"


@dataclass(frozen=True)
class TreeEntry:
    """
    A single named slot of a DocumentTree.

    Attributes:
        kind: LEAF for a markdown file, SUBTREE for a directory.
        url: Raw download URL of a leaf. None when the API gave no link.
        children: Nested entries of a subtree. Always empty for leaves.
    """
    kind: NodeKind
    url: Optional[str] = None
    children: Dict[str, "TreeEntry"] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    @property
    def is_subtree(self) -> bool:
        return self.kind is NodeKind.SUBTREE


DocumentTree = Dict[str, TreeEntry]

# -----------------------------------------------------------------------------
# FACTORIES
# -----------------------------------------------------------------------------

def leaf(url: Optional[str]) -> TreeEntry:
    """Create a leaf entry pointing at a fetchable markdown body."""
    return TreeEntry(kind=NodeKind.LEAF, url=url)


def subtree(children: DocumentTree) -> TreeEntry:
    """Create a directory entry wrapping an already built subtree."""
    return TreeEntry(kind=NodeKind.SUBTREE, children=children)

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

def tree_to_dict(tree: DocumentTree) -> Dict[str, Any]:
    """
    Convert a DocumentTree into plain JSON-compatible data.

    Leaves become their URL (or None) and subtrees become nested dicts,
    mirroring the shape exposed by the contents API.

    Args:
        tree: Root mapping to convert.

    Returns:
        Dict[str, Any]: Nested dictionary preserving insertion order.
    """
    out: Dict[str, Any] = {}
    for name, entry in tree.items():
        if entry.kind is NodeKind.SUBTREE:
            out[name] = tree_to_dict(entry.children)
        else:
            out[name] = entry.url
    return out
