from __future__ import annotations

"""
Tree Renderer.

Converts a DocumentTree into an ASCII preview using the familiar
'├──' / '└──' connectors. Entries keep the order returned by the API.
"""

from typing import List, Optional

from docsee.domain.tree_models import DocumentTree, NodeKind

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_lines(
        tree: DocumentTree,
        lines: Optional[List[str]] = None,
        prefix: str = "",
) -> List[str]:
    """
    Recursively transform the tree into display lines.

    Directories get a trailing '/' so empty folders stay distinguishable
    from files.

    Args:
        tree: Current node to render.
        lines: Accumulator, created on the first call.
        prefix: Indentation prefix for the current recursion level.

    Returns:
        List[str]: The accumulated lines.
    """
    if lines is None:
        lines = []

    names = list(tree.keys())
    for i, name in enumerate(names):
        is_last = i == len(names) - 1
        connector = "└── " if is_last else "├── "
        entry = tree[name]

        if entry.kind is NodeKind.SUBTREE:
            lines.append(f"{prefix}{connector}{name}/")
            render_tree_lines(
                entry.children,
                lines,
                prefix=prefix + ("    " if is_last else "│   "),
            )
        else:
            lines.append(f"{prefix}{connector}{name}")

    return lines
