from __future__ import annotations

"""
HTML Presentation Layer.

Renders the document tree as nested navigation lists, the statistics as a
summary block, and substitutes both into a page template.
"""

import html

from docsee.domain.constants import ANALYSIS_PLACEHOLDER, CONTENT_PLACEHOLDER
from docsee.domain.stats_models import AggregateStatistics
from docsee.domain.tree_models import DocumentTree, NodeKind

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>docsee</title>
  <style>
    body { font-family: ui-monospace, Menlo, Consolas, monospace; margin: 2rem; background: #111; color: #ddd; }
    a { color: #8ab4f8; text-decoration: none; }
    a:hover { text-decoration: underline; }
    ul.tree { list-style: none; padding-left: 1.2rem; }
    .icon { margin-right: 0.4rem; }
    .analysis { white-space: pre; margin-bottom: 1.5rem; }
    .green { color: #7ee787; }
  </style>
</head>
<body>
{{analysis}}
{{content}}
</body>
</html>
"""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_html(tree: DocumentTree) -> str:
    """
    Render a tree as nested <ul class='tree'> lists.

    Leaves link to their download URL in a new tab. A leaf without a URL
    is shown as plain text.
    """
    parts = ["<ul class='tree'>"]
    for name, entry in tree.items():
        label = html.escape(name)
        if entry.kind is NodeKind.SUBTREE:
            parts.append(
                f'<li class="folder"><span class="icon">📁</span>{label}'
                f"{render_tree_html(entry.children)}</li>"
            )
        elif entry.url is None:
            parts.append(f'<li class="file"><span class="icon">📄</span>{label}</li>')
        else:
            href = html.escape(entry.url, quote=True)
            parts.append(
                f'<li class="file"><span class="icon">📄</span>'
                f'<a href="{href}" target="_blank">{label}</a></li>'
            )
    parts.append("</ul>")
    return "".join(parts)


def render_statistics_html(stats: AggregateStatistics) -> str:
    """Render the summary block, including the derived average file size."""
    return f"""
    <div class="analysis">
    📁 Folder count:        <span class="green">{stats.folder_count}</span>
    📄 File count:          <span class="green">{stats.file_count}</span>
    💬 Word count:          <span class="green">{stats.word_count}</span>
    📏 Average file size:   <span class="green">{stats.average_size_kb:.2f} KB</span>
    </div>
"""


def fill_template(template: str, content: str, analysis: str) -> str:
    """Substitute the first occurrence of each placeholder."""
    return (
        template
        .replace(CONTENT_PLACEHOLDER, content, 1)
        .replace(ANALYSIS_PLACEHOLDER, analysis, 1)
    )
