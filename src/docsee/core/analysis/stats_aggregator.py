from __future__ import annotations

"""
Document Tree Statistics Aggregator.

Walks a DocumentTree, downloads every markdown body and folds the
per-file metrics into cumulative AggregateStatistics. A file whose body
cannot be fetched is still counted, contributes nothing else, and is
reported as a warning. It never aborts the walk.
"""

import logging
import re
from concurrent.futures import Executor, Future
from typing import Callable, Dict, List, Optional

from docsee.domain.listing_models import FetchResult, FileFetchFailure
from docsee.domain.stats_models import AggregateStatistics
from docsee.domain.tree_models import DocumentTree, NodeKind
from docsee.infra.network import fetch_file_body

logger = logging.getLogger(__name__)

# Space separators, line terminators and the BOM. The \x1c-\x1f information
# separators and \x85 are part of a word.
_WORD_SEPARATOR = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

BodyFetcher = Callable[[str], FetchResult]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def aggregate(
        tree: DocumentTree,
        *,
        fetch_body: Optional[BodyFetcher] = None,
        executor: Optional[Executor] = None,
        failures: Optional[List[FileFetchFailure]] = None,
) -> AggregateStatistics:
    """
    Compute cumulative statistics for a document tree.

    Each subtree adds one folder plus everything below it. Leaves without
    a URL are ignored entirely.

    Args:
        tree: Tree to walk. It is only read.
        fetch_body: Body collaborator, defaults to the HTTP client.
        executor: Optional pool. When given, the leaf fetches of each level
            run on it while subtrees are walked in the calling thread.
        failures: Optional list receiving one FileFetchFailure per file
            that could not be fetched.

    Returns:
        AggregateStatistics: Totals for the whole tree.
    """
    fetcher = fetch_body or fetch_file_body
    stats = AggregateStatistics()

    # Only fetches go to the pool, recursion stays on this thread
    scheduled: Dict[str, Future] = {}
    if executor is not None:
        for name, entry in tree.items():
            if entry.kind is NodeKind.LEAF and entry.url is not None:
                scheduled[name] = executor.submit(_safe_fetch, fetcher, entry.url)

    for name, entry in tree.items():
        if entry.kind is NodeKind.SUBTREE:
            stats += AggregateStatistics(folder_count=1)
            stats += aggregate(
                entry.children,
                fetch_body=fetcher,
                executor=executor,
                failures=failures,
            )
            continue

        if entry.url is None:
            continue

        future = scheduled.get(name)
        result = future.result() if future is not None else _safe_fetch(fetcher, entry.url)
        stats += _measure_file(name, entry.url, result, failures)

    return stats


def count_words(text: str) -> int:
    """Whitespace-delimited token count. A blank body has zero words."""
    return len([token for token in _WORD_SEPARATOR.split(text) if token])

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _safe_fetch(fetcher: BodyFetcher, url: str) -> FetchResult:
    """Run the body collaborator, turning any exception into a failed result."""
    try:
        return fetcher(url)
    except Exception as e:
        return FetchResult.failure(str(e) or type(e).__name__)


def _measure_file(
        name: str,
        url: str,
        result: FetchResult,
        failures: Optional[List[FileFetchFailure]],
) -> AggregateStatistics:
    if not result.ok:
        logger.warning(f"Error fetching file {name}: {result.error}")
        if failures is not None:
            failures.append(FileFetchFailure(name=name, url=url, error=result.error))
        return AggregateStatistics(file_count=1)

    return AggregateStatistics(
        file_count=1,
        word_count=count_words(result.text),
        total_size_bytes=len(result.text),
    )
