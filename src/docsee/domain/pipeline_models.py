from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object and factory functions used to communicate
execution outcomes between the pipeline engine and the CLI layer.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from docsee.domain.listing_models import FileFetchFailure
from docsee.domain.stats_models import AggregateStatistics
from docsee.domain.tree_models import DocumentTree, tree_to_dict

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result of a complete docsee run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        owner: Repository owner that was explored.
        repository: Repository name that was explored.
        output_path: Absolute path of the generated document.
        tree: Discovered document tree. Empty on failure.
        statistics: Aggregated metrics. None when the run failed.
        failures: Isolated file fetch failures reported during aggregation.
        summary: Technical execution summary.
    """
    ok: bool
    error: str

    owner: str
    repository: str
    output_path: str = ""

    tree: DocumentTree = field(default_factory=dict)
    statistics: Optional[AggregateStatistics] = None
    failures: List[FileFetchFailure] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into JSON-compatible primitives."""
        return {
            "ok": self.ok,
            "error": self.error,
            "owner": self.owner,
            "repository": self.repository,
            "output_path": self.output_path,
            "tree": tree_to_dict(self.tree),
            "statistics": asdict(self.statistics) if self.statistics else None,
            "failures": [asdict(f) for f in self.failures],
            "summary": dict(self.summary),
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        owner: str,
        repository: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    No tree and no statistics are attached: a fatal failure never yields
    partial output.
    """
    return PipelineResult(
        ok=False,
        error=error,
        owner=owner,
        repository=repository,
        summary=summary_extra or {},
    )


def create_success_result(
        owner: str,
        repository: str,
        output_path: str,
        tree: DocumentTree,
        statistics: AggregateStatistics,
        failures: Optional[List[FileFetchFailure]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        owner: Repository owner.
        repository: Repository name.
        output_path: Location of the written document.
        tree: Completed document tree.
        statistics: Aggregated metrics for the tree.
        failures: Isolated failures collected while aggregating.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        owner=owner,
        repository=repository,
        output_path=output_path,
        tree=tree,
        statistics=statistics,
        failures=list(failures or []),
        summary=summary_extra or {},
    )
