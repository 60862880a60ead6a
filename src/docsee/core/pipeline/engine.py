from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete docsee run:
1. Validates configuration and resolves the target repository.
2. Builds the markdown tree from the contents API (fail-fast).
3. Aggregates statistics, isolating per-file fetch failures.
4. Renders the tree and the summary into the page template.
5. Writes the final document.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple

from docsee.core.analysis.stats_aggregator import BodyFetcher, aggregate
from docsee.core.analysis.tree_builder import ListingFetcher, build_tree
from docsee.core.pipeline.validator import validate_config
from docsee.core.render.html_renderer import (
    DEFAULT_TEMPLATE,
    fill_template,
    render_statistics_html,
    render_tree_html,
)
from docsee.core.render.tree_renderer import render_tree_lines
from docsee.domain.config import parse_repository_slug
from docsee.domain.constants import DEFAULT_TEMPLATE_FILE
from docsee.domain.errors import ConfigurationError, ListingFetchError
from docsee.domain.listing_models import FileFetchFailure
from docsee.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from docsee.domain.stats_models import AggregateStatistics
from docsee.domain.tree_models import DocumentTree
from docsee.infra.fs import normalize_path, read_text_file, write_text_file

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        token: str,
        *,
        fetch_listing: Optional[ListingFetcher] = None,
        fetch_body: Optional[BodyFetcher] = None,
) -> PipelineResult:
    """
    Execute the full discovery, aggregation and rendering pipeline.

    Args:
        config: Raw configuration dictionary (see get_default_config).
        token: GitHub token for the listing API.
        fetch_listing: Optional listing collaborator override.
        fetch_body: Optional body collaborator override.

    Returns:
        PipelineResult: Success with tree, statistics and output path, or
        an error result carrying no partial data.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 1) Target resolution
    # -------------------------------------------------------------------------
    try:
        owner, repository = parse_repository_slug(cfg["repository"])
    except ConfigurationError as e:
        logger.error(str(e))
        return create_error_result(str(e), "", "")

    # -------------------------------------------------------------------------
    # 2) Tree discovery (fail-fast)
    # -------------------------------------------------------------------------
    logger.info(f"Fetching repository: {owner}/{repository}")
    try:
        tree = build_tree(token, owner, repository, fetch_listing=fetch_listing)
    except ListingFetchError as e:
        logger.error(str(e))
        return create_error_result(
            str(e), owner, repository,
            summary_extra={"status_code": e.status_code, "url": e.url},
        )

    if cfg["print_tree"]:
        preview = render_tree_lines(tree)
        logger.info("Tree Preview:\n" + "\n".join([f"{owner}/{repository}"] + preview))

    # -------------------------------------------------------------------------
    # 3) Statistics aggregation (isolated failures)
    # -------------------------------------------------------------------------
    failures: List[FileFetchFailure] = []
    stats = _aggregate_with_workers(tree, cfg["workers"], fetch_body, failures)

    logger.info(
        f"Discovered {stats.file_count} file(s) in {stats.folder_count} folder(s), "
        f"{stats.word_count} word(s)."
    )
    if failures:
        logger.warning(f"{len(failures)} file(s) could not be fetched and were counted as empty.")

    # -------------------------------------------------------------------------
    # 4) Rendering & persistence
    # -------------------------------------------------------------------------
    try:
        template, template_source = _resolve_template(cfg["template_path"])
    except OSError as e:
        msg = f"Failed to read template '{cfg['template_path']}': {e}"
        logger.error(msg)
        return create_error_result(msg, owner, repository)

    document = fill_template(template, render_tree_html(tree), render_statistics_html(stats))

    output_path = normalize_path(cfg["output_path"], os.getcwd())
    try:
        written = write_text_file(output_path, document)
    except OSError as e:
        msg = f"Failed to write output document {output_path}: {e}"
        logger.critical(msg)
        return create_error_result(msg, owner, repository)

    summary = {
        "output_path": written,
        "template": template_source,
        "workers": cfg["workers"],
        "average_size_kb": round(stats.average_size_kb, 2),
        "failed_files": len(failures),
    }

    logger.info(f"Pipeline completed successfully: {written}")
    return create_success_result(
        owner, repository, written, tree, stats, failures, summary
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _aggregate_with_workers(
        tree: DocumentTree,
        workers: int,
        fetch_body: Optional[BodyFetcher],
        failures: List[FileFetchFailure],
) -> AggregateStatistics:
    if workers <= 1:
        return aggregate(tree, fetch_body=fetch_body, failures=failures)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="BodyFetcher") as executor:
        return aggregate(tree, fetch_body=fetch_body, executor=executor, failures=failures)


def _resolve_template(template_path: str) -> Tuple[str, str]:
    """
    Pick the page template.

    An explicit path must be readable. Otherwise a template.html in the
    working directory is used when present, then the built-in template.
    """
    if template_path:
        return read_text_file(template_path), template_path

    if os.path.isfile(DEFAULT_TEMPLATE_FILE):
        return read_text_file(DEFAULT_TEMPLATE_FILE), DEFAULT_TEMPLATE_FILE

    return DEFAULT_TEMPLATE, "(built-in)"
