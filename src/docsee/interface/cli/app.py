from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration and
credential resolution, pipeline execution and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from docsee.core.pipeline.engine import run_pipeline
from docsee.domain.config import get_default_config, load_token, parse_repository_slug
from docsee.domain.errors import ConfigurationError
from docsee.domain.pipeline_models import PipelineResult
from docsee.infra.logging import LoggingConfig, configure_logging, get_logger
from docsee.interface.cli import args as cli_args

logger = get_logger(__name__)

USAGE = "Usage: docsee --github owner/repository"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on a fatal failure, 130 when interrupted.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if not args.repository:
        print(USAGE, file=sys.stderr)
        return 1

    # 2. Logging bootstrap
    configure_logging(LoggingConfig(
        debug=args.debug,
        console=True,
        log_file=args.log_file,
    ))

    # 3. Configuration and credential resolution
    cfg: Dict[str, Any] = get_default_config()
    cfg.update(cli_args.args_to_overrides(args))
    logger.debug(f"CLI configuration resolved: {cfg}")

    try:
        parse_repository_slug(cfg["repository"])
        token = load_token(cfg["env_file"])
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 4. Pipeline execution
    try:
        result = run_pipeline(cfg, token)
    except KeyboardInterrupt:
        print("Interrupted by user.", file=sys.stderr)
        return 130

    # 5. Output rendering
    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    stats = result.statistics
    print(f"Repository: {result.owner}/{result.repository}")
    if stats is not None:
        print(f"Folder count: {stats.folder_count}")
        print(f"File count: {stats.file_count}")
        print(f"Word count: {stats.word_count}")
        print(f"Average file size: {stats.average_size_kb:.2f} KB")

    if result.failures:
        print(f"Warnings: {len(result.failures)} file(s) could not be fetched")
        for failure in result.failures:
            print(f"  - {failure.name}: {failure.error}")

    print(f"Output: {result.output_path}")


if __name__ == "__main__":
    sys.exit(main())
