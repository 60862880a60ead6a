from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the pipeline.
"""

import argparse
from typing import Any, Dict

from docsee.domain.constants import DEFAULT_ENV_FILE, DEFAULT_OUTPUT_FILE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docsee CLI.

    '--github' is checked by the application rather than argparse so that a
    missing value exits with status 1 and a usage hint.
    """
    p = argparse.ArgumentParser(
        prog="docsee",
        description="Explore the markdown documentation of a GitHub repository.",
    )

    # --- Target ---
    p.add_argument(
        "--github",
        dest="repository",
        metavar="OWNER/REPO",
        default=None,
        help="Repository to explore, as owner/repository.",
    )

    # --- Input / Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=f"Generated HTML document (default: {DEFAULT_OUTPUT_FILE}).",
    )
    p.add_argument(
        "--template",
        dest="template_path",
        default=None,
        help="HTML template containing {{content}} and {{analysis}} placeholders.",
    )
    p.add_argument(
        "--env-file",
        dest="env_file",
        default=None,
        help=f"dotenv file providing GITHUB_TOKEN (default: {DEFAULT_ENV_FILE}).",
    )

    # --- Execution ---
    p.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parallel file downloads during aggregation (default: 1).",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log an ASCII preview of the discovered tree.",
    )

    # --- Reporting & Diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to a rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options the user did not pass are left out so defaults survive.
    """
    overrides: Dict[str, Any] = {}

    for key in ("repository", "output_path", "template_path", "env_file", "workers"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value

    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
