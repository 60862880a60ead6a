from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration, repository slug parsing and
credential resolution from a dotenv file or the process environment.
"""

import logging
import os
from typing import Any, Dict, Optional, Tuple

from dotenv import dotenv_values

from docsee.domain.constants import (
    DEFAULT_ENV_FILE,
    DEFAULT_OUTPUT_FILE,
    TOKEN_ENV_VAR,
)
from docsee.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "repository": "",

        # IO Paths
        "output_path": DEFAULT_OUTPUT_FILE,
        "template_path": "",
        "env_file": DEFAULT_ENV_FILE,

        # Execution
        "workers": 1,
        "print_tree": False,
    }

# -----------------------------------------------------------------------------
# Repository & Credential Resolution
# -----------------------------------------------------------------------------

def parse_repository_slug(slug: Optional[str]) -> Tuple[str, str]:
    """
    Split an 'owner/repository' identifier.

    Raises:
        ConfigurationError: If the slug does not have exactly two non-empty parts.
    """
    parts = (slug or "").strip().split("/")
    if len(parts) != 2 or not all(p.strip() for p in parts):
        raise ConfigurationError("Repository should be specified as owner/repository.")
    return parts[0].strip(), parts[1].strip()


def load_token(env_file: str = DEFAULT_ENV_FILE) -> str:
    """
    Resolve the GitHub token.

    The dotenv file wins over the process environment when both define it.

    Args:
        env_file: Path to a dotenv file. A missing file is not an error.

    Returns:
        str: The token.

    Raises:
        ConfigurationError: If no non-empty token is found.
    """
    file_values: Dict[str, Optional[str]] = {}
    if env_file and os.path.isfile(env_file):
        file_values = dotenv_values(env_file)
        logger.debug(f"Loaded {len(file_values)} value(s) from {env_file}")

    token = file_values.get(TOKEN_ENV_VAR) or os.environ.get(TOKEN_ENV_VAR)
    if not token or not token.strip():
        raise ConfigurationError(f"{TOKEN_ENV_VAR} not set in environment or {env_file or '.env'} file.")
    return token.strip()
