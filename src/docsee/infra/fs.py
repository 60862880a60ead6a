from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization, template loading and persistence of the generated
document.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and '~'. Reverts to fallback when the
    input is empty.
    """
    p = (path or "").strip() or fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# READ / WRITE API
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text_file(path: str, content: str) -> str:
    """
    Persist text to disk, creating parent directories as needed.

    Args:
        path: Destination file.
        content: Full document text.

    Returns:
        str: Absolute path written.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    abs_path = os.path.abspath(path)
    parent = os.path.dirname(abs_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(abs_path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.debug(f"Wrote {len(content)} characters to {abs_path}")
    return abs_path
