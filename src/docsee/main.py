from __future__ import annotations

"""
Main Entry Point.

Routes execution to the CLI controller and logs any unexpected crash
before exiting with status 1.
"""

import logging
import sys
from typing import List, Optional

from docsee.interface.cli.app import main as cli_main


def main(argv: Optional[List[str]] = None) -> int:
    try:
        return cli_main(argv)
    except Exception as e:
        logging.getLogger("docsee.supervisor").critical(f"FATAL EXCEPTION DETECTED: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
