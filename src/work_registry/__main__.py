"""Run a work from the command line: ``python -m work_registry [URI]``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
