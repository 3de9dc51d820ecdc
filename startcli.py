"""Run the blogflow CLI from a source checkout: `python startcli.py posts --export posts.json`."""
from __future__ import annotations

import sys

from blogflow.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
