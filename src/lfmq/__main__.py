"""Allow ``python -m lfmq`` to run the command line interface."""

import sys

from lfmq.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
