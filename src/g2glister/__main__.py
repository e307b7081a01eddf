"""Entry point for running as module: python -m g2glister"""

import sys

from g2glister.cli.commands import main

if __name__ == "__main__":
    sys.exit(main())
