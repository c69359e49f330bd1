"""Allow ``python -m lit2md``."""

import sys

from lit2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
