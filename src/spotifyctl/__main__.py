"""Allow ``python -m spotifyctl``."""

import sys

from spotifyctl.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
