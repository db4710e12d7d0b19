"""Allow ``python -m lastfmapi``."""

import sys

from lastfmapi.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
