"""RSS feed verifier - script entry point."""

import sys

from rssverify.cli import main

if __name__ == "__main__":
    sys.exit(main())
