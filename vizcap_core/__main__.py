"""Main entry point for vizcap"""

import sys

from vizcap_core.cli.capture import main

if __name__ == '__main__':
    sys.exit(main())
