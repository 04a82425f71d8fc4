#!/usr/bin/env python3
"""Allow ``python -m launchify``."""

import sys

from launchify.frontends.cli.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
