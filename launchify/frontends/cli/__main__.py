#!/usr/bin/env python3
"""
Entry point for ``python -m launchify.frontends.cli`` and the ``launchify`` script.
"""

import sys

from .main import LaunchifyCLI


def main(argv=None):
    """Run the CLI and return its exit code."""
    cli = LaunchifyCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
