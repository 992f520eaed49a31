"""Domain Checker CLI - check whether domain names are registered via DNS."""

import sys

from domain_checker.cli import main

if __name__ == "__main__":
    sys.exit(main())
