"""
Main entry point for the smartschool_client package.

Allows running the client as: python -m smartschool_client
"""

import sys

from smartschool_client.cli import main

if __name__ == "__main__":
    sys.exit(main())
