#!/usr/bin/env python3
"""
JSON Workbench - Main Entry Point

This module allows the package to be run as a script:
    python -m json_workbench
"""

# Standard library imports
import sys

# Local imports
from json_workbench.adapters.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
