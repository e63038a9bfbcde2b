#!/usr/bin/env python3
"""
PlanTemplates - Create test plans from bundled templates.

Entry point for the application.
"""

import sys

from plantemplates.cli import main

if __name__ == "__main__":
    sys.exit(main())
