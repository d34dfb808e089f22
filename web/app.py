#!/usr/bin/env python3
"""
Jobly API launcher.

Usage:
    python web/app.py

Reads config.yaml from the project root; DATABASE_URL, WEB_HOST, WEB_PORT and
SECRET_KEY override it.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from web.backend.app import main


if __name__ == "__main__":
    main()
