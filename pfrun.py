#!/usr/bin/env python3
"""pfreporter CLI entrypoint -- run without pip install.

Usage:
    python pfrun.py serve
    python pfrun.py extract dbt2 fireweed
    python pfrun.py --help
"""

import sys
from pathlib import Path

# Add src/ to import path so the pfreporter package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from pfreporter.cli import app

if __name__ == "__main__":
    app()
