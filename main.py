# -*- coding: utf-8 -*-
"""
CAD file organizer entry point

Usage:
    python main.py <source> <destination> [MOVE|COPY]
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from cad_organizer.cli import main


if __name__ == "__main__":
    sys.exit(main())
