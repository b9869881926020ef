"""Test package initialisation for Numeric Edit."""

from pathlib import Path
import sys

# Modules live at the repository root rather than in a package, so the root
# must be importable when pytest runs from another working directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
