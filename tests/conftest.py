from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src/ directory and shared test helpers are importable.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parent))
