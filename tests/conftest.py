"""
Shared pytest configuration for posix-guard tests.

Puts the project root on sys.path and pins environment defaults BEFORE any
project imports, so Settings() resolves the same way from any working
directory.
"""

import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("GUARD_PRODUCT", "easy-checks")
os.environ.setdefault("GUARD_PROFILES_PATH", str(PROJECT_ROOT / "posix_guard" / "data" / "products.yaml"))
os.environ.setdefault("GUARD_SCRIPT_NAME", "preinstall.py")
