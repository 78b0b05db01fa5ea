"""
Runtime platform detection.

The guard compares raw identifiers, so current_platform() returns
sys.platform untouched.
"""

import sys

WINDOWS_PLATFORM = "win32"


def current_platform() -> str:
    """Return the host's platform identifier (sys.platform) at call time."""
    return sys.platform
