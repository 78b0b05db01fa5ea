"""
posix-guard: preinstall check that fails package installation on non-POSIX systems.
"""

from posix_guard.guard import GuardOutcome, GuardResult, check_platform, render_messages
from posix_guard.config import ProductProfile, Settings, get_profile, load_profiles

__version__ = "0.1.0"

__all__ = [
    "GuardOutcome",
    "GuardResult",
    "check_platform",
    "render_messages",
    "ProductProfile",
    "Settings",
    "get_profile",
    "load_profiles",
]
