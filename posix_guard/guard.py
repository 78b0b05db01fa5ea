"""
Platform guard decision.

check_platform() decides whether an install may proceed on the given host.
It is pure: output and process exit status are handled by preinstall.py.
Product profiles are only resolved on the Windows path, so a POSIX host
never reads configuration files.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from posix_guard.config import ProductProfile, Settings, get_profile
from posix_guard.platform_detect import WINDOWS_PLATFORM

logger = logging.getLogger("posix_guard.guard")


class GuardOutcome(Enum):
    OK = "ok"
    UNSUPPORTED_PLATFORM = "unsupported_platform"

    @property
    def exit_code(self) -> int:
        return 0 if self is GuardOutcome.OK else 1


@dataclass(frozen=True)
class GuardResult:
    """Result of a platform check: the outcome plus any diagnostic lines."""

    outcome: GuardOutcome
    platform_id: str
    messages: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.outcome is GuardOutcome.OK

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code


def render_messages(profile: ProductProfile) -> tuple[str, str]:
    """Render the (error, suggestion) lines for a product profile."""
    fields = {"product": profile.name, "alternative": profile.alternative}
    return (
        profile.error_template.format(**fields),
        profile.suggestion_template.format(**fields),
    )


def check_platform(
    platform_id: str,
    profile: Optional[ProductProfile] = None,
    settings: Optional[Settings] = None,
) -> GuardResult:
    """Check a platform identifier against the Windows token.

    Exact equality only: "", "WIN32", "cygwin" and unknown tokens all pass.
    When profile is None it is resolved from settings, on the Windows path only.
    """
    if platform_id != WINDOWS_PLATFORM:
        logger.debug("Platform %r is POSIX compatible, install may proceed", platform_id)
        return GuardResult(outcome=GuardOutcome.OK, platform_id=platform_id)

    if profile is None:
        profile = get_profile(settings=settings)

    logger.info("Platform %r rejected for %s", platform_id, profile.name)
    return GuardResult(
        outcome=GuardOutcome.UNSUPPORTED_PLATFORM,
        platform_id=platform_id,
        messages=render_messages(profile),
    )
