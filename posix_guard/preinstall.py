#!/usr/bin/env python3
"""
Preinstall guard entry point.

Run by the package manager's preinstall hook (`posix-guard` or
`python -m posix_guard.preinstall`). Warns and fails the install on
non-POSIX systems:

    0 - POSIX compatible host, installation may proceed
    1 - Windows host, installation should be aborted
"""

import logging
import sys
from typing import Optional, TextIO

from posix_guard.config import Settings
from posix_guard.guard import GuardResult, check_platform
from posix_guard.platform_detect import current_platform

logger = logging.getLogger("posix_guard.preinstall")


def emit(result: GuardResult, script_name: str, stream: Optional[TextIO] = None) -> None:
    """Write each diagnostic line to stream (stderr by default)."""
    if stream is None:
        stream = sys.stderr
    for message in result.messages:
        print(f"{script_name}: {message}", file=stream)


def main(platform_id: Optional[str] = None) -> int:
    settings = Settings()
    logging.basicConfig(
        level=getattr(logging, settings.guard_log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if platform_id is None:
        platform_id = current_platform()

    result = check_platform(platform_id, settings=settings)
    emit(result, settings.guard_script_name)

    logger.debug("Guard finished on %r with exit code %d", platform_id, result.exit_code)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
