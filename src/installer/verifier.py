"""Post-install check that the built binary is the version that was selected."""
from __future__ import annotations

import logging
from typing import Callable

try:
    from ..versioning.validator import InvalidVersionError, parse_version, same_version
except ImportError:
    from versioning.validator import InvalidVersionError, parse_version, same_version
from .errors import VerificationError, VersionMismatchError

logger = logging.getLogger(__name__)


def check_version(expected: str, query_version: Callable[[], str]) -> str:
    """Compare the selected version with what the installed binary reports.

    This is strict semver equality on concrete versions, not a constraint
    check; build metadata is ignored.

    Args:
        expected: The version selected during resolution.
        query_version: Callable returning the installed binary's version.

    Returns:
        The installed version string.

    Raises:
        VerificationError: if either version does not parse.
        VersionMismatchError: if the versions differ.
    """
    logger.info("Testing gop %s ...", expected)
    actual_raw = query_version()

    try:
        wanted = parse_version(expected)
    except InvalidVersionError as exc:
        raise VerificationError(f"invalid version spec: {expected}") from exc

    try:
        actual = parse_version(actual_raw)
    except InvalidVersionError as exc:
        raise VerificationError(f"invalid installed version: {actual_raw}") from exc

    if not same_version(wanted, actual):
        raise VersionMismatchError(str(wanted), str(actual))

    logger.info("Installed gop version %s", actual_raw)
    return actual_raw
