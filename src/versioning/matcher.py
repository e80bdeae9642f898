"""Selection of the highest version satisfying a requested spec."""

import logging
from typing import Optional, Sequence

import semantic_version

from .constraints import InvalidConstraintError, VersionConstraint
from .validator import InvalidVersionError, parse_version, strip_v_prefix

logger = logging.getLogger(__name__)


def find_exact(versions: Sequence[str], spec: str) -> Optional[str]:
    """Return the entry of ``versions`` equal to ``spec`` (minus a leading "v"), if any."""
    pinned = strip_v_prefix(spec)
    for candidate in versions:
        if candidate == pinned:
            return candidate
    return None


def max_satisfying(versions: Sequence[str], spec: str) -> str:
    """Find the highest version in ``versions`` that satisfies ``spec``.

    An exact string match wins before any constraint evaluation, which allows
    pinning pre-release or build-tagged versions verbatim.

    Args:
        versions: Candidate version strings, in any order.
        spec: Exact version or constraint expression.

    Returns:
        The matching version string, or "" when nothing matches or ``spec`` is
        not a valid constraint (the caller then tries branches).
    """
    exact = find_exact(versions, spec)
    if exact is not None:
        return exact

    try:
        constraint = VersionConstraint(spec)
    except InvalidConstraintError:
        logger.debug("Spec %r is not a version constraint", spec)
        return ""

    best: Optional[semantic_version.Version] = None
    for raw in versions:
        try:
            version = parse_version(raw)
        except InvalidVersionError:
            continue
        if constraint.match(version) and (best is None or version > best):
            best = version

    return str(best) if best is not None else ""
