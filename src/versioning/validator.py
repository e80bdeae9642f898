"""Validation of version strings and version constraint expressions."""

import re

import semantic_version

from .constraints import InvalidConstraintError, VersionConstraint

_SUFFIX_RE = re.compile(r"[-+]")


class InvalidVersionError(ValueError):
    """Raised when a string is not a strict three-component semantic version."""


def strip_v_prefix(value: str) -> str:
    """Remove a single leading 'v' (tags are published as v1.2.3)."""
    return value[1:] if value.startswith("v") else value


def parse_version(raw: str) -> semantic_version.Version:
    """Parse ``raw`` as a strict semantic version.

    The numeric core must have exactly three dot-separated components, so
    shorthand such as "1.0" or "v1" is rejected even though it is a valid
    constraint.

    Raises:
        InvalidVersionError: if ``raw`` is not a complete semantic version.
    """
    if not isinstance(raw, str):
        raise InvalidVersionError(f"invalid version: {raw!r}")
    candidate = strip_v_prefix(raw)
    core = _SUFFIX_RE.split(candidate, maxsplit=1)[0]
    if len(core.split(".")) != 3:
        raise InvalidVersionError(f"invalid version: {raw!r}")
    try:
        return semantic_version.Version(candidate)
    except ValueError as exc:
        raise InvalidVersionError(f"invalid version: {raw!r}") from exc


def is_valid_version(raw: str) -> bool:
    """Return True if ``raw`` is a complete semantic version (optionally v-prefixed)."""
    try:
        parse_version(raw)
    except InvalidVersionError:
        return False
    return True


def is_valid_version_constraint(raw: str) -> bool:
    """Return True if ``raw`` parses as a version constraint (e.g. "1.0.x", ">=1.0 <2")."""
    try:
        VersionConstraint(raw)
    except InvalidConstraintError:
        return False
    return True


def same_version(left: semantic_version.Version, right: semantic_version.Version) -> bool:
    """Semver equality: numeric parts and pre-release must match, build metadata is ignored."""
    return (
        (left.major, left.minor, left.patch, tuple(left.prerelease or ()))
        == (right.major, right.minor, right.patch, tuple(right.prerelease or ()))
    )
