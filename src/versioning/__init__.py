"""Semantic version parsing, ordering and constraint matching."""

from .constraints import InvalidConstraintError, VersionConstraint
from .matcher import find_exact, max_satisfying
from .models import InstallResult, ResolutionKind, ResolutionResult
from .sorter import sort_versions
from .validator import (
    InvalidVersionError,
    is_valid_version,
    is_valid_version_constraint,
    parse_version,
    same_version,
    strip_v_prefix,
)

__all__ = [
    "InstallResult",
    "InvalidConstraintError",
    "InvalidVersionError",
    "ResolutionKind",
    "ResolutionResult",
    "VersionConstraint",
    "find_exact",
    "is_valid_version",
    "is_valid_version_constraint",
    "max_satisfying",
    "parse_version",
    "same_version",
    "sort_versions",
    "strip_v_prefix",
]
