"""Resolve, build and install the gop toolchain."""

from .build import GopBuilder
from .config import InstallConfig, load_config_file
from .errors import (
    CommandError,
    ConfigError,
    InstallError,
    NoSatisfyingReferenceError,
    NoValidTagsError,
    VerificationError,
    VersionFileError,
    VersionFileNotFoundError,
    VersionMismatchError,
)
from .git import GitRemote
from .inputs import parse_version_file, resolve_version_input
from .orchestrator import Installer, resolve_reference, valid_versions
from .verifier import check_version

__all__ = [
    "CommandError",
    "ConfigError",
    "GitRemote",
    "GopBuilder",
    "InstallConfig",
    "InstallError",
    "Installer",
    "NoSatisfyingReferenceError",
    "NoValidTagsError",
    "VerificationError",
    "VersionFileError",
    "VersionFileNotFoundError",
    "VersionMismatchError",
    "check_version",
    "load_config_file",
    "parse_version_file",
    "resolve_reference",
    "resolve_version_input",
    "valid_versions",
]
