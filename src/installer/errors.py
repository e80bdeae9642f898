"""Exceptions raised while resolving and installing gop.

Every error is fatal for the run; ``exit_code`` tells the entry point which
process exit status to use.
"""
from __future__ import annotations

from typing import Optional, Sequence

try:
    from ..constants import ExitCodes
except ImportError:
    from constants import ExitCodes


class InstallError(Exception):
    """Base class for all setup-gop failures."""

    exit_code = ExitCodes.RESOLUTION_ERROR


class ConfigError(InstallError):
    """Configuration file could not be parsed."""

    exit_code = ExitCodes.FILE_ERROR


class VersionFileError(InstallError):
    """Version file could not be read."""

    exit_code = ExitCodes.FILE_ERROR


class VersionFileNotFoundError(VersionFileError):
    """The version file path given as input does not exist."""

    def __init__(self, path: str):
        super().__init__(f"the specified gop version file at: {path} does not exist")
        self.path = path


class NoValidTagsError(InstallError):
    """The remote repository has no tag that is a valid semantic version."""

    def __init__(self, repo_url: Optional[str] = None):
        where = f" in {repo_url}" if repo_url else ""
        super().__init__(f"no valid gop version tags found{where}")


class NoSatisfyingReferenceError(InstallError):
    """The requested spec matches neither a version nor a branch."""

    def __init__(self, spec: str):
        super().__init__(f"no gop-version found that satisfies '{spec}' in branches or tags")
        self.spec = spec


class CommandError(InstallError):
    """An external command (git, go, gop) failed or could not be started."""

    exit_code = ExitCodes.COMMAND_ERROR

    def __init__(self, message: str, command: Sequence[str], returncode: Optional[int] = None):
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode


class VerificationError(InstallError):
    """The installed binary's version could not be checked."""

    exit_code = ExitCodes.VERIFICATION_ERROR


class VersionMismatchError(VerificationError):
    """The installed binary reports a different version than the one selected."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"installed gop version {actual} does not match expected version {expected}")
        self.expected = expected
        self.actual = actual
