"""Data models for version resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResolutionKind(Enum):
    """How the checkout reference was chosen."""
    LATEST = "latest"
    EXACT_TAG = "exact-tag"
    CONSTRAINT = "constraint"
    BRANCH = "branch"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of resolving a requested spec against remote tags and branches."""
    kind: ResolutionKind
    requested_spec: str
    version: Optional[str] = None  # canonical version, no "v" prefix
    branch: Optional[str] = None

    @property
    def verified(self) -> bool:
        """True when a tagged version was selected and can be checked after install."""
        return self.version is not None

    @property
    def checkout_ref(self) -> Optional[str]:
        """Tag or branch name handed to the clone step."""
        if self.version is not None:
            return "v" + self.version
        return self.branch


@dataclass(frozen=True)
class InstallResult:
    """Everything the caller needs to publish after a successful install."""
    resolution: ResolutionResult
    installed_version: str
    source_dir: str
    bin_dir: str

    @property
    def verified(self) -> bool:
        return self.resolution.verified

    @property
    def checkout_ref(self) -> Optional[str]:
        return self.resolution.checkout_ref
