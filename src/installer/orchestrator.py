"""Resolution of the checkout reference and the install run built around it."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

try:
    from ..common.logging_utils import extra_context, is_debug_enabled, safe_url
    from ..constants import Constants
    from ..versioning.matcher import max_satisfying
    from ..versioning.models import InstallResult, ResolutionKind, ResolutionResult
    from ..versioning.sorter import sort_versions
    from ..versioning.validator import is_valid_version, strip_v_prefix
except ImportError:
    from common.logging_utils import extra_context, is_debug_enabled, safe_url
    from constants import Constants
    from versioning.matcher import max_satisfying
    from versioning.models import InstallResult, ResolutionKind, ResolutionResult
    from versioning.sorter import sort_versions
    from versioning.validator import is_valid_version, strip_v_prefix
from .build import GopBuilder
from .config import InstallConfig
from .errors import NoSatisfyingReferenceError, NoValidTagsError
from .git import GitRemote
from .inputs import resolve_version_input
from .verifier import check_version

logger = logging.getLogger(__name__)


def valid_versions(tags: Iterable[str]) -> List[str]:
    """Filter raw tag names to complete semantic versions, newest first."""
    return sort_versions(tag for tag in tags if is_valid_version(tag))


def resolve_reference(
    spec: str,
    tags: Iterable[str],
    fetch_branches: Callable[[], List[str]],
    repo_url: Optional[str] = None,
) -> ResolutionResult:
    """Pick the version or branch to check out for ``spec``.

    Branches are only fetched when no tagged version satisfies ``spec``.

    Raises:
        NoValidTagsError: if the latest version is requested and no tag is a valid version.
    """
    versions = valid_versions(tags)

    if not spec or spec == Constants.LATEST:
        if not versions:
            raise NoValidTagsError(safe_url(repo_url) if repo_url else None)
        latest = versions[0]
        logger.warning("No gop-version specified, using latest version: %s", latest)
        return ResolutionResult(ResolutionKind.LATEST, spec, version=latest)

    selected = max_satisfying(versions, spec)
    if selected:
        kind = ResolutionKind.EXACT_TAG if selected == strip_v_prefix(spec) else ResolutionKind.CONSTRAINT
        return ResolutionResult(kind, spec, version=selected)

    logger.warning("No gop-version found that satisfies '%s', trying branches...", spec)
    if spec in fetch_branches():
        return ResolutionResult(ResolutionKind.BRANCH, spec, branch=spec)
    return ResolutionResult(ResolutionKind.UNRESOLVED, spec)


class Installer:
    """Runs resolve, clone, build and verify for one InstallConfig.

    Collaborators are injectable; ``version_query`` defaults to asking the
    installed gop binary. ``on_resolved`` receives the ResolutionResult before
    cloning and ``on_built`` the bin dir right after the build, before any
    verification.
    """

    def __init__(
        self,
        config: InstallConfig,
        remote: Optional[GitRemote] = None,
        builder: Optional[GopBuilder] = None,
        version_query: Optional[Callable[[], str]] = None,
        on_resolved: Optional[Callable[[ResolutionResult], None]] = None,
        on_built: Optional[Callable[[str], object]] = None,
    ):
        self.config = config
        self.on_resolved = on_resolved
        self.on_built = on_built
        self.remote = remote if remote is not None else GitRemote(config.repo_url)
        self.builder = builder if builder is not None else GopBuilder(config.bin_dir, config.build_command)
        self.version_query = version_query if version_query is not None else self.builder.query_installed_version

    def resolve(self) -> ResolutionResult:
        """Resolve the configured spec to a checkout reference without installing."""
        spec = resolve_version_input(self.config.version, self.config.version_file)
        result = resolve_reference(spec, self.remote.fetch_tags(), self.remote.fetch_branches,
                                   repo_url=self.config.repo_url)
        if result.kind is ResolutionKind.UNRESOLVED:
            raise NoSatisfyingReferenceError(spec)

        if is_debug_enabled(logger):
            logger.debug(
                "Resolved checkout reference",
                extra=extra_context(
                    event="decision",
                    component="orchestrator",
                    action="resolve",
                    outcome=result.kind.value,
                    target=result.checkout_ref,
                ),
            )
        if result.verified:
            logger.info("Selected version %s by spec %s", result.version, spec)
        else:
            logger.warning("Using branch '%s' for gop-version; the installed version will not be verified", spec)
        return result

    def run(self) -> InstallResult:
        """Resolve, clone, build and verify.

        Returns:
            InstallResult describing what was installed; publishing it is up to the caller.
        """
        resolution = self.resolve()
        if self.on_resolved is not None:
            self.on_resolved(resolution)
        source_dir = self.remote.clone_single_ref(resolution.checkout_ref, self.config.work_dir)
        self.builder.build_and_install(source_dir)
        if self.on_built is not None:
            self.on_built(self.config.bin_dir)

        if resolution.verified:
            check_version(resolution.version, self.version_query)

        installed = self.version_query()
        return InstallResult(
            resolution=resolution,
            installed_version=installed,
            source_dir=source_dir,
            bin_dir=self.config.bin_dir,
        )
