"""Remote repository access through the git CLI."""
from __future__ import annotations

import logging
import os
import shutil
from typing import List

try:
    from ..common.logging_utils import safe_url
    from ..constants import Constants
except ImportError:
    from common.logging_utils import safe_url
    from constants import Constants
from .errors import CommandError
from .process import run_command

logger = logging.getLogger(__name__)


def parse_ls_remote(output: str, prefix: str) -> List[str]:
    """Extract ref names below ``prefix`` from ``git ls-remote`` output.

    Each line is "<sha>\\t<ref>". Peeled entries of annotated tags
    ("refs/tags/v1.0.0^{}") duplicate the tag itself and are skipped.
    """
    names = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < 2:
            continue
        ref = parts[1].strip()
        if ref.endswith(Constants.PEELED_TAG_SUFFIX) or not ref.startswith(prefix):
            continue
        names.append(ref[len(prefix):])
    return names


def repo_dir_name(repo_url: str) -> str:
    """Directory name git clone creates for ``repo_url``."""
    name = repo_url.rstrip("/").rsplit("/", 1)[-1]
    name = name.rsplit(":", 1)[-1]
    return name[:-len(".git")] if name.endswith(".git") else name


class GitRemote:
    """Lists refs of, and clones from, a single remote repository."""

    def __init__(self, repo_url: str = Constants.GOPLUS_REPO):
        self.repo_url = repo_url

    def _ls_remote(self, kind: str) -> str:
        return run_command(
            ["git", "-c", "versionsort.suffix=-", "ls-remote", kind, "--sort=v:refname", self.repo_url],
            context=f"git ls-remote {kind} {safe_url(self.repo_url)}",
            capture_output=True,
        )

    def fetch_tags(self) -> List[str]:
        """Tag names with the refs/tags/ and leading "v" prefixes removed."""
        tags = parse_ls_remote(self._ls_remote("--tags"), Constants.TAG_REF_PREFIX)
        tags = [tag[1:] if tag.startswith("v") else tag for tag in tags]
        logger.debug("Fetched %d tags from %s", len(tags), safe_url(self.repo_url))
        return tags

    def fetch_branches(self) -> List[str]:
        """Branch names with the refs/heads/ prefix removed."""
        branches = parse_ls_remote(self._ls_remote("--heads"), Constants.BRANCH_REF_PREFIX)
        logger.debug("Fetched %d branches from %s", len(branches), safe_url(self.repo_url))
        return branches

    def clone_single_ref(self, ref: str, work_dir: str) -> str:
        """Shallow-clone ``ref`` into a freshly emptied ``work_dir``.

        Returns:
            Path of the checked out source tree.
        """
        try:
            if os.path.exists(work_dir):
                shutil.rmtree(work_dir)
            os.makedirs(work_dir)
        except OSError as exc:
            raise CommandError(f"failed to prepare work directory {work_dir}: {exc}", ["mkdir", work_dir]) from exc

        logger.info("Cloning gop %s to %s ...", ref, work_dir)
        run_command(
            ["git", "clone", "--depth", "1", "--branch", ref, self.repo_url],
            context=f"git clone {safe_url(self.repo_url)}@{ref}",
            cwd=work_dir,
        )
        logger.info("gop cloned")
        return os.path.join(work_dir, repo_dir_name(self.repo_url))
