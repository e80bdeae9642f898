"""Resolution of the requested version spec from inputs or a version file."""
from __future__ import annotations

import logging
import os
import re
from typing import Optional

try:
    from ..constants import Constants
except ImportError:
    from constants import Constants
from .errors import VersionFileError, VersionFileNotFoundError

logger = logging.getLogger(__name__)

_WORKSPACE_VERSION_RE = re.compile(Constants.WORKSPACE_VERSION_PATTERN)


def resolve_version_input(version: Optional[str], version_file: Optional[str]) -> str:
    """Return the requested version spec.

    An explicit version wins over a version file. An empty result means
    "latest".

    Raises:
        VersionFileNotFoundError: if only a version file is given and it does not exist.
    """
    if version and version_file:
        logger.warning(
            "Both gop-version and gop-version-file inputs are specified, only gop-version will be used"
        )
        return version

    if version:
        return version

    if version_file:
        if not os.path.exists(version_file):
            raise VersionFileNotFoundError(version_file)
        return parse_version_file(version_file)

    return ""


def parse_version_file(path: str) -> str:
    """Extract a version spec from ``path``.

    gop.mod / gop.work files must start with a ``gop X.Y.Z`` directive; when
    they don't, "" is returned. Any other file holds the spec as plain text.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            content = fh.read()
    except OSError as exc:
        raise VersionFileError(f"failed to read gop version file {path}: {exc}") from exc

    if os.path.basename(path) in Constants.WORKSPACE_FILES:
        match = _WORKSPACE_VERSION_RE.match(content)
        if match is None:
            logger.debug("No gop directive at the start of %s", path)
            return ""
        return match.group(1)

    return content.strip()
