"""Publishing helpers for the CI runner's file-based command channels.

Step outputs are appended to the file named by ``GITHUB_OUTPUT`` and extra
executable directories to the file named by ``GITHUB_PATH``.
"""
from __future__ import annotations

import logging
import os
import uuid
from typing import MutableMapping, Optional

try:
    from ..constants import Constants
except ImportError:
    from constants import Constants

logger = logging.getLogger(__name__)


def _append_line(path: str, line: str) -> None:
    with open(path, "a", encoding="utf-8") as fh:
        fh.write(line)


def set_output(name: str, value: str, environ: Optional[MutableMapping[str, str]] = None) -> bool:
    """Publish a step output.

    Returns False (after a warning) when no output file is configured, which is
    the case when running outside of a workflow.
    """
    env = os.environ if environ is None else environ
    output_file = env.get(Constants.ENV_GITHUB_OUTPUT)
    if not output_file:
        logger.warning("%s is not set, cannot set output %s=%s", Constants.ENV_GITHUB_OUTPUT, name, value)
        return False

    if "\n" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        _append_line(output_file, f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    else:
        _append_line(output_file, f"{name}={value}\n")
    logger.debug("Set output %s=%s", name, value)
    return True


def add_to_path(directory: str, environ: Optional[MutableMapping[str, str]] = None) -> bool:
    """Make ``directory`` visible on PATH for this process and later steps."""
    env = os.environ if environ is None else environ
    current = env.get("PATH", "")
    env["PATH"] = directory + os.pathsep + current if current else directory

    path_file = env.get(Constants.ENV_GITHUB_PATH)
    if not path_file:
        logger.warning("%s is not set, cannot add %s to PATH for later steps", Constants.ENV_GITHUB_PATH, directory)
        return False
    _append_line(path_file, directory + "\n")
    return True
