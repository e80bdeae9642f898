"""Shared subprocess helper used by the git and build collaborators.

Encapsulates command execution and failure handling so callers avoid
duplicating try/except blocks around ``subprocess.run``.
"""
from __future__ import annotations

import logging
import subprocess
from typing import Mapping, Optional, Sequence

try:
    from ..common.logging_utils import Timer, extra_context, is_debug_enabled
except ImportError:
    from common.logging_utils import Timer, extra_context, is_debug_enabled
from .errors import CommandError

logger = logging.getLogger(__name__)


def run_command(
    command: Sequence[str],
    *,
    context: str,
    cwd: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    capture_output: bool = False,
) -> str:
    """Run ``command`` and return its stdout when captured.

    Output is streamed to the console unless ``capture_output`` is set.

    Raises:
        CommandError: if the executable is missing or exits non-zero.
    """
    cmd = list(command)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "Command start",
                extra=extra_context(
                    event="command_start",
                    component="process",
                    action=cmd[0],
                    context=context,
                    cwd=cwd,
                ),
            )
        try:
            result = subprocess.run(  # noqa: S603
                cmd,
                cwd=cwd,
                env=dict(env) if env is not None else None,
                capture_output=capture_output,
                text=True,
                check=False,
            )
        except OSError as exc:  # includes FileNotFoundError for a missing binary
            raise CommandError(f"{context} failed to start: {exc}", cmd) from exc

        if is_debug_enabled(logger):
            logger.debug(
                "Command finished",
                extra=extra_context(
                    event="command_exit",
                    component="process",
                    action=cmd[0],
                    context=context,
                    outcome="success" if result.returncode == 0 else "failure",
                    returncode=result.returncode,
                    duration_ms=t.duration_ms(),
                ),
            )

    if result.returncode != 0:
        detail = (result.stderr or "").strip() if capture_output else ""
        message = f"{context} failed with exit status {result.returncode}"
        if detail:
            message = f"{message}: {detail}"
        raise CommandError(message, cmd, result.returncode)

    return result.stdout if capture_output and result.stdout is not None else ""
