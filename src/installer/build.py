"""Building gop from a source checkout and querying the installed binary."""
from __future__ import annotations

import logging
import os
import shutil
from typing import List, Mapping, Optional, Sequence

try:
    from ..constants import Constants
except ImportError:
    from constants import Constants
from .process import run_command

logger = logging.getLogger(__name__)


class GopBuilder:
    """Runs the project's own install entrypoint with GOBIN pointed at ``bin_dir``."""

    def __init__(self, bin_dir: str, build_command: Optional[Sequence[str]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.bin_dir = bin_dir
        self.build_command: List[str] = list(build_command or Constants.BUILD_COMMAND)
        self._environ = environ

    def _base_env(self) -> dict:
        return dict(os.environ if self._environ is None else self._environ)

    def build_and_install(self, source_dir: str) -> None:
        """Build the checkout at ``source_dir`` and install the binaries into ``bin_dir``.

        Raises:
            CommandError: if the build exits non-zero.
        """
        logger.info("Installing gop %s ...", source_dir)
        env = self._base_env()
        env["GOBIN"] = self.bin_dir
        run_command(self.build_command, context="gop build", cwd=source_dir, env=env)
        logger.info("gop installed")

    def gop_executable(self) -> str:
        """Resolve the gop binary, preferring the one just installed."""
        env = self._base_env()
        search_path = os.pathsep.join(p for p in (self.bin_dir, env.get("PATH", "")) if p)
        return shutil.which(Constants.BINARY_NAME, path=search_path) or Constants.BINARY_NAME

    def query_installed_version(self) -> str:
        """Version reported by ``gop env GOPVERSION``, without a leading "v"."""
        output = run_command(
            [self.gop_executable(), "env", "GOPVERSION"],
            context="gop env GOPVERSION",
            capture_output=True,
        )
        version = output.strip()
        return version[1:] if version.startswith("v") else version
