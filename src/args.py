"""Argument parsing functionality for setup-gop."""

import argparse
from typing import List, Optional

from constants import Constants


def parse_args(argv: Optional[List[str]] = None):
    """Parses the arguments passed to the program.

    Flags left unset fall back to the INPUT_GOP_* environment variables and
    then to the config file.
    """
    parser = argparse.ArgumentParser(
        prog="setup-gop",
        description=(
            "setup-gop - resolve, build and install a Go+ (gop) toolchain version"
        ),
        add_help=True,
    )

    parser.add_argument("--gop-version",
                        dest="GOP_VERSION",
                        help="Version spec: exact version, semver range, branch name or 'latest'",
                        action="store", type=str)
    parser.add_argument("--gop-version-file",
                        dest="GOP_VERSION_FILE",
                        help="Read the version spec from a file (gop.mod, gop.work or plain text)",
                        action="store", type=str)
    parser.add_argument("--repository",
                        dest="REPO_URL",
                        help=f"Git repository to resolve and clone (default: {Constants.GOPLUS_REPO})",
                        action="store", type=str)
    parser.add_argument("--workdir",
                        dest="WORK_DIR",
                        help="Directory the repository is cloned into; emptied first (default: $HOME/workdir)",
                        action="store", type=str)
    parser.add_argument("--bindir",
                        dest="BIN_DIR",
                        help="Install destination for the built binaries (default: $HOME/bin)",
                        action="store", type=str)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
