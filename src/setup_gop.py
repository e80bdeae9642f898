"""setup-gop - resolve, build and install a Go+ toolchain inside a CI pipeline.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import Constants, ExitCodes, Outputs
from args import parse_args

# Support both source/tests (src.*) and installed console script layouts
try:
    from src.common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
    from src.common.workflow import add_to_path, set_output
    from src.installer.config import InstallConfig
    from src.installer.errors import InstallError
    from src.installer.orchestrator import Installer
except ImportError:  # Fall back when 'src' package is not available
    from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
    from common.workflow import add_to_path, set_output
    from installer.config import InstallConfig
    from installer.errors import InstallError
    from installer.orchestrator import Installer

logger = logging.getLogger(__name__)


def _setup_logging(args) -> None:
    """Configure logging based on CLI arguments."""
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        add_file_handler(log_file)
        logger.info("Logging to file: %s", log_file)


def publish_resolution(resolution) -> None:
    """Tell later steps whether the selected reference will be verified."""
    set_output(Outputs.VERSION_VERIFIED.value, "true" if resolution.verified else "false")


def publish(result) -> None:
    """Expose the installed version to later workflow steps."""
    set_output(Outputs.VERSION.value, result.installed_version)


def main(argv=None, installer_factory=Installer):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        config = InstallConfig.from_args(args)
        installer = installer_factory(config, on_resolved=publish_resolution, on_built=add_to_path)
        result = installer.run()
        publish(result)
    except InstallError as exc:
        logger.error("%s", exc)
        sys.exit(exc.exit_code.value)

    logger.info("gop %s installed to %s", result.installed_version, result.bin_dir)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
