"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    COMMAND_ERROR = 2
    RESOLUTION_ERROR = 3
    VERIFICATION_ERROR = 4


class Outputs(Enum):
    """Names of the step outputs published for downstream jobs.

    Args:
        Enum (string): Output names.
    """

    VERSION = "gop-version"
    VERSION_VERIFIED = "gop-version-verified"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    GOPLUS_REPO = "https://github.com/goplus/gop.git"
    LATEST = "latest"
    WORKSPACE_FILES = ["gop.mod", "gop.work"]
    WORKSPACE_VERSION_PATTERN = r"gop (\d+(\.\d+)*)"
    TAG_REF_PREFIX = "refs/tags/"
    BRANCH_REF_PREFIX = "refs/heads/"
    PEELED_TAG_SUFFIX = "^{}"

    BUILD_COMMAND = ["go", "run", "cmd/make.go", "-install"]
    BINARY_NAME = "gop"
    DEFAULT_WORK_DIR = "workdir"
    DEFAULT_BIN_DIR = "bin"

    # Action inputs arrive as INPUT_<NAME> environment variables
    ENV_INPUT_VERSION = "INPUT_GOP_VERSION"
    ENV_INPUT_VERSION_FILE = "INPUT_GOP_VERSION_FILE"
    ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"
    ENV_GITHUB_PATH = "GITHUB_PATH"
    ENV_GITHUB_ACTIONS = "GITHUB_ACTIONS"
    ENV_LOG_LEVEL = "SETUP_GOP_LOG_LEVEL"
    CONFIG_SECTION = "setup-gop"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
