"""Runtime configuration for an install run.

Values are layered from lowest to highest precedence: built-in defaults, the
optional YAML config file, action inputs from the environment, CLI flags.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

import yaml

try:
    from ..constants import Constants
except ImportError:
    from constants import Constants
from .errors import ConfigError

logger = logging.getLogger(__name__)

# config file key -> InstallConfig attribute
_FILE_KEYS = {
    "gop-version": "version",
    "gop-version-file": "version_file",
    "repository": "repo_url",
    "workdir": "work_dir",
    "bindir": "bin_dir",
}


def _home(environ: Mapping[str, str]) -> str:
    return environ.get("HOME") or os.path.expanduser("~")


def _clean(value: Any) -> Optional[str]:
    """Treat unset and empty inputs alike."""
    if value is None:
        return None
    text = str(value)
    return text if text != "" else None


@dataclass
class InstallConfig:
    """Inputs and locations for one resolution/install run."""

    version: Optional[str] = None
    version_file: Optional[str] = None
    repo_url: str = Constants.GOPLUS_REPO
    work_dir: str = field(default_factory=lambda: os.path.join(_home(os.environ), Constants.DEFAULT_WORK_DIR))
    bin_dir: str = field(default_factory=lambda: os.path.join(_home(os.environ), Constants.DEFAULT_BIN_DIR))
    build_command: List[str] = field(default_factory=lambda: list(Constants.BUILD_COMMAND))

    @classmethod
    def defaults(cls, environ: Optional[Mapping[str, str]] = None) -> "InstallConfig":
        env = os.environ if environ is None else environ
        home = _home(env)
        return cls(
            work_dir=os.path.join(home, Constants.DEFAULT_WORK_DIR),
            bin_dir=os.path.join(home, Constants.DEFAULT_BIN_DIR),
        )

    def merged(self, **overrides: Any) -> "InstallConfig":
        """Return a copy with every non-empty override applied."""
        values = {key: _clean(value) for key, value in overrides.items()}
        return replace(self, **{key: value for key, value in values.items() if value is not None})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 base: Optional["InstallConfig"] = None) -> "InstallConfig":
        """Apply action inputs (INPUT_GOP_VERSION, INPUT_GOP_VERSION_FILE)."""
        env = os.environ if environ is None else environ
        config = base if base is not None else cls.defaults(env)
        return config.merged(
            version=env.get(Constants.ENV_INPUT_VERSION),
            version_file=env.get(Constants.ENV_INPUT_VERSION_FILE),
        )

    @classmethod
    def from_args(cls, args: Any, environ: Optional[Mapping[str, str]] = None) -> "InstallConfig":
        """Build the effective configuration for parsed CLI arguments."""
        env = os.environ if environ is None else environ
        config = cls.defaults(env)

        file_values = load_config_file(getattr(args, "CONFIG", None))
        if file_values:
            config = config.merged(**file_values)

        config = cls.from_env(env, base=config)
        return config.merged(
            version=getattr(args, "GOP_VERSION", None),
            version_file=getattr(args, "GOP_VERSION_FILE", None),
            repo_url=getattr(args, "REPO_URL", None),
            work_dir=getattr(args, "WORK_DIR", None),
            bin_dir=getattr(args, "BIN_DIR", None),
        )


def load_config_file(config_path: Optional[str]) -> Dict[str, str]:
    """Load InstallConfig overrides from a YAML file.

    Args:
        config_path: Path to the YAML config, or None.

    Returns:
        Mapping of InstallConfig attribute names to values; empty when no path
        is given or the file does not exist.

    Raises:
        ConfigError: if the file is not valid YAML or not a mapping.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            # BaseLoader keeps scalars as strings: "1.10" must not become 1.1
            data = yaml.load(fh, Loader=yaml.BaseLoader) or {}  # noqa: S506
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to load config {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"config {config_path} must be a mapping")

    # Extract our section if present
    section = data.get(Constants.CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"section '{Constants.CONFIG_SECTION}' in {config_path} must be a mapping")

    values: Dict[str, str] = {}
    for key, value in section.items():
        attr = _FILE_KEYS.get(key)
        if attr is None:
            logger.warning("Ignoring unknown config key '%s' in %s", key, config_path)
            continue
        values[attr] = value
    logger.info("Loaded config from: %s", config_path)
    return values
