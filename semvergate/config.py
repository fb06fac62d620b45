"""Configuration of the gate: user-level defaults and the per-run GateConfiguration"""

import configparser
import logging
import os
import platform
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from semvergate.constants import (
    APP_NAME,
    DEFAULT_OUTPUT_FILE_NAME,
    DEFAULT_REPOSITORY_ROOT,
)

logger = logging.getLogger(__name__)

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/semvergate").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for the user configuration file.

    Missing sections or keys fall back to the given default.

    Usage:
        config = ConfigAccessor()
        root = config.get('repository', 'root', default='~/.m2/repository')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            logger.debug(f"Reading configuration from {self.config_path}")
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def section(self, section: str) -> Dict[str, str]:
        """
        Get all options of a section as a plain dict.

        Returns:
            Mapping of keys to values, empty if the section doesn't exist
        """
        if not self.config.has_section(section):
            return {}
        return dict(self.config[section])


def get_repository_root(accessor: Optional[ConfigAccessor] = None) -> Path:
    """
    Get the configured root of the local artifact repository.

    Returns:
        Path to the repository root (defaults to ~/.m2/repository)
    """
    accessor = accessor or ConfigAccessor()
    root = accessor.get("repository", "root", DEFAULT_REPOSITORY_ROOT)
    return Path(root).expanduser()


def get_analyzer_command(accessor: Optional[ConfigAccessor] = None) -> str:
    accessor = accessor or ConfigAccessor()
    return accessor.get("analyzer", "command", "")


# Keys as they appear in build files and config files, mapped to field names.
_KEY_ALIASES = {
    "skip": "skip",
    "ignoreSnapshots": "ignore_snapshots",
    "haltOnFailure": "halt_on_failure",
    "failOnIncorrectVersion": "fail_on_incorrect_version",
    "allowHigherVersions": "allow_higher_versions",
    "outputFileName": "output_file_name",
    "overwriteOutputFile": "overwrite_output_file",
    "excludePackages": "exclude_packages",
    "excludeFiles": "exclude_files",
}


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word not in configparser.ConfigParser.BOOLEAN_STATES:
        raise ValueError(f"Invalid boolean for '{key}': {value!r}")
    return configparser.ConfigParser.BOOLEAN_STATES[word]


def _to_patterns(value: Any) -> Tuple[str, ...]:
    """Accept a list of patterns or a comma separated string of them."""
    if value is None:
        return ()
    items = [value] if isinstance(value, str) else list(value)
    patterns = []
    for item in items:
        patterns.extend(p.strip() for p in str(item).split(","))
    return tuple(p for p in patterns if p)


@dataclass(frozen=True)
class GateConfiguration:
    """
    Settings for one gate run.

    Constructed once per invocation and never mutated; use ``with_overrides``
    to derive a configuration with some settings changed.
    """

    skip: bool = False
    ignore_snapshots: bool = True
    halt_on_failure: bool = True
    fail_on_incorrect_version: bool = False
    allow_higher_versions: bool = True
    output_file_name: str = DEFAULT_OUTPUT_FILE_NAME
    overwrite_output_file: bool = True
    exclude_packages: Tuple[str, ...] = ()
    exclude_files: Tuple[str, ...] = ()

    @property
    def writes_output(self) -> bool:
        return bool(self.output_file_name)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "GateConfiguration":
        """Build a configuration from snake_case or camelCase keys."""
        return cls().with_overrides(**_normalize(values))

    def with_overrides(self, **overrides: Any) -> "GateConfiguration":
        """
        Return a copy with the given settings replaced.

        ``None`` values are ignored so unset CLI flags keep the current value.

        Raises:
            ValueError: If a key is unknown or a value has the wrong shape
        """
        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown gate setting: '{key}'")
            if value is None:
                continue
            if key in ("exclude_packages", "exclude_files"):
                changes[key] = _to_patterns(value)
            elif key == "output_file_name":
                changes[key] = str(value).strip()
            else:
                changes[key] = _to_bool(key, value)
        return replace(self, **changes)


def _normalize(values: Mapping[str, Any]) -> Dict[str, Any]:
    # configparser lower-cases option names, so aliases match case-insensitively
    aliases = {alias.lower(): name for alias, name in _KEY_ALIASES.items()}
    normalized = {}
    for key, value in values.items():
        normalized[aliases.get(key.lower(), key)] = value
    return normalized


def load_gate_configuration(
    accessor: Optional[ConfigAccessor] = None,
    module_settings: Optional[Mapping[str, Any]] = None,
    **overrides: Any,
) -> GateConfiguration:
    """
    Layer the gate configuration.

    Lowest to highest precedence: defaults, the ``[gate]`` section of the
    user config file, the module descriptor's ``gate`` block, explicit
    overrides (CLI flags).
    """
    accessor = accessor or ConfigAccessor()
    configuration = GateConfiguration.from_mapping(accessor.section("gate"))
    if module_settings:
        configuration = configuration.with_overrides(**_normalize(module_settings))
    return configuration.with_overrides(**overrides)
