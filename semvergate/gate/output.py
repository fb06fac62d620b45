"""
Next-version marker files.

Every module gets a plain-text marker file in its build directory holding only
the computed next version. A module with a parent also merges its value into
the parent's marker so that all children of a multi-module build converge on
the highest required version.

The parent merge is a read-modify-write guarded by a ``filelock.FileLock``
next to the marker, which serialises sibling modules building in parallel on
the same host. Builds on different hosts writing to one shared directory are
not coordinated and can lose an update (last writer wins).
"""

import logging
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock, Timeout

from semvergate.constants import PARENT_LOCK_TIMEOUT
from semvergate.exceptions import OutputWriteError
from semvergate.versioning import (
    Version,
    VersionFormatError,
    compare_versions,
    parse_version,
)

logger = logging.getLogger(__name__)


class OutputAggregator:
    def __init__(self, lock_timeout: float = PARENT_LOCK_TIMEOUT):
        self.lock_timeout = lock_timeout

    def write_module_output(
        self,
        directory: Path,
        filename: str,
        version: Union[str, Version],
        overwrite: bool = True,
    ) -> bool:
        """
        Write the version string verbatim to ``directory/filename``.

        Args:
            directory: Build directory of the module, created if missing
            filename: Name of the marker file
            version: Version to record
            overwrite: If False, an existing marker file is left untouched

        Returns:
            True if the file was written, False if an existing file was kept

        Raises:
            OutputWriteError: If the directory or file cannot be written
        """
        target = Path(directory) / filename
        if not overwrite and target.exists():
            logger.debug(f"Keeping existing {target}")
            return False

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(str(version), encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(target, str(e)) from e

        logger.debug(f"Wrote {version} to {target}")
        return True

    def merge_with_parent(
        self,
        child_version: Union[str, Version],
        parent_directory: Path,
        filename: str,
        overwrite: bool = True,
    ) -> Optional[str]:
        """
        Merge a child's next version into the parent's marker file.

        The parent keeps its current value only if it is strictly greater than
        the child's; otherwise the child's value is written. An unreadable or
        unparseable parent marker is reported and replaced by the child's value.

        Returns:
            The version string the parent marker holds afterwards. When
            ``overwrite`` is false an existing marker is kept as it is, and None
            is returned if its content cannot be read.

        Raises:
            OutputWriteError: If the parent marker cannot be locked or written
        """
        parent_directory = Path(parent_directory)
        target = parent_directory / filename
        lock_path = parent_directory / f"{filename}.lock"

        try:
            parent_directory.mkdir(parents=True, exist_ok=True)
            with FileLock(str(lock_path), timeout=self.lock_timeout):
                parent_version = self._read_parent(target)
                combined = self._combine(str(child_version), parent_version, target)
                if not self.write_module_output(
                    parent_directory, filename, combined, overwrite
                ):
                    combined = parent_version
        except Timeout as e:
            raise OutputWriteError(
                target, f"timed out after {self.lock_timeout} seconds waiting for lock"
            ) from e
        except OSError as e:
            raise OutputWriteError(target, str(e)) from e

        return combined

    def _read_parent(self, target: Path) -> Optional[str]:
        if not target.exists():
            return None
        try:
            return target.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            logger.warning(f"Unable to read {target.absolute()}")
            return None

    def _combine(
        self, child_version: str, parent_version: Optional[str], target: Path
    ) -> str:
        if parent_version is None:
            return child_version

        try:
            if compare_versions(parse_version(parent_version), child_version) > 0:
                return parent_version
        except VersionFormatError:
            logger.warning(
                f"Unable to parse version '{parent_version}' in {target.absolute()}"
            )
        return child_version
