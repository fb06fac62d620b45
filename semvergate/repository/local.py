"""
Artifact repository backed by a Maven-layout directory tree.

Layout::

    <root>/<group as path>/<name>/<version>/<name>-<version>[-<classifier>].<ext>

For example ``~/.m2/repository/com/example/widget/1.2.0/widget-1.2.0.jar``.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from semvergate.exceptions import ResolutionError
from semvergate.model import ArtifactCoordinate

logger = logging.getLogger(__name__)


class LocalArtifactRepository:
    """Lists and fetches artifact versions from a local repository directory."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).expanduser()

    def artifact_dir(self, coordinate: ArtifactCoordinate) -> Path:
        return self.root.joinpath(*coordinate.group.split("."), coordinate.name)

    def list_versions(self, coordinate: ArtifactCoordinate) -> List[str]:
        """
        List the version directories of the coordinate.

        An artifact that was never published simply has no versions.

        Raises:
            ResolutionError: If the repository root is missing or unreadable
        """
        if not self.root.is_dir():
            raise ResolutionError(f"Repository root {self.root} is not a directory")

        artifact_dir = self.artifact_dir(coordinate)
        logger.debug(f"Looking up versions of {coordinate.key} in {artifact_dir}")
        if not artifact_dir.is_dir():
            return []

        try:
            return sorted(p.name for p in artifact_dir.iterdir() if p.is_dir())
        except OSError as e:
            raise ResolutionError(
                f"Unable to list versions of {coordinate.key}: {e}"
            ) from e

    def fetch(self, coordinate: ArtifactCoordinate, version: str) -> Optional[Path]:
        """
        Locate the file of a published version.

        Returns:
            Path to the artifact file, or None if the version has no attached file

        Raises:
            ResolutionError: If the version itself is not in the repository
        """
        version_dir = self.artifact_dir(coordinate) / version
        if not version_dir.is_dir():
            raise ResolutionError(f"Unable to resolve {coordinate.key}:{version}")

        candidate = version_dir / coordinate.file_name(version)
        logger.debug(f"Using {candidate} for version {version}")
        return candidate if candidate.is_file() else None
