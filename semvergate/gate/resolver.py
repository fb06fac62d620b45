import logging
from typing import List, Optional

from semvergate.core.interfaces import ArtifactRepository
from semvergate.model import ArtifactCoordinate
from semvergate.versioning import Version, VersionFormatError

logger = logging.getLogger(__name__)


class VersionResolver:
    """
    Picks the baseline version to compare a new build against.

    The baseline is the highest published version. Pre-release and snapshot
    versions are left out when ``ignore_snapshots`` is set. When they are
    included, a pre-release sorts just below the release with the same
    numeric triple, so ``1.1.0`` wins over ``1.1.0-SNAPSHOT``.
    """

    def __init__(self, repository: ArtifactRepository, ignore_snapshots: bool = True):
        self.repository = repository
        self.ignore_snapshots = ignore_snapshots

    def available_versions(self, coordinate: ArtifactCoordinate) -> List[Version]:
        """
        All usable published versions, sorted ascending.

        Raises:
            ResolutionError: If the repository cannot enumerate versions
        """
        logger.info(f"Looking up versions of {coordinate.key}")

        versions = set()
        for candidate in self.repository.list_versions(coordinate):
            try:
                version = Version.parse(candidate)
            except VersionFormatError:
                logger.debug(f"Ignoring unparseable version '{candidate}'")
                continue
            if self.ignore_snapshots and version.is_prerelease:
                logger.debug(f"Ignoring pre-release version {candidate}")
                continue
            versions.add(version)

        return sorted(versions)

    def resolve_baseline(self, coordinate: ArtifactCoordinate) -> Optional[Version]:
        """The highest available version, or None if nothing was published yet."""
        versions = self.available_versions(coordinate)
        if not versions:
            return None
        return versions[-1]
