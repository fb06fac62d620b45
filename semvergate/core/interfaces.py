"""Protocol interfaces for the gate's external collaborators.

Protocols that decouple the gate from a concrete artifact repository and a
concrete compatibility analyzer.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from semvergate.model import ArtifactCoordinate
    from semvergate.versioning import Classification


class ArtifactRepository(Protocol):
    """Source of previously published versions of an artifact."""

    def list_versions(self, coordinate: "ArtifactCoordinate") -> Iterable[str]:
        """All published version strings of the coordinate, in any order.

        Raises ResolutionError when the versions cannot be enumerated.
        """
        ...

    def fetch(self, coordinate: "ArtifactCoordinate", version: str) -> Optional[Path]:
        """Local file of the given version, or None if it has no attached file.

        Raises ResolutionError when the version cannot be resolved at all.
        """
        ...


class CompatibilityAnalyzer(Protocol):
    """Classifies the change between two builds of an artifact."""

    def classify(
        self,
        old_file: Path,
        new_file: Path,
        exclude_packages: Sequence[str],
        exclude_files: Sequence[str],
        classpath: Sequence[str],
    ) -> "Classification":
        """Raises AnalysisError when the analysis cannot be completed."""
        ...
