from .module import ArtifactCoordinate, BuildModule

__all__ = ["ArtifactCoordinate", "BuildModule"]
