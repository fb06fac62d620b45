from .local import LocalArtifactRepository

__all__ = ["LocalArtifactRepository"]
