"""Core interfaces and abstractions for semvergate."""

from semvergate.core.interfaces import ArtifactRepository, CompatibilityAnalyzer

__all__ = ["ArtifactRepository", "CompatibilityAnalyzer"]
