"""
Exception classes for the versioning module.
"""


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class VersionFormatError(VersioningError, ValueError):
    """Raised when a version string has an invalid format."""

    def __init__(self, version_string: str, expected_format: str = "x.y.z"):
        self.version_string = version_string
        self.expected_format = expected_format
        super().__init__(
            f"Invalid version format: '{version_string}'. "
            f"Expected format: {expected_format}"
        )


class UnknownClassificationError(VersioningError, ValueError):
    """Raised when a classification name is not one of none/patch/minor/major."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown SemVer classification: '{name}'. "
            "Expected one of: none, patch, minor, major"
        )
