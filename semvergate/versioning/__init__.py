"""
Versioning module for semvergate.

All version logic lives here so the gate, the output aggregator and the CLI
agree on one set of rules:

1. **Core version logic** (version.py):
   - Version: immutable ``major.minor.patch`` with an optional pre-release
     qualifier, parsed from Maven/SemVer or PEP 440 strings
   - Classification: NONE < PATCH < MINOR < MAJOR, ordered by an explicit
     severity table
   - compare_versions / classify_bump / next_version: the bump algebra

2. **Exception hierarchy** (exceptions.py):
   - VersionFormatError for unparseable version strings
   - UnknownClassificationError for unknown classification names
"""

from .exceptions import (
    UnknownClassificationError,
    VersionFormatError,
    VersioningError,
)
from .version import (
    Classification,
    Version,
    classify_bump,
    compare_versions,
    next_version,
    parse_version,
)

__all__ = [
    "Version",
    "Classification",
    "parse_version",
    "compare_versions",
    "classify_bump",
    "next_version",
    "VersioningError",
    "VersionFormatError",
    "UnknownClassificationError",
]
