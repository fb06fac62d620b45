from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from semvergate.constants import (
    DEFAULT_BUILD_DIR,
    DEFAULT_PACKAGING,
    NON_DEPLOYABLE_PACKAGINGS,
    PACKAGING_EXTENSIONS,
)
from semvergate.versioning import Version, parse_version


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Identifies an artifact in a repository."""

    group: str
    name: str
    version: str
    classifier: Optional[str] = None
    packaging: str = DEFAULT_PACKAGING

    @property
    def key(self) -> str:
        """``group:name``, the part shared by every version."""
        return f"{self.group}:{self.name}"

    @property
    def extension(self) -> str:
        return PACKAGING_EXTENSIONS.get(self.packaging, "jar")

    def file_name(self, version: Optional[str] = None) -> str:
        """File name of the artifact for the given (default: own) version."""
        version = version or self.version
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.name}-{version}{suffix}.{self.extension}"

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


class BuildModule(BaseModel):
    """One module of a build, as described by its semvergate.yaml descriptor"""

    group: str
    name: str
    version: str
    packaging: str = DEFAULT_PACKAGING
    classifier: Optional[str] = None
    build_dir: Path = Path(DEFAULT_BUILD_DIR)
    final_name: Optional[str] = None
    artifact: Optional[Path] = None
    parent_build_dir: Optional[Path] = None
    classpath: List[str] = Field(default_factory=list)
    gate: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, value: Any) -> str:
        # YAML reads an unquoted 1.10 as the float 1.1
        if isinstance(value, float):
            raise ValueError(
                f"Version {value!r} was read as a number, quote it in the descriptor"
            )
        if isinstance(value, int):
            value = str(value)
        parse_version(value)
        return value

    @property
    def coordinate(self) -> ArtifactCoordinate:
        return ArtifactCoordinate(
            group=self.group,
            name=self.name,
            version=self.version,
            classifier=self.classifier,
            packaging=self.packaging,
        )

    @property
    def declared_version(self) -> Version:
        return parse_version(self.version)

    @property
    def is_deployable(self) -> bool:
        return self.packaging not in NON_DEPLOYABLE_PACKAGINGS

    @property
    def artifact_file(self) -> Path:
        """The freshly built artifact: explicit ``artifact`` or derived from build_dir."""
        if self.artifact is not None:
            return self.artifact
        final_name = self.final_name or f"{self.name}-{self.version}"
        suffix = f"-{self.classifier}" if self.classifier else ""
        extension = self.coordinate.extension
        return self.build_dir / f"{final_name}{suffix}.{extension}"

    def resolve_paths(self, base_dir: Path) -> "BuildModule":
        """Return a copy whose relative paths are anchored at ``base_dir``."""
        updates = {}
        for name in ("build_dir", "artifact", "parent_build_dir"):
            path = getattr(self, name)
            if path is not None and not path.is_absolute():
                updates[name] = base_dir / path
        return self.model_copy(update=updates)

    @classmethod
    def from_yaml(cls, path_or_content: Union[str, Path]) -> "BuildModule":
        """Load a module from a descriptor file or YAML string content.

        Relative paths in a descriptor file are resolved against its directory.
        """
        if isinstance(path_or_content, Path) or "\n" not in str(path_or_content):
            path = Path(path_or_content)
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data).resolve_paths(path.parent.resolve())

        data = yaml.safe_load(str(path_or_content)) or {}
        return cls(**data)
