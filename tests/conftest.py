import io
import logging
from pathlib import Path

import pytest

from semvergate.model import BuildModule
from semvergate.versioning import Classification


class FakeRepository:
    """In-memory ArtifactRepository."""

    def __init__(self, versions=(), files=None, error=None):
        self.versions = list(versions)
        self.files = dict(files or {})
        self.error = error
        self.fetched = []

    def list_versions(self, coordinate):
        if self.error is not None:
            raise self.error
        return list(self.versions)

    def fetch(self, coordinate, version):
        self.fetched.append(version)
        return self.files.get(version)


class FakeAnalyzer:
    """CompatibilityAnalyzer returning a fixed classification."""

    def __init__(self, classification=Classification.NONE, error=None):
        self.classification = classification
        self.error = error
        self.calls = []

    def classify(self, old_file, new_file, exclude_packages, exclude_files, classpath):
        self.calls.append(
            {
                "old_file": old_file,
                "new_file": new_file,
                "exclude_packages": tuple(exclude_packages),
                "exclude_files": tuple(exclude_files),
                "classpath": list(classpath),
            }
        )
        if self.error is not None:
            raise self.error
        return self.classification


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("semvergate")
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    logger.setLevel(previous_level)
    log_stream.close()


@pytest.fixture
def make_module(tmp_path):
    """Factory for a BuildModule whose artifact exists under tmp_path/module/target."""

    def _make(version="1.2.0", with_artifact=True, parent=False, **fields):
        module_dir = tmp_path / "module"
        build_dir = module_dir / "target"
        build_dir.mkdir(parents=True, exist_ok=True)
        values = {
            "group": "com.example",
            "name": "widget",
            "version": version,
            "build_dir": build_dir,
        }
        if parent:
            values["parent_build_dir"] = tmp_path / "target"
        values.update(fields)
        module = BuildModule(**values)
        if with_artifact:
            module.artifact_file.write_bytes(b"new build")
        return module

    return _make


@pytest.fixture
def baseline_file(tmp_path) -> Path:
    """A published artifact file for the baseline version."""
    path = tmp_path / "repo" / "widget-1.1.0.jar"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"old build")
    return path
