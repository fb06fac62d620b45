import pytest

from semvergate.exceptions import ResolutionError
from semvergate.model import ArtifactCoordinate
from semvergate.repository import LocalArtifactRepository

pytestmark = pytest.mark.short

COORDINATE = ArtifactCoordinate("com.example", "widget", "1.2.0")


@pytest.fixture
def repo_root(tmp_path):
    root = tmp_path / "m2"
    artifact_dir = root / "com" / "example" / "widget"
    for version in ["1.0.0", "1.1.0", "1.10.0"]:
        version_dir = artifact_dir / version
        version_dir.mkdir(parents=True)
        (version_dir / f"widget-{version}.jar").write_bytes(b"jar")
    # A published version without its jar
    (artifact_dir / "0.9.0").mkdir()
    (artifact_dir / "maven-metadata-local.xml").write_text("<metadata/>")
    return root


def test_artifact_dir_follows_group_layout(repo_root):
    repository = LocalArtifactRepository(repo_root)
    assert repository.artifact_dir(COORDINATE) == repo_root / "com" / "example" / "widget"


def test_list_versions_ignores_files(repo_root):
    versions = LocalArtifactRepository(repo_root).list_versions(COORDINATE)
    assert sorted(versions) == ["0.9.0", "1.0.0", "1.1.0", "1.10.0"]


def test_unpublished_artifact_has_no_versions(repo_root):
    coordinate = ArtifactCoordinate("com.example", "gadget", "0.1.0")
    assert LocalArtifactRepository(repo_root).list_versions(coordinate) == []


def test_missing_root_is_an_error(tmp_path):
    with pytest.raises(ResolutionError, match="not a directory"):
        LocalArtifactRepository(tmp_path / "nowhere").list_versions(COORDINATE)


def test_fetch_existing_file(repo_root):
    path = LocalArtifactRepository(repo_root).fetch(COORDINATE, "1.1.0")
    assert path == repo_root / "com" / "example" / "widget" / "1.1.0" / "widget-1.1.0.jar"
    assert path.is_file()


def test_fetch_version_without_file(repo_root):
    assert LocalArtifactRepository(repo_root).fetch(COORDINATE, "0.9.0") is None


def test_fetch_unknown_version(repo_root):
    with pytest.raises(ResolutionError, match="Unable to resolve"):
        LocalArtifactRepository(repo_root).fetch(COORDINATE, "7.0.0")


def test_fetch_uses_classifier(repo_root):
    coordinate = ArtifactCoordinate("com.example", "widget", "1.2.0", classifier="tests")
    version_dir = repo_root / "com" / "example" / "widget" / "1.1.0"
    (version_dir / "widget-1.1.0-tests.jar").write_bytes(b"jar")

    path = LocalArtifactRepository(repo_root).fetch(coordinate, "1.1.0")

    assert path.name == "widget-1.1.0-tests.jar"
