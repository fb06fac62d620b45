"""Tests for the user config file accessor and the layered gate configuration."""

import logging

import pytest

from semvergate.config import (
    ConfigAccessor,
    GateConfiguration,
    get_analyzer_command,
    get_repository_root,
    load_gate_configuration,
)

pytestmark = pytest.mark.short


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "semvergate.cfg"
    path.write_text(
        "[repository]\n"
        "root = /srv/artifacts\n"
        "\n"
        "[analyzer]\n"
        "command = japicmp-classify --strict\n"
        "\n"
        "[gate]\n"
        "failOnIncorrectVersion = true\n"
        "excludePackages = com.example.internal, com.example.impl\n"
    )
    return path


class TestConfigAccessor:
    def test_get_existing_and_default(self, config_file):
        accessor = ConfigAccessor(config_file)

        assert accessor.get("repository", "root") == "/srv/artifacts"
        assert accessor.get("repository", "missing", "fallback") == "fallback"
        assert accessor.get("nope", "root") is None

    def test_missing_file_is_empty(self, tmp_path):
        accessor = ConfigAccessor(tmp_path / "absent.cfg")
        assert accessor.section("gate") == {}

    def test_reading_is_logged(self, config_file, caplog):
        with caplog.at_level(logging.DEBUG, logger="semvergate"):
            ConfigAccessor(config_file)

        assert f"Reading configuration from {config_file}" in caplog.text

    def test_section(self, config_file):
        section = ConfigAccessor(config_file).section("gate")
        assert section["failonincorrectversion"] == "true"

    def test_helpers(self, config_file):
        accessor = ConfigAccessor(config_file)
        assert str(get_repository_root(accessor)) == "/srv/artifacts"
        assert get_analyzer_command(accessor) == "japicmp-classify --strict"

    def test_helper_defaults(self, tmp_path):
        accessor = ConfigAccessor(tmp_path / "absent.cfg")
        assert get_repository_root(accessor).name == "repository"
        assert get_analyzer_command(accessor) == ""


class TestGateConfiguration:
    def test_defaults(self):
        config = GateConfiguration()
        assert not config.skip
        assert config.ignore_snapshots
        assert config.halt_on_failure
        assert not config.fail_on_incorrect_version
        assert config.allow_higher_versions
        assert config.output_file_name == "nextVersion.txt"
        assert config.overwrite_output_file
        assert config.exclude_packages == ()
        assert config.writes_output

    def test_from_mapping_accepts_both_spellings(self):
        config = GateConfiguration.from_mapping(
            {"failOnIncorrectVersion": "yes", "allow_higher_versions": False}
        )
        assert config.fail_on_incorrect_version is True
        assert config.allow_higher_versions is False

    def test_string_booleans(self):
        config = GateConfiguration.from_mapping({"skip": "on", "haltOnFailure": "0"})
        assert config.skip is True
        assert config.halt_on_failure is False

    def test_invalid_boolean(self):
        with pytest.raises(ValueError, match="Invalid boolean"):
            GateConfiguration.from_mapping({"skip": "maybe"})

    def test_patterns_from_string_and_list(self):
        config = GateConfiguration.from_mapping(
            {
                "excludePackages": "a.b, c.d,,",
                "excludeFiles": ["META-INF/", "x/,y/"],
            }
        )
        assert config.exclude_packages == ("a.b", "c.d")
        assert config.exclude_files == ("META-INF/", "x/", "y/")

    def test_empty_output_file_name_disables_output(self):
        config = GateConfiguration.from_mapping({"outputFileName": "  "})
        assert config.output_file_name == ""
        assert not config.writes_output

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown gate setting"):
            GateConfiguration.from_mapping({"failOnEverything": True})

    def test_with_overrides_ignores_none(self):
        base = GateConfiguration(skip=True)
        assert base.with_overrides(skip=None, ignore_snapshots=False) == GateConfiguration(
            skip=True, ignore_snapshots=False
        )

    def test_immutable(self):
        config = GateConfiguration()
        with pytest.raises(AttributeError):
            config.skip = True


class TestLoadGateConfiguration:
    def test_layering(self, config_file):
        accessor = ConfigAccessor(config_file)

        config = load_gate_configuration(
            accessor,
            module_settings={"excludePackages": ["com.example.generated"]},
            allow_higher_versions=False,
            skip=None,
        )

        # user config file
        assert config.fail_on_incorrect_version is True
        # module descriptor replaces the user config value
        assert config.exclude_packages == ("com.example.generated",)
        # explicit override
        assert config.allow_higher_versions is False
        assert config.skip is False

    def test_override_beats_module(self, tmp_path):
        accessor = ConfigAccessor(tmp_path / "absent.cfg")
        config = load_gate_configuration(
            accessor,
            module_settings={"failOnIncorrectVersion": True},
            fail_on_incorrect_version=False,
        )
        assert config.fail_on_incorrect_version is False
