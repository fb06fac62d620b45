import pytest
from click.testing import CliRunner

from semvergate.cli.main import cli

pytestmark = pytest.mark.short


def invoke(*args):
    return CliRunner().invoke(cli, ["version", *args])


@pytest.mark.parametrize(
    "base,bump,expected",
    [
        ("1.2.3", "major", "2.0.0"),
        ("1.2.3", "minor", "1.3.0"),
        ("1.2.3", "PATCH", "1.2.4"),
        ("1.2.3-SNAPSHOT", "none", "1.2.3"),
    ],
)
def test_next(base, bump, expected):
    result = invoke("next", base, "--bump", bump)

    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_next_requires_bump():
    result = invoke("next", "1.0.0")
    assert result.exit_code == 2


def test_next_rejects_unknown_bump():
    result = invoke("next", "1.0.0", "-b", "huge")
    assert result.exit_code == 2
    assert "huge" in result.output


@pytest.mark.parametrize(
    "first,second,expected",
    [("1.9.0", "1.10.0", "-1"), ("2.0", "2.0.0", "0"), ("3.0.0", "2.9.9", "1")],
)
def test_compare(first, second, expected):
    result = invoke("compare", first, second)

    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_compare_invalid_version():
    result = invoke("compare", "1.0.0", "banana")

    assert result.exit_code == 2
    assert "Invalid version format" in result.output


@pytest.mark.parametrize(
    "old,new,expected",
    [
        ("1.1.0", "1.2.0", "minor"),
        ("1.1.0", "2.0.0", "major"),
        ("1.1.0", "1.1.1", "patch"),
        ("1.1.0", "1.0.0", "none"),
    ],
)
def test_bump(old, new, expected):
    result = invoke("bump", old, new)

    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_cli_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "semvergate" in result.output
