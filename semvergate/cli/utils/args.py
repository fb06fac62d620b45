import click

from semvergate.versioning import (
    Classification,
    UnknownClassificationError,
    VersionFormatError,
    parse_version,
)


class VersionParamType(click.ParamType):
    """Click parameter type for version strings."""

    name = "version"

    def convert(self, value, param, ctx):
        try:
            return parse_version(value)
        except VersionFormatError as e:
            self.fail(str(e), param, ctx)


class ClassificationParamType(click.ParamType):
    """Click parameter type for none / patch / minor / major."""

    name = "classification"

    def get_metavar(self, param, *args):
        return "[none|patch|minor|major]"

    def convert(self, value, param, ctx):
        if isinstance(value, Classification):
            return value
        try:
            return Classification.parse(value)
        except UnknownClassificationError as e:
            self.fail(str(e), param, ctx)


VERSION = VersionParamType()
CLASSIFICATION = ClassificationParamType()


def collect_patterns(values):
    """Repeated pattern options: an empty tuple means 'not given'."""
    return tuple(values) if values else None
