"""CLI commands for the version algebra."""

import click

from semvergate.versioning import classify_bump, compare_versions, next_version

from .utils.args import CLASSIFICATION, VERSION


@click.group(name="version")
@click.pass_context
def version(ctx):
    """Compute, compare and classify versions."""
    ctx.ensure_object(dict)


@version.command("next")
@click.argument("base", type=VERSION)
@click.option(
    "--bump",
    "-b",
    type=CLASSIFICATION,
    required=True,
    help="Classification of the change.",
)
def next_command(base, bump):
    """Print the version that follows BASE for a change of the given size."""
    click.echo(str(next_version(base, bump)))


@version.command("compare")
@click.argument("first", type=VERSION)
@click.argument("second", type=VERSION)
def compare_command(first, second):
    """Print -1, 0 or 1 comparing the numeric parts of FIRST and SECOND."""
    click.echo(str(compare_versions(first, second)))


@version.command("bump")
@click.argument("old", type=VERSION)
@click.argument("new", type=VERSION)
def bump_command(old, new):
    """Print the bump declared by going from OLD to NEW."""
    click.echo(str(classify_bump(old, new)))
