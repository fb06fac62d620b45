"""semvergate CLI"""

import click

from semvergate import __version__
from semvergate.cli.check import baseline, check
from semvergate.cli.version import version

from .debug import add_logging_options


@click.group()
@click.version_option(__version__, prog_name="semvergate")
@add_logging_options
@click.pass_context
def cli(ctx):
    """
    Semantic version release gate.
    """
    ctx.ensure_object(dict)


cli.add_command(check)
cli.add_command(baseline)
cli.add_command(version)

if __name__ == "__main__":
    cli(obj={})
