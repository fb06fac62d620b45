from functools import wraps

import click

from .utils.logging import configure_logging


def add_logging_options(cmd):
    """Decorator adding --debug and --quiet to a command function"""

    @click.option(
        "--quiet",
        "-q",
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=lambda ctx, param, value: _set_logging(ctx, quiet=value),
        help="Only report warnings and errors.",
    )
    @click.option(
        "--debug/--no-debug",
        is_eager=True,
        expose_value=False,
        callback=lambda ctx, param, value: _set_logging(ctx, debug=value),
        help="Enable debug mode",
    )
    @wraps(cmd)
    def wrapper(*args, **kwargs):
        return cmd(*args, **kwargs)

    return wrapper


def _set_logging(ctx, debug=None, quiet=None):
    """Callback for the logging flags; settings are kept on the root context"""
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)

    # A flag given on the group must survive the default of the subcommand
    if debug:
        root_ctx.obj["DEBUG"] = True
    if quiet:
        root_ctx.obj["QUIET"] = True

    configure_logging(
        root_ctx.obj.get("DEBUG", False), root_ctx.obj.get("QUIET", False)
    )
