"""CLI commands running the compatibility gate on a module."""

from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from returns.result import Failure

from semvergate.analyzer import CommandAnalyzer
from semvergate.cli.utils.logging import logger
from semvergate.config import (
    ConfigAccessor,
    get_analyzer_command,
    get_repository_root,
    load_gate_configuration,
)
from semvergate.constants import DEFAULT_MODULE_DESCRIPTOR
from semvergate.exceptions import GateError, PreconditionError, ResolutionError
from semvergate.gate import CompatibilityGate, VersionResolver
from semvergate.model import BuildModule
from semvergate.repository import LocalArtifactRepository

from .debug import add_logging_options
from .utils.args import collect_patterns


def module_option(f):
    return click.option(
        "--module",
        "-m",
        "module_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_MODULE_DESCRIPTOR,
        show_default=True,
        envvar="SEMVERGATE_MODULE",
        help="Path to the module descriptor.",
    )(f)


def repository_option(f):
    return click.option(
        "--repository",
        "-r",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        envvar="SEMVERGATE_REPOSITORY",
        help="Root of the local artifact repository. [default: from config, ~/.m2/repository]",
    )(f)


def config_option(f):
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        envvar="SEMVERGATE_CONFIG",
        help="User configuration file.",
    )(f)


def report_failure(ctx, error: GateError):
    """Abort on fatal errors, only warn on recoverable ones."""
    if error.is_fatal:
        logger.error(f"Error: {error.message}")
        ctx.exit(1)
    logger.warning(error.message)


def load_module(ctx, module_path: Path, halt_on_failure: bool):
    """Load the module descriptor, or report why it cannot be loaded.

    Returns None when processing of this module should stop.
    """
    if not module_path.is_file():
        report_failure(
            ctx,
            PreconditionError.for_policy(
                f"Unable to get module information from {module_path}",
                halt_on_failure,
            ),
        )
        return None

    try:
        return BuildModule.from_yaml(module_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Error: Invalid module descriptor {module_path}: {e}")
        ctx.exit(1)


@click.command(name="check")
@add_logging_options
@module_option
@repository_option
@config_option
@click.option(
    "--analyzer",
    "-a",
    default=None,
    envvar="SEMVERGATE_ANALYZER",
    help="Compatibility analyzer command. [default: from config]",
)
@click.option("--skip/--no-skip", default=None, help="Bypass the gate.")
@click.option(
    "--ignore-snapshots/--include-snapshots",
    default=None,
    help="Leave pre-release versions out of baseline selection. [default: ignore]",
)
@click.option(
    "--halt-on-failure/--no-halt-on-failure",
    default=None,
    help="Fail the build on precondition problems instead of warning. [default: halt]",
)
@click.option(
    "--fail-on-incorrect-version/--no-fail-on-incorrect-version",
    default=None,
    help="Fail when the declared version does not match the required bump. [default: no]",
)
@click.option(
    "--allow-higher-versions/--no-allow-higher-versions",
    default=None,
    help="Accept a bigger bump than required. [default: allow]",
)
@click.option(
    "--output-file-name",
    default=None,
    help="Marker file for the next version; empty disables it. [default: nextVersion.txt]",
)
@click.option(
    "--overwrite-output-file/--no-overwrite-output-file",
    default=None,
    help="Replace an existing marker file. [default: overwrite]",
)
@click.option(
    "--exclude-package",
    "exclude_packages",
    multiple=True,
    help="Package pattern the analyzer should ignore. Repeatable or comma separated.",
)
@click.option(
    "--exclude-file",
    "exclude_files",
    multiple=True,
    help="File prefix the analyzer should ignore. Repeatable or comma separated.",
)
@click.pass_context
def check(ctx, module_path, repository, config_path, analyzer, **flags):
    """Check the declared version of a module against its last release.

    Computes the next version, writes it to the marker file of the module
    (and merges it into the parent module's marker) and, with
    --fail-on-incorrect-version, fails when the declared version is wrong.
    """
    flags["exclude_packages"] = collect_patterns(flags["exclude_packages"])
    flags["exclude_files"] = collect_patterns(flags["exclude_files"])

    accessor = ConfigAccessor(config_path)
    try:
        base_config = load_gate_configuration(accessor, **flags)
    except ValueError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)

    if base_config.skip:
        logger.info("Skipping semantic versioning check, as skip is set to true")
        return

    module = load_module(ctx, module_path, base_config.halt_on_failure)
    if module is None:
        return

    try:
        config = load_gate_configuration(accessor, module.gate, **flags)
    except ValueError as e:
        logger.error(f"Error: Invalid gate settings in {module_path}: {e}")
        ctx.exit(1)

    repository_root = repository or get_repository_root(accessor)
    analyzer_command = analyzer or get_analyzer_command(accessor)
    logger.debug(f"Using repository {repository_root}")

    gate = CompatibilityGate(
        LocalArtifactRepository(repository_root),
        CommandAnalyzer(analyzer_command),
        config,
    )
    result = gate.check(module)
    if isinstance(result, Failure):
        report_failure(ctx, result.failure())


@click.command(name="baseline")
@add_logging_options
@module_option
@repository_option
@config_option
@click.option(
    "--ignore-snapshots/--include-snapshots",
    default=None,
    help="Leave pre-release versions out. [default: ignore]",
)
@click.pass_context
def baseline(ctx, module_path, repository, config_path, ignore_snapshots):
    """List the published versions of a module and its baseline."""
    accessor = ConfigAccessor(config_path)
    module = load_module(ctx, module_path, halt_on_failure=True)

    try:
        config = load_gate_configuration(
            accessor, module.gate, ignore_snapshots=ignore_snapshots
        )
    except ValueError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)

    repository_root = repository or get_repository_root(accessor)
    resolver = VersionResolver(
        LocalArtifactRepository(repository_root), config.ignore_snapshots
    )

    try:
        versions = resolver.available_versions(module.coordinate)
    except ResolutionError as e:
        logger.error(f"Error: {e.message}")
        ctx.exit(1)

    for version in versions:
        click.echo(str(version))

    if versions:
        logger.info(f"Baseline for {module.coordinate.key} is {versions[-1]}")
    else:
        logger.info(f"No other versions available for {module.coordinate.key}")
