"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from postman_suite_runner.asset_resolution import MissingFileError
from postman_suite_runner.collection_engine import EngineError, NewmanEngine
from postman_suite_runner.run_configuration import (
    DEFAULT_COLLECTION,
    DEFAULT_ENVIRONMENT,
    DEFAULT_REPORTERS,
    DEFAULT_TIMEOUT_MS,
    ConfigurationError,
    RunnerSettings,
    build_run_configuration,
    load_runner_settings,
    parse_reporters,
)
from postman_suite_runner.run_execution import (
    prepare_collection_run,
    report_summary,
    run_collection,
)


class CliError(Exception):
    """Custom CLI error."""


def _parse_reporters_option(
    _ctx: click.Context, _param: click.Parameter, value: str
) -> tuple[str, ...]:
    try:
        return parse_reporters(value)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="postman-suite-runner")
@click.option(
    "--environment",
    "-e",
    default=DEFAULT_ENVIRONMENT,
    show_default=True,
    help="Environment to run tests against",
)
@click.option(
    "--collection",
    "-c",
    default=DEFAULT_COLLECTION,
    show_default=True,
    help="Collection to run",
)
@click.option(
    "--folder",
    "-f",
    default=None,
    help="Specific folder in the collection to run",
)
@click.option(
    "--reporters",
    "-r",
    default=DEFAULT_REPORTERS,
    show_default=True,
    callback=_parse_reporters_option,
    help="Reporters to use (comma-separated)",
)
@click.option(
    "--bail",
    "-b",
    is_flag=True,
    default=False,
    help="Stop on first error",
)
@click.option(
    "--timeout",
    "-t",
    "timeout_ms",
    type=click.IntRange(min=0),
    default=DEFAULT_TIMEOUT_MS,
    show_default=True,
    help="Request timeout in ms",
)
@click.option(
    "--assets-dir",
    "assets_dir",
    envvar="POSTMAN_ASSETS_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding collection and environment files [default: .]",
)
@click.option(
    "--reports-dir",
    "reports_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for HTML and JUnit reports [default: <assets-dir>/reports]",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Optional YAML runner settings file",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
# pylint: disable=too-many-arguments
def cli(
    environment: str,
    collection: str,
    folder: str | None,
    reporters: tuple[str, ...],
    bail: bool,
    timeout_ms: int,
    assets_dir: Path | None,
    reports_dir: Path | None,
    settings_path: Path | None,
    verbose: bool,
) -> None:
    """Run a Postman collection against a named environment with Newman."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_runner_settings(settings_path) if settings_path else RunnerSettings()
        configuration = build_run_configuration(
            environment=environment,
            collection=collection,
            folder=folder,
            reporters=reporters,
            bail=bail,
            timeout_request_ms=timeout_ms,
            settings=settings,
            assets_dir=assets_dir,
            reports_dir=reports_dir,
        )
        invocation = prepare_collection_run(configuration)
    except (ConfigurationError, MissingFileError) as exc:
        raise CliError(str(exc)) from exc
    except EngineError as exc:
        raise CliError(f"Error running Newman: {exc}") from exc

    click.echo(f"Running tests against {configuration.environment} environment...")
    try:
        summary = run_collection(
            invocation, engine=NewmanEngine(executable=settings.newman_executable)
        )
    except EngineError as exc:
        raise CliError(f"Error running Newman: {exc}") from exc

    click.get_current_context().exit(report_summary(summary, click.echo))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
