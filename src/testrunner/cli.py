from __future__ import annotations

from pathlib import Path
import importlib
import sys
from types import ModuleType

import typer

app = typer.Typer(
    name="testrunner",
    help="Run registered test cases",
    add_completion=False,
    context_settings={"help_option_names": []},
)


def usage(prog: str | None = None) -> None:
    """Print the usage text to stdout."""
    prog = prog or "testrunner"
    typer.echo(f"Usage: {prog} [-v] [-t] [-q] [-c] [-1 <test_name>] [-h] [TARGETS]...\n")
    typer.echo("  -1  Run only tests whose name starts with <test_name>")
    typer.echo("  -c  Continue after a test fails")
    typer.echo("  -v  Verbose output; lists all test results")
    typer.echo("  -t  Timing output; verbose output plus test durations")
    typer.echo("  -q  Quiet mode; only reports failures\n")
    typer.echo("      Default output mode is 'compact', which reports test")
    typer.echo("      statistics. Use -q for less detail and -v for more.\n")
    typer.echo("  TARGETS  Test files or directories to load before running.")
    typer.echo("  --config PATH    YAML file with default run settings")
    typer.echo("  --log-file PATH  Write a debug log of the run to PATH")
    typer.echo("  --debug          Also write the debug log to stderr\n")


def _usage_callback(ctx: typer.Context, value: bool) -> None:
    if value:
        usage(ctx.find_root().info_name)
        raise typer.Exit(2)


@app.command()
def run(
    targets: list[Path] | None = typer.Argument(
        None, help="Test files or directories to load", show_default=False
    ),
    verbose: bool = typer.Option(
        False, "-v", help="Verbose output; lists all test results"
    ),
    timing: bool = typer.Option(
        False, "-t", help="Verbose output plus per-test and total durations"
    ),
    quiet: bool = typer.Option(False, "-q", help="Quiet mode; only reports failures"),
    keep_going: bool = typer.Option(False, "-c", help="Continue after a test fails"),
    test_name: str | None = typer.Option(
        None, "-1", metavar="TEST_NAME", help="Run only tests starting with TEST_NAME"
    ),
    config: str | None = typer.Option(
        None, "--config", help="YAML file with default run settings"
    ),
    log_file: str | None = typer.Option(
        None, "--log-file", help="Write a debug log of the run to this file"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Also write the debug log of the run to stderr"
    ),
    show_usage: bool = typer.Option(
        False,
        "-h",
        is_eager=True,
        callback=_usage_callback,
        help="Show usage and exit",
    ),
):
    """Run the registered tests, optionally loading them from TARGETS first."""
    import yaml

    from testrunner.config import OnError, OutputMode, RunConfig, load_config
    from testrunner.loader import load_targets
    from testrunner.runner import Runner
    from testrunner.verbose import setup_logger

    try:
        run_config = load_config(Path(config)) if config else RunConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config {config}: {e}", err=True)
        raise typer.Exit(1)

    overrides: dict = {}
    if timing:
        overrides["output_mode"] = OutputMode.TIMING
    elif verbose:
        overrides["output_mode"] = OutputMode.VERBOSE
    elif quiet:
        overrides["output_mode"] = OutputMode.QUIET
    if keep_going:
        overrides["on_error"] = OnError.CONTINUE
    if test_name is not None:
        overrides["name_filter"] = test_name
    run_config = run_config.model_copy(update=overrides)

    logger = setup_logger(Path(log_file) if log_file else None, verbose=debug)
    try:
        try:
            loaded = load_targets(targets or [])
        except (OSError, ValueError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        logger.debug(f"Loaded {len(loaded)} test file(s)")

        exit_code = Runner(logger=logger).run(run_config)
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    if exit_code != 0:
        raise typer.Exit(exit_code)


def parse_errors_of(command: typer.core.TyperCommand) -> ModuleType:
    """Return the exceptions module of the click that command is built on.

    typer either depends on click or ships its own copy, so the parse error
    types are looked up through the command class rather than imported.
    """
    for base in type(command).__mro__:
        if base.__module__.startswith("typer.core") or base is object:
            continue
        package = base.__module__.rsplit(".", 1)[0]
        return importlib.import_module(f"{package}.exceptions")
    raise RuntimeError(f"cannot locate click for {type(command).__name__}")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point. Returns the process exit status.

    A test file can end with ``raise SystemExit(testrunner.main())`` to run
    the tests it declared.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "testrunner"
    command = typer.main.get_command(app)
    errors = parse_errors_of(command)

    try:
        rv = command.main(args=args, prog_name=prog, standalone_mode=False)
    except errors.BadOptionUsage as e:
        if e.option_name == "-1":
            typer.echo("Must specify test name for '-1' flag.\n", err=True)
            usage(prog)
            return 1
        typer.echo(f"Error: {e.format_message()}", err=True)
        usage(prog)
        return 2
    except errors.UsageError as e:
        typer.echo(f"Error: {e.format_message()}", err=True)
        usage(prog)
        return 2

    return rv if isinstance(rv, int) else 0
