"""Main CLI entry point for the umbraco-builder command.

This module provides the Typer application that serves as the entry point
for the umbraco-builder command-line tool. It uses options on the main
command rather than subcommands.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from umbraco_builder import __version__
from umbraco_builder.cli.config import ConfigLoader
from umbraco_builder.cli.models import ExitCode, STEPS, STEP_DESCRIPTIONS
from umbraco_builder.cli.output import OutputHandler
from umbraco_builder.cli.provision_command import ProvisionCommand

app = typer.Typer(
    name="umbraco-builder",
    help="""Provision a sample site into Umbraco through the Management API.

QUICK START:
  umbraco-builder                              # Run every step
  umbraco-builder --step templates --step media  # Run selected steps
  umbraco-builder --list-steps                 # Show the steps in run order

Credentials are read from UMBRACO_HOST, UMBRACO_CLIENT_ID and
UMBRACO_CLIENT_SECRET (a .env file is loaded if present).""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'umbraco_builder' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("umbraco_builder")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"umbraco-builder_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _list_steps() -> None:
    for number, step in enumerate(STEPS, start=1):
        typer.echo(f"{number:2d}. {step:<27} {STEP_DESCRIPTIONS[step]}")


def _run_provision(
    config_path: str,
    steps: Optional[List[str]],
    logdir: Optional[str],
    verbosity: int,
    no_color: bool,
) -> None:
    """Run the provisioning steps and exit with the resulting code.

    Args:
        config_path: Path to the YAML run configuration
        steps: Steps requested on the command line (None runs the configured steps)
        logdir: Optional directory for log files
        verbosity: Verbosity level
        no_color: Whether to disable colored output
    """
    _configure_logging(verbosity, logdir)

    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        command = ProvisionCommand(config_path=config_path, output_handler=output)
        exit_code = command.run(steps=steps or None)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception("Unexpected error during provisioning")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(exit_code)


@app.command()
def main_command(
    config: str = typer.Option(
        ConfigLoader.DEFAULT_CONFIG_FILE,
        "--config",
        "-c",
        help="Path to the YAML run configuration (optional file)",
    ),
    step: Optional[List[str]] = typer.Option(
        None,
        "--step",
        "-s",
        help="Run only this step (can be repeated; steps always run in dependency order)",
    ),
    list_steps: bool = typer.Option(
        False,
        "--list-steps",
        help="List the provisioning steps and exit",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for timestamped log files",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Provision a sample site into Umbraco through the Management API.

    \b
    QUICK START:
      umbraco-builder                                # Run every step
      umbraco-builder --step templates --step media  # Run selected steps
      umbraco-builder --list-steps                   # Show the steps in run order
    """
    if version:
        typer.echo(f"umbraco-builder version {__version__}")
        raise typer.Exit()

    if list_steps:
        _list_steps()
        raise typer.Exit()

    _run_provision(config, step, logdir, verbosity, no_color)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


if __name__ == "__main__":
    main()
