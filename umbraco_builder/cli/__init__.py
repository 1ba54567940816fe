"""Command-line interface for umbraco-builder."""

from .errors import CLIError, ConfigError, ConfigFilesystemError
from .models import ExitCode, BuilderConfig, RunSummary, STEPS
from .config import ConfigLoader
from .output import OutputHandler
from .provision_command import ProvisionCommand

__all__ = [
    "CLIError",
    "ConfigError",
    "ConfigFilesystemError",
    "ExitCode",
    "BuilderConfig",
    "RunSummary",
    "STEPS",
    "ConfigLoader",
    "OutputHandler",
    "ProvisionCommand",
]
