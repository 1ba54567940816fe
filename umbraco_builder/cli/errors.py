"""Typed exception hierarchy for CLI-related errors."""

from typing import Optional

from umbraco_builder.management_client.errors import BuilderError


class CLIError(BuilderError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigError(CLIError):
    """Raised when the run configuration is invalid or malformed."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Config error in field '{config_field}': {message}"
        else:
            full_message = f"Config error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class ConfigFilesystemError(CLIError):
    """Raised when the configuration file cannot be read."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Config file operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
