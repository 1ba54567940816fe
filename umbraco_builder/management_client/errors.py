"""Typed exception hierarchy for Management API and provisioning errors.

Every error raised by the builder inherits from BuilderError so callers can
catch the whole family at the CLI boundary. Each exception builds its own
message from the context it carries, which keeps the failing category, name
or endpoint visible in logs.
"""

from typing import Optional, Sequence


class BuilderError(Exception):
    """Base exception for all umbraco-builder errors.

    Use this to catch any application-level error from the builder.
    """
    pass


class ManagementApiError(BuilderError):
    """Raised when a Management API call fails with an unexpected status."""

    def __init__(self, operation: str, status_code: Optional[int] = None, detail: str = ""):
        message = f"Management API failure during {operation}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.detail = detail


class AuthError(BuilderError):
    """Raised when a bearer token cannot be obtained."""

    def __init__(self, endpoint: str, reason: str):
        super().__init__(f"Could not obtain an access token from {endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason


class InvalidCredentialsError(AuthError):
    """Raised when client credentials are missing or rejected."""

    def __init__(self, endpoint: str, reason: str = "client credentials are invalid"):
        super().__init__(endpoint, reason)


class APIUnreachableError(BuilderError):
    """Raised when the Management API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


def _format_scope(scope: Sequence[str]) -> str:
    return "/".join(scope)


class FetchError(BuilderError):
    """Raised when a name index could not be populated."""

    def __init__(self, category: str, scope: Sequence[str] = (), reason: str = "no items returned"):
        where = f" in '{_format_scope(scope)}'" if scope else ""
        super().__init__(f"Could not fetch {category} identifiers{where}: {reason}")
        self.category = category
        self.scope = tuple(scope)
        self.reason = reason


class NotFoundError(BuilderError):
    """Raised when a name or folder segment does not exist remotely."""

    def __init__(self, category: str, name: str, scope: Sequence[str] = ()):
        where = f" in '{_format_scope(scope)}'" if scope else ""
        super().__init__(f"The {category} did not exist: '{name}'{where}")
        self.category = category
        self.name = name
        self.scope = tuple(scope)


class ValidationError(BuilderError):
    """Raised when the remote content does not meet a builder precondition."""

    def __init__(self, message: str):
        super().__init__(message)


class AssetNotFoundError(BuilderError):
    """Raised when a local view or media file is missing."""

    def __init__(self, file_path: str):
        super().__init__(f"Asset file not found: {file_path}")
        self.file_path = file_path
