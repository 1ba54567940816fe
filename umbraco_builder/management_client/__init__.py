"""Management API client for umbraco-builder.

This package wraps the Umbraco Management API: credential loading, a shared
bearer token cache, and an HTTP client that translates failures into typed
exceptions.
"""

from .errors import (
    BuilderError,
    ManagementApiError,
    AuthError,
    InvalidCredentialsError,
    APIUnreachableError,
    FetchError,
    NotFoundError,
    ValidationError,
    AssetNotFoundError,
)
from .auth import Authenticator, ClientCredentials
from .token_cache import AccessToken, TokenCache
from .api_wrapper import ManagementApi

__all__ = [
    "BuilderError",
    "ManagementApiError",
    "AuthError",
    "InvalidCredentialsError",
    "APIUnreachableError",
    "FetchError",
    "NotFoundError",
    "ValidationError",
    "AssetNotFoundError",
    "Authenticator",
    "ClientCredentials",
    "AccessToken",
    "TokenCache",
    "ManagementApi",
]
