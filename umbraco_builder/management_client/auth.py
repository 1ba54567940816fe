"""Authentication module for loading Management API client credentials.

Credentials for the back-office API user are loaded from environment
variables using python-dotenv. All three values are required; a missing one
is reported by name so the operator knows which variable to set.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

HOST_VARIABLE = 'UMBRACO_HOST'
CLIENT_ID_VARIABLE = 'UMBRACO_CLIENT_ID'
CLIENT_SECRET_VARIABLE = 'UMBRACO_CLIENT_SECRET'


class ClientCredentials(NamedTuple):
    """OAuth client-credentials for an Umbraco API user."""
    host: str
    client_id: str
    client_secret: str


class Authenticator:
    """Loads and validates client credentials from environment variables.

    Required environment variables:
        UMBRACO_HOST: Base URL of the Umbraco instance (e.g., https://localhost:44317)
        UMBRACO_CLIENT_ID: Client id of the API user (e.g., umbraco-back-office-builder)
        UMBRACO_CLIENT_SECRET: Client secret of the API user

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Provisioning {creds.host}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> ClientCredentials:
        """Get client credentials from environment variables.

        Returns:
            ClientCredentials: host, client_id and client_secret

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        host = os.getenv(HOST_VARIABLE)
        client_id = os.getenv(CLIENT_ID_VARIABLE)
        client_secret = os.getenv(CLIENT_SECRET_VARIABLE)

        missing = []
        if not host:
            missing.append(HOST_VARIABLE)
        if not client_id:
            missing.append(CLIENT_ID_VARIABLE)
        if not client_secret:
            missing.append(CLIENT_SECRET_VARIABLE)

        if missing:
            raise InvalidCredentialsError(
                endpoint=host if host else "unknown",
                reason=f"missing environment variables: {', '.join(missing)}"
            )

        return ClientCredentials(
            host=host.rstrip('/'),  # type: ignore[union-attr]
            client_id=client_id,  # type: ignore[arg-type]
            client_secret=client_secret,  # type: ignore[arg-type]
        )
