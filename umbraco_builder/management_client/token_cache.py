"""Bearer token cache for the Management API.

The back-office token endpoint issues short-lived tokens via the OAuth
client-credentials grant. TokenCache holds the current token and renews it
once it is within EXPIRY_SAFETY_MARGIN seconds of expiring. Concurrent callers
share a single renewal: the expiry check is repeated under the lock, so
threads that queued behind the one fetching a token reuse its result.
"""

import logging
import threading
import time
from typing import Callable, NamedTuple, Optional

import requests
from requests.exceptions import RequestException

from .auth import ClientCredentials
from .errors import AuthError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/umbraco/management/api/v1/security/back-office/token"

# Seconds subtracted from expires_in so a token is never used at the edge of its lifetime
EXPIRY_SAFETY_MARGIN = 20


class AccessToken(NamedTuple):
    """A bearer token and the clock reading after which it must be renewed."""
    token: str
    expires_at: float


class TokenCache:
    """Thread-safe cache for a client-credentials bearer token.

    Example:
        >>> cache = TokenCache(creds)
        >>> headers = {"Authorization": f"Bearer {cache.get_token()}"}
    """

    def __init__(
        self,
        credentials: ClientCredentials,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            credentials: Client credentials used for the token request
            session: HTTP session to post with (a new one is created if omitted)
            timeout: Transport timeout in seconds for the token request
            clock: Monotonic clock returning seconds, injectable for tests
        """
        self._credentials = credentials
        self._session = session or requests.Session()
        self._timeout = timeout
        self._clock = clock
        self._lock = threading.Lock()
        self._token: Optional[AccessToken] = None

    @property
    def endpoint(self) -> str:
        return f"{self._credentials.host}{TOKEN_PATH}"

    def _is_valid(self, token: Optional[AccessToken]) -> bool:
        return token is not None and self._clock() < token.expires_at

    def get_token(self) -> str:
        """Return a valid bearer token, requesting a new one if needed.

        Returns:
            str: The bearer token value

        Raises:
            AuthError: If the token endpoint fails or returns no token
        """
        token = self._token
        if self._is_valid(token):
            return token.token  # type: ignore[union-attr]

        with self._lock:
            token = self._token
            if self._is_valid(token):
                logger.debug("Token renewed by another caller, reusing it")
                return token.token  # type: ignore[union-attr]

            token = self._request_token()
            self._token = token
            return token.token

    def invalidate(self) -> None:
        """Drop the cached token so the next call requests a fresh one."""
        with self._lock:
            self._token = None

    def _request_token(self) -> AccessToken:
        logger.debug(f"Requesting access token from {self.endpoint}")
        try:
            response = self._session.post(
                self.endpoint,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._credentials.client_id,
                    "client_secret": self._credentials.client_secret,
                },
                timeout=self._timeout,
            )
        except RequestException as e:
            logger.error(f"Token request failed: {type(e).__name__}")
            raise AuthError(self.endpoint, f"token request failed ({type(e).__name__})") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if not response.ok or payload.get("error"):
            reason = payload.get("error_description") or payload.get("error") or f"HTTP {response.status_code}"
            logger.error(f"Token endpoint returned an error: {reason}")
            raise AuthError(self.endpoint, str(reason))

        access_token = payload.get("access_token")
        if not access_token:
            logger.error("Token endpoint response did not contain an access token")
            raise AuthError(self.endpoint, "response did not contain an access token")

        try:
            expires_in = float(payload.get("expires_in", 0))
        except (TypeError, ValueError) as e:
            raise AuthError(self.endpoint, f"invalid expires_in: {payload.get('expires_in')!r}") from e

        expires_at = self._clock() + expires_in - EXPIRY_SAFETY_MARGIN
        logger.info(f"Obtained access token valid for {int(expires_in)}s")
        return AccessToken(token=access_token, expires_at=expires_at)
