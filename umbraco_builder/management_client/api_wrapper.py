"""HTTP client for the Umbraco Management API.

ManagementApi issues every call with a bearer token taken from the shared
TokenCache, paginates tree listings, and translates transport and HTTP
failures into the typed exception hierarchy in errors.py. There is no retry:
a failed call aborts the builder that made it.
"""

import logging
import re
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from .auth import ClientCredentials
from .errors import (
    APIUnreachableError,
    BuilderError,
    InvalidCredentialsError,
    ManagementApiError,
)
from .token_cache import TokenCache

logger = logging.getLogger(__name__)

API_PREFIX = "/umbraco/management/api/v1"

# Tree resources that can be listed through tree/{resource}/root and /children
TREE_RESOURCES = frozenset({
    "data-type",
    "media-type",
    "document-type",
    "media",
    "template",
    "document",
})

DEFAULT_PAGE_SIZE = 100


class ManagementApi:
    """Authenticated wrapper around the Management API endpoints used by the builders.

    One instance, and its session, is shared by every builder of a run,
    including the documents prefetch workers. Calls carry the bearer token in
    a per-request header and never change the session's headers or auth, so
    workers share little more than its connection pool. Token requests go
    through the TokenCache's own session.

    Example:
        >>> creds = Authenticator().get_credentials()
        >>> api = ManagementApi(creds, TokenCache(creds))
        >>> api.get_tree_root("data-type")
    """

    def __init__(
        self,
        credentials: ClientCredentials,
        token_cache: TokenCache,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """Initialize the API wrapper.

        Args:
            credentials: Credentials of the API user (only the host is used here)
            token_cache: Shared cache providing bearer tokens
            session: HTTP session (a new one is created if omitted)
            timeout: Transport timeout in seconds for every call
            page_size: Number of items requested per tree listing page
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._credentials = credentials
        self._token_cache = token_cache
        self._session = session or requests.Session()
        self._timeout = timeout
        self._page_size = page_size

    @property
    def host(self) -> str:
        return self._credentials.host

    def _url(self, path: str) -> str:
        return f"{self._credentials.host}{API_PREFIX}/{path.lstrip('/')}"

    def _sanitize_credentials(self, text: str) -> str:
        """Mask bearer tokens and client secrets in error text before logging.

        Example:
            >>> api._sanitize_credentials("Authorization: Bearer abc.def")
            "Authorization: ***REDACTED***"
        """
        if not text:
            return text

        sanitized = re.sub(
            r'Authorization:\s*[^\n\r]+',
            'Authorization: ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'(client_secret|access_token|token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
            r'\1=***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        secret = self._credentials.client_secret
        if secret:
            sanitized = sanitized.replace(secret, '***REDACTED***')
        return sanitized

    def _problem_detail(self, response: Optional[requests.Response]) -> str:
        """Extract the title/detail of an RFC 7807 problem response, if any."""
        if response is None:
            return ""
        try:
            payload = response.json()
        except ValueError:
            return response.text[:200] if response.text else ""
        if not isinstance(payload, dict):
            return ""
        parts = [str(payload[key]) for key in ("title", "detail") if payload.get(key)]
        return " - ".join(parts)

    def _translate_error(self, exception: Exception, operation: str) -> BuilderError:
        """Translate transport and HTTP exceptions to typed builder exceptions.

        Args:
            exception: The original exception raised by requests
            operation: Description of the operation that failed (for logging)

        Returns:
            BuilderError: Translated exception
        """
        if isinstance(exception, (Timeout, ConnectionError)):
            logger.error(f"API operation failed: {operation} - {type(exception).__name__}")
            return APIUnreachableError(endpoint=self.host)

        response = getattr(exception, 'response', None)
        status_code = getattr(response, 'status_code', None)

        if status_code == 401:
            return InvalidCredentialsError(
                endpoint=self.host,
                reason="the API rejected the bearer token"
            )

        detail = self._sanitize_credentials(self._problem_detail(response) or str(exception))
        logger.error(f"API operation failed: {operation} - {detail}")
        return ManagementApiError(operation, status_code=status_code, detail=detail)

    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Issue one authenticated call and return its decoded JSON body (or None)."""
        token = self._token_cache.get_token()
        logger.debug(f"{method} {path} {params or ''}")
        try:
            response = self._session.request(
                method,
                self._url(path),
                headers={"Authorization": f"Bearer {token}"},
                params=params,
                json=json,
                data=data,
                files=files,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except RequestException as e:
            raise self._translate_error(e, operation) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def _list_all(self, path: str, operation: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Collect every item of a paginated listing.

        Pages are requested with skip/take until skip reaches the reported
        total or a page comes back empty.
        """
        items: List[Dict[str, Any]] = []
        skip = 0
        while True:
            page = self._request(
                "GET",
                path,
                operation,
                params={**params, "skip": skip, "take": self._page_size},
            ) or {}
            page_items = page.get("items") or []
            items.extend(page_items)
            skip += len(page_items)
            total = page.get("total", 0)
            if not page_items or skip >= total:
                break
        return items

    def _tree_params(self, folders_only: Optional[bool]) -> Dict[str, Any]:
        if folders_only is None:
            return {}
        return {"foldersOnly": "true" if folders_only else "false"}

    def _check_tree_resource(self, resource: str) -> None:
        if resource not in TREE_RESOURCES:
            raise ValueError(f"Unknown tree resource: '{resource}'")

    def get_tree_root(self, resource: str, folders_only: Optional[bool] = None) -> List[Dict[str, Any]]:
        """List every root item of a tree.

        Args:
            resource: Tree name, one of TREE_RESOURCES
            folders_only: Restrict to folders (only meaningful for typed trees)

        Returns:
            List of tree item dicts (id, name or variants, isFolder, ...)
        """
        self._check_tree_resource(resource)
        return self._list_all(
            f"tree/{resource}/root",
            f"get_tree_root({resource})",
            self._tree_params(folders_only),
        )

    def get_tree_children(
        self,
        resource: str,
        parent_id: uuid.UUID,
        folders_only: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        """List every child item of a tree node."""
        self._check_tree_resource(resource)
        params = self._tree_params(folders_only)
        params["parentId"] = str(parent_id)
        return self._list_all(
            f"tree/{resource}/children",
            f"get_tree_children({resource}, {parent_id})",
            params,
        )

    def _create(self, resource: str, payload: Dict[str, Any]) -> uuid.UUID:
        """POST a create request, assigning a client-side id when none is given."""
        body = dict(payload)
        item_id = body.get("id") or str(uuid.uuid4())
        body["id"] = str(item_id)
        self._request("POST", resource, f"create({resource}, {body.get('name') or body.get('alias') or item_id})", json=body)
        return uuid.UUID(str(item_id))

    def create_dictionary_item(self, payload: Dict[str, Any]) -> uuid.UUID:
        return self._create("dictionary", payload)

    def create_template(self, payload: Dict[str, Any]) -> uuid.UUID:
        return self._create("template", payload)

    def create_data_type(self, payload: Dict[str, Any]) -> uuid.UUID:
        return self._create("data-type", payload)

    def update_data_type(self, data_type_id: uuid.UUID, payload: Dict[str, Any]) -> None:
        self._request("PUT", f"data-type/{data_type_id}", f"update_data_type({data_type_id})", json=payload)

    def create_document_type_folder(self, name: str, parent_id: Optional[uuid.UUID] = None) -> uuid.UUID:
        payload: Dict[str, Any] = {"name": name}
        if parent_id is not None:
            payload["parent"] = {"id": str(parent_id)}
        return self._create("document-type/folder", payload)

    def create_document_type(self, payload: Dict[str, Any]) -> uuid.UUID:
        return self._create("document-type", payload)

    def create_media(self, payload: Dict[str, Any]) -> uuid.UUID:
        return self._create("media", payload)

    def upload_temporary_file(self, file_path: Path) -> uuid.UUID:
        """Upload a local file as a temporary file and return its id.

        Raises:
            FileNotFoundError: If file_path does not exist
        """
        temporary_file_id = uuid.uuid4()
        with open(file_path, "rb") as handle:
            self._request(
                "POST",
                "temporary-file",
                f"upload_temporary_file({Path(file_path).name})",
                data={"Id": str(temporary_file_id)},
                files={"File": (Path(file_path).name, handle)},
            )
        return temporary_file_id

    def create_document(self, payload: Dict[str, Any]) -> uuid.UUID:
        return self._create("document", payload)

    def update_document(self, document_id: uuid.UUID, payload: Dict[str, Any]) -> None:
        self._request("PUT", f"document/{document_id}", f"update_document({document_id})", json=payload)

    def publish_document_with_descendants(
        self,
        document_id: uuid.UUID,
        cultures: Optional[List[str]] = None,
        include_unpublished_descendants: bool = True,
    ) -> None:
        """Publish a document and all of its descendants."""
        self._request(
            "PUT",
            f"document/{document_id}/publish-with-descendants",
            f"publish_document_with_descendants({document_id})",
            json={
                "includeUnpublishedDescendants": include_unpublished_descendants,
                "cultures": cultures or [],
            },
        )
