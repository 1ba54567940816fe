"""Unit tests for management_client.api_wrapper module."""

import uuid
from unittest.mock import Mock

import pytest
import requests
from requests.exceptions import ConnectionError, HTTPError, Timeout

from umbraco_builder.management_client.api_wrapper import API_PREFIX, ManagementApi
from umbraco_builder.management_client.errors import (
    APIUnreachableError,
    AuthError,
    InvalidCredentialsError,
    ManagementApiError,
)


def _http_error(status_code, body):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    return HTTPError(f"{status_code} Error", response=response)


@pytest.fixture
def token_cache():
    cache = Mock()
    cache.get_token.return_value = "bearer-token"
    return cache


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def api(credentials, token_cache, session):
    return ManagementApi(credentials, token_cache, session=session, timeout=7, page_size=2)


class TestRequest:
    """Test cases for authenticated requests."""

    def test_request_sends_bearer_token(self, api, session, response_factory):
        """Every call carries the cached bearer token and the configured timeout."""
        session.request.return_value = response_factory(200, {"total": 0, "items": []})

        api.get_tree_root("template")

        _, kwargs = session.request.call_args
        assert session.request.call_args[0] == ("GET", f"https://umbraco.test{API_PREFIX}/tree/template/root")
        assert kwargs["headers"] == {"Authorization": "Bearer bearer-token"}
        assert kwargs["timeout"] == 7

    def test_auth_error_propagates_without_request(self, api, token_cache, session):
        """A token failure propagates and no API call is made."""
        token_cache.get_token.side_effect = AuthError("https://umbraco.test", "boom")

        with pytest.raises(AuthError):
            api.get_tree_root("data-type")

        session.request.assert_not_called()

    def test_unknown_tree_resource_rejected(self, api):
        """Only known tree resources can be listed."""
        with pytest.raises(ValueError, match="Unknown tree resource"):
            api.get_tree_root("member")

    def test_page_size_must_be_positive(self, credentials, token_cache):
        """page_size below 1 is rejected."""
        with pytest.raises(ValueError):
            ManagementApi(credentials, token_cache, page_size=0)


class TestPagination:
    """Test cases for paginated tree listings."""

    def test_listing_collects_all_pages(self, api, session, response_factory):
        """Pages are requested with skip/take until the total is reached."""
        # Arrange
        session.request.side_effect = [
            response_factory(200, {"total": 3, "items": [{"name": "a"}, {"name": "b"}]}),
            response_factory(200, {"total": 3, "items": [{"name": "c"}]}),
        ]

        # Act
        items = api.get_tree_root("data-type", folders_only=False)

        # Assert
        assert [item["name"] for item in items] == ["a", "b", "c"]
        params = [call.kwargs["params"] for call in session.request.call_args_list]
        assert params == [
            {"foldersOnly": "false", "skip": 0, "take": 2},
            {"foldersOnly": "false", "skip": 2, "take": 2},
        ]

    def test_listing_stops_on_empty_page(self, api, session, response_factory):
        """An empty page ends pagination even if total claims more items."""
        session.request.side_effect = [
            response_factory(200, {"total": 10, "items": [{"name": "a"}, {"name": "b"}]}),
            response_factory(200, {"total": 10, "items": []}),
        ]

        items = api.get_tree_root("media")

        assert len(items) == 2
        assert session.request.call_count == 2

    def test_children_listing_sends_parent_id(self, api, session, response_factory):
        """Children listings pass parentId and foldersOnly."""
        parent_id = uuid.uuid4()
        session.request.return_value = response_factory(200, {"total": 1, "items": [{"name": "x"}]})

        api.get_tree_children("document-type", parent_id, folders_only=True)

        args, kwargs = session.request.call_args
        assert args[1].endswith("/tree/document-type/children")
        assert kwargs["params"]["parentId"] == str(parent_id)
        assert kwargs["params"]["foldersOnly"] == "true"


class TestWrites:
    """Test cases for create and update calls."""

    def test_create_assigns_client_side_id(self, api, session, response_factory):
        """create_* posts a generated id and returns it."""
        session.request.return_value = response_factory(201, None, b"")

        created = api.create_template({"name": "Home", "alias": "home", "content": ""})

        body = session.request.call_args.kwargs["json"]
        assert isinstance(created, uuid.UUID)
        assert body["id"] == str(created)
        assert body["alias"] == "home"

    def test_create_keeps_given_id(self, api, session, response_factory):
        """A payload id is kept as the created id."""
        given = uuid.uuid4()
        session.request.return_value = response_factory(201, None, b"")

        created = api.create_document({"id": str(given), "values": []})

        assert created == given

    def test_create_folder_sets_parent(self, api, session, response_factory):
        """Document type folders reference their parent folder."""
        parent_id = uuid.uuid4()
        session.request.return_value = response_factory(201, None, b"")

        api.create_document_type_folder("Setting Models", parent_id)

        args, kwargs = session.request.call_args
        assert args == ("POST", f"https://umbraco.test{API_PREFIX}/document-type/folder")
        assert kwargs["json"]["name"] == "Setting Models"
        assert kwargs["json"]["parent"] == {"id": str(parent_id)}

    def test_publish_with_descendants(self, api, session, response_factory):
        """Publishing includes unpublished descendants for the invariant culture."""
        document_id = uuid.uuid4()
        session.request.return_value = response_factory(200, None, b"")

        api.publish_document_with_descendants(document_id)

        args, kwargs = session.request.call_args
        assert args[0] == "PUT"
        assert args[1].endswith(f"/document/{document_id}/publish-with-descendants")
        assert kwargs["json"] == {"includeUnpublishedDescendants": True, "cultures": []}

    def test_upload_temporary_file(self, api, session, response_factory, tmp_path):
        """Temporary files are posted as multipart with a generated id."""
        image = tmp_path / "logo.png"
        image.write_bytes(b"\x89PNG")
        session.request.return_value = response_factory(201, None, b"")

        file_id = api.upload_temporary_file(image)

        kwargs = session.request.call_args.kwargs
        assert kwargs["data"] == {"Id": str(file_id)}
        assert kwargs["files"]["File"][0] == "logo.png"


class TestErrorTranslation:
    """Test cases for translating transport and HTTP errors."""

    def test_timeout_becomes_unreachable(self, api, session):
        """Timeouts raise APIUnreachableError for the host."""
        session.request.side_effect = Timeout("timed out")

        with pytest.raises(APIUnreachableError) as exc_info:
            api.get_tree_root("template")

        assert exc_info.value.endpoint == "https://umbraco.test"

    def test_connection_error_becomes_unreachable(self, api, session):
        """Connection errors raise APIUnreachableError."""
        session.request.side_effect = ConnectionError("refused")

        with pytest.raises(APIUnreachableError):
            api.create_data_type({"name": "Tags"})

    def test_401_becomes_invalid_credentials(self, api, session, response_factory):
        """HTTP 401 raises InvalidCredentialsError."""
        response = response_factory(401, None, b"")
        response.raise_for_status.side_effect = _http_error(401, b"")
        session.request.return_value = response

        with pytest.raises(InvalidCredentialsError):
            api.get_tree_root("template")

    def test_problem_detail_in_api_error(self, api, session, response_factory):
        """Other HTTP errors raise ManagementApiError with the problem details."""
        response = response_factory(400, None, b"")
        response.raise_for_status.side_effect = _http_error(
            400, b'{"title": "Duplicate alias", "detail": "The alias home is in use"}'
        )
        session.request.return_value = response

        with pytest.raises(ManagementApiError) as exc_info:
            api.create_template({"name": "Home", "alias": "home"})

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Duplicate alias - The alias home is in use"
        assert "create(template, Home)" in str(exc_info.value)


class TestSanitizeCredentials:
    """Test cases for credential masking."""

    def test_masks_bearer_and_secret(self, api):
        """Bearer tokens and the client secret never appear in sanitized text."""
        text = "Authorization failed; Bearer abc.def.ghi; client_secret=s3cr3t-value; raw s3cr3t-value"

        sanitized = api._sanitize_credentials(text)

        assert "abc.def.ghi" not in sanitized
        assert "s3cr3t-value" not in sanitized
        assert "***REDACTED***" in sanitized
