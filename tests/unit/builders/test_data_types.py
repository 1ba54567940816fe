"""Unit tests for builders.data_types module."""

import uuid
from unittest.mock import Mock

import pytest

from umbraco_builder.builders.data_types import (
    BLOCK_LIST,
    MAIN_CONTENT_BLOCKS,
    DataTypesBuilder,
    data_type_payload,
)
from umbraco_builder.builders.names import (
    CONTENT_ELEMENTS_FOLDER,
    SETTINGS_ELEMENTS_FOLDER,
    ContentElements,
    DataTypeNames,
)
from umbraco_builder.management_client.errors import NotFoundError


@pytest.fixture
def api():
    return Mock()


@pytest.fixture
def resolver():
    return Mock()


def _elements():
    names = MAIN_CONTENT_BLOCKS + [ContentElements.ICON_LINK_ROW]
    content = {name: uuid.uuid4() for name in names}
    settings = {f"{name} Settings": uuid.uuid4() for name in names}
    return content, settings


class TestDataTypePayload:
    """Test cases for data_type_payload."""

    def test_values_become_alias_value_pairs(self):
        """Configuration values are sent as alias/value pairs."""
        payload = data_type_payload("Tags", ("Umbraco.Tags", "Umb.PropertyEditorUi.Tags"), {"group": "default"})

        assert payload == {
            "name": "Tags",
            "editorAlias": "Umbraco.Tags",
            "editorUiAlias": "Umb.PropertyEditorUi.Tags",
            "values": [{"alias": "group", "value": "default"}],
        }


class TestDataTypesBuilder:
    """Test cases for DataTypesBuilder."""

    def test_build_filters_svg_picker(self, api, resolver):
        """The SVG media picker is filtered to the vector graphics media type."""
        svg_type = uuid.uuid4()
        resolver.media_type_id.return_value = svg_type

        DataTypesBuilder(api, resolver).build()

        payloads = {call.args[0]["name"]: call.args[0] for call in api.create_data_type.call_args_list}
        assert len(payloads) == 9
        svg_values = {value["alias"]: value["value"] for value in payloads[DataTypeNames.MEDIA_PICKER_SVG]["values"]}
        assert svg_values == {"multiple": False, "filter": str(svg_type)}

    def test_update_document_types_sets_blocks(self, api, resolver):
        """Block lists reference content and settings element types."""
        # Arrange
        content, settings = _elements()
        resolver.document_type_ids.side_effect = lambda *path: (
            content if path == CONTENT_ELEMENTS_FOLDER else settings
        )
        main_content_id = uuid.uuid4()
        resolver.data_type_id.side_effect = lambda name: (
            main_content_id if name == DataTypeNames.BLOCK_LIST_MAIN_CONTENT else uuid.uuid4()
        )

        # Act
        DataTypesBuilder(api, resolver).update_document_types()

        # Assert
        assert api.update_data_type.call_count == 2
        data_type_id, payload = api.update_data_type.call_args_list[1].args
        assert data_type_id == main_content_id
        assert payload["editorAlias"] == BLOCK_LIST[0]
        blocks = payload["values"][0]["value"]
        assert len(blocks) == len(MAIN_CONTENT_BLOCKS)
        assert blocks[0] == {
            "contentElementTypeKey": str(content[ContentElements.RICH_TEXT_ROW]),
            "settingsElementTypeKey": str(settings["Rich Text Row Settings"]),
        }

    def test_update_document_types_missing_settings(self, api, resolver):
        """A missing settings element type raises NotFoundError."""
        content, settings = _elements()
        del settings["Icon Link Row Settings"]
        resolver.document_type_ids.side_effect = lambda *path: (
            content if path == CONTENT_ELEMENTS_FOLDER else settings
        )

        with pytest.raises(NotFoundError) as exc_info:
            DataTypesBuilder(api, resolver).update_document_types()

        assert exc_info.value.scope == SETTINGS_ELEMENTS_FOLDER
        api.update_data_type.assert_not_called()

    def test_update_documents_sets_dynamic_root(self, api, resolver):
        """Content pickers start at the nearest list page below the home document."""
        # Arrange
        home_id, author_list_id = uuid.uuid4(), uuid.uuid4()
        api.get_tree_root.return_value = [{"id": str(home_id), "variants": [{"name": "Home"}]}]
        resolver.document_type_id.side_effect = lambda name, *path: (
            author_list_id if name == "Author List" else uuid.uuid4()
        )

        # Act
        DataTypesBuilder(api, resolver).update_documents()

        # Assert
        api.get_tree_root.assert_called_once_with("document")
        _, payload = api.update_data_type.call_args_list[0].args
        values = {value["alias"]: value["value"] for value in payload["values"]}
        assert values["maxNumber"] == 1
        dynamic_root = values["startNode"]["dynamicRoot"]
        assert dynamic_root["originKey"] == str(home_id)
        assert dynamic_root["querySteps"][0]["anyOfDocTypeKeys"] == [str(author_list_id)]

    def test_update_documents_requires_home(self, api, resolver):
        """Without a root document the update fails with NotFoundError."""
        api.get_tree_root.return_value = []

        with pytest.raises(NotFoundError):
            DataTypesBuilder(api, resolver).update_documents()
