"""Unit tests for the composition, element type and document type builders."""

import uuid
from unittest.mock import Mock

import pytest

from umbraco_builder.builders.compositions import (
    CompositionsBuilder,
    document_compositions,
    settings_compositions,
)
from umbraco_builder.builders.document_types import DocumentTypesBuilder
from umbraco_builder.builders.element_types import (
    SETTINGS_ELEMENTS,
    ElementTypesBuilder,
    content_elements,
)
from umbraco_builder.builders.names import (
    COMPOSITIONS_FOLDER,
    SETTINGS_COMPOSITIONS_FOLDER,
    Compositions,
    TemplateNames,
)
from umbraco_builder.management_client.errors import NotFoundError


@pytest.fixture
def api():
    api = Mock()
    api.create_document_type_folder.side_effect = lambda name, parent_id=None: uuid.uuid4()
    api.create_document_type.side_effect = lambda payload: uuid.UUID(payload["id"])
    return api


@pytest.fixture
def resolver():
    resolver = Mock()
    resolver.data_type_id.side_effect = lambda name: uuid.uuid4()
    return resolver


def _created(api):
    return {call.args[0]["name"]: call.args[0] for call in api.create_document_type.call_args_list}


class TestCompositionsBuilder:
    """Test cases for CompositionsBuilder."""

    def test_build_creates_nested_folders(self, api, resolver):
        """Compositions / Content Blocks / Setting Models are created in a chain."""
        CompositionsBuilder(api, resolver).build()

        folders = api.create_document_type_folder.call_args_list
        assert [call.args[0] for call in folders] == ["Compositions", "Content Blocks", "Setting Models"]
        assert folders[0].args == ("Compositions", None)

    def test_build_creates_every_composition(self, api, resolver):
        """Settings compositions go to Setting Models, page compositions to Compositions."""
        CompositionsBuilder(api, resolver).build()

        created = _created(api)
        assert len(created) == len(settings_compositions()) + len(document_compositions())
        assert created[Compositions.HIDE_PROPERTY]["isElement"] is True
        assert created[Compositions.SEO_CONTROLS]["parent"] != created[Compositions.HIDE_PROPERTY]["parent"]

    def test_unknown_data_type_aborts(self, api, resolver):
        """A missing data type stops the builder with NotFoundError."""
        resolver.data_type_id.side_effect = NotFoundError("data type", "Textstring")

        with pytest.raises(NotFoundError):
            CompositionsBuilder(api, resolver).build()


class TestElementTypesBuilder:
    """Test cases for ElementTypesBuilder."""

    def test_settings_elements_use_settings_compositions(self, api, resolver):
        """Settings element types compose Hide Property and Spacing Properties."""
        # Arrange
        composition_ids = {Compositions.HIDE_PROPERTY: uuid.uuid4(), Compositions.SPACING_PROPERTIES: uuid.uuid4()}
        resolver.document_type_id.side_effect = lambda name, *path: composition_ids[name]

        # Act
        ElementTypesBuilder(api, resolver).build()

        # Assert
        created = _created(api)
        assert len(created) == len(content_elements()) + len(SETTINGS_ELEMENTS)
        icon_link = created["Icon Link Row Settings"]
        assert icon_link["compositions"] == [
            {"documentType": {"id": str(composition_ids[Compositions.HIDE_PROPERTY])}, "compositionType": "Composition"}
        ]
        assert len(created["Image Row Settings"]["compositions"]) == 2
        assert resolver.document_type_id.call_args.args[1:] == SETTINGS_COMPOSITIONS_FOLDER

    def test_content_elements_are_elements(self, api, resolver):
        """Every content element type is an element with a Content container."""
        for spec in content_elements():
            assert spec.is_element
            assert [container.name for container in spec.containers] == ["Content"]


class TestDocumentTypesBuilder:
    """Test cases for DocumentTypesBuilder."""

    def _resolver(self, resolver):
        compositions = {
            name: uuid.uuid4()
            for name in (
                Compositions.ARTICLE_CONTROLS, Compositions.CONTENT_CONTROLS, Compositions.HEADER_CONTROLS,
                Compositions.FOOTER_CONTROLS, Compositions.MAIN_IMAGE_CONTROLS, Compositions.SEO_CONTROLS,
                Compositions.VISIBILITY_CONTROLS, Compositions.CONTACT_FORM_CONTROLS,
            )
        }
        templates = {
            name: uuid.uuid4()
            for name in (
                TemplateNames.MASTER, TemplateNames.ARTICLE, TemplateNames.ARTICLE_LIST, TemplateNames.AUTHOR,
                TemplateNames.AUTHOR_LIST, TemplateNames.CONTACT, TemplateNames.CONTENT, TemplateNames.ERROR,
                TemplateNames.HOME, TemplateNames.SEARCH, TemplateNames.XML_SITEMAP,
            )
        }
        resolver.document_type_ids.return_value = compositions
        resolver.template_ids.return_value = templates
        return compositions, templates

    def test_home_is_root_and_allows_top_level_pages(self, api, resolver):
        """Home is created last, allowed at root, with every top-level page as a child."""
        # Arrange
        _, templates = self._resolver(resolver)

        # Act
        DocumentTypesBuilder(api, resolver).build()

        # Assert
        payloads = [call.args[0] for call in api.create_document_type.call_args_list]
        home = payloads[-1]
        assert len(payloads) == 12
        assert home["name"] == "Home"
        assert home["allowedAsRoot"] is True
        assert home["defaultTemplate"] == {"id": str(templates[TemplateNames.HOME])}
        by_id = {payload["id"]: payload["name"] for payload in payloads}
        children = [by_id[child["documentType"]["id"]] for child in home["allowedDocumentTypes"]]
        assert children == [
            "Article List", "Author List", "Category List", "Contact", "Content", "Error", "Search", "XML Sitemap",
        ]
        assert all(not payload["allowedAsRoot"] for payload in payloads[:-1])
        resolver.document_type_ids.assert_called_once_with(*COMPOSITIONS_FOLDER)

    def test_list_types_use_collection(self, api, resolver):
        """List page types allow one child type and show a list view collection."""
        self._resolver(resolver)

        DocumentTypesBuilder(api, resolver).build()

        created = _created(api)
        article_list = created["Article List"]
        assert article_list["collection"] is not None
        assert article_list["allowedDocumentTypes"] == [
            {"documentType": {"id": created["Article"]["id"]}, "sortOrder": 1}
        ]
        assert created["Category"]["defaultTemplate"] is None

    def test_missing_composition(self, api, resolver):
        """A missing composition raises NotFoundError naming it."""
        compositions, _ = self._resolver(resolver)
        del compositions[Compositions.ARTICLE_CONTROLS]

        with pytest.raises(NotFoundError) as exc_info:
            DocumentTypesBuilder(api, resolver).build()

        assert exc_info.value.name == Compositions.ARTICLE_CONTROLS
