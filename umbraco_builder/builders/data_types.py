"""Custom data types and their configuration updates.

Some data type settings can only be filled in after the items they point
at exist. The builder is therefore run three times during provisioning:

    build()                   creates the data types
    update_document_types()   after element types exist: block list blocks
    update_documents()        after documents exist: content picker start nodes
"""

import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

from ..management_client.errors import NotFoundError
from .base import BuilderBase
from .names import (
    CONTENT_ELEMENTS_FOLDER,
    PAGES_FOLDER,
    SETTINGS_ELEMENTS_FOLDER,
    ContentElements,
    DataTypeNames,
    DocumentTypeNames,
    MediaTypeNames,
    settings_element,
)

logger = logging.getLogger(__name__)

BLOCK_LIST = ("Umbraco.BlockList", "Umb.PropertyEditorUi.BlockList")
DROPDOWN = ("Umbraco.DropDown.Flexible", "Umb.PropertyEditorUi.Dropdown")
MEDIA_PICKER = ("Umbraco.MediaPicker3", "Umb.PropertyEditorUi.MediaPicker")
CONTENT_PICKER = ("Umbraco.MultiNodeTreePicker", "Umb.PropertyEditorUi.ContentPicker")
URL_PICKER = ("Umbraco.MultiUrlPicker", "Umb.PropertyEditorUi.MultiUrlPicker")
SLIDER = ("Umbraco.Slider", "Umb.PropertyEditorUi.Slider")
TOGGLE = ("Umbraco.TrueFalse", "Umb.PropertyEditorUi.Toggle")

MAIN_CONTENT_BLOCKS = [
    ContentElements.RICH_TEXT_ROW,
    ContentElements.IMAGE_ROW,
    ContentElements.VIDEO_ROW,
    ContentElements.CODE_SNIPPET_ROW,
    ContentElements.IMAGE_CAROUSEL_ROW,
    ContentElements.LATEST_ARTICLES_ROW,
]


def data_type_payload(
    name: str,
    editor: Tuple[str, str],
    values: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build a data type request body from an (editor alias, editor UI alias) pair."""
    editor_alias, editor_ui_alias = editor
    return {
        "name": name,
        "editorAlias": editor_alias,
        "editorUiAlias": editor_ui_alias,
        "values": [{"alias": alias, "value": value} for alias, value in (values or {}).items()],
    }


class DataTypesBuilder(BuilderBase):
    """Creates and later reconfigures the site's custom data types."""

    def build(self) -> None:
        logger.info("Starting data types")

        svg_media_type_id = self.resolver.media_type_id(MediaTypeNames.VECTOR_GRAPHICS)

        payloads: List[Dict[str, Any]] = [
            data_type_payload(DataTypeNames.BLOCK_LIST_ICON_LIST, BLOCK_LIST),
            data_type_payload(DataTypeNames.BLOCK_LIST_MAIN_CONTENT, BLOCK_LIST),
            data_type_payload(DataTypeNames.DROPDOWN_SPACING, DROPDOWN, {
                "multiple": False,
                "items": ["Unset", "1", "2", "3", "4", "5"],
            }),
            data_type_payload(DataTypeNames.MEDIA_PICKER_SVG, MEDIA_PICKER, {
                "multiple": False,
                "filter": str(svg_media_type_id),
            }),
            data_type_payload(DataTypeNames.CONTENT_PICKER_AUTHORS, CONTENT_PICKER),
            data_type_payload(DataTypeNames.CONTENT_PICKER_CATEGORIES, CONTENT_PICKER),
            data_type_payload(DataTypeNames.URL_PICKER_SINGLE, URL_PICKER, {
                "minNumber": 0,
                "maxNumber": 1,
            }),
            data_type_payload(DataTypeNames.SLIDER_SPACING, SLIDER, {
                "minVal": -1,
                "maxVal": 0,
                "initVal1": -1,
                "initVal2": 5,
                "step": 1,
            }),
            data_type_payload(DataTypeNames.TOGGLE_DEFAULT_TRUE, TOGGLE, {
                "default": True,
                "showLabels": False,
            }),
        ]
        for payload in payloads:
            logger.debug(f"Creating data type '{payload['name']}'")
            self.api.create_data_type(payload)

    def update_document_types(self) -> None:
        """Configure the block lists with their content and settings element types."""
        logger.info("Updating data types (configuration updates for document types)")

        content_elements = self.resolver.document_type_ids(*CONTENT_ELEMENTS_FOLDER)
        settings_elements = self.resolver.document_type_ids(*SETTINGS_ELEMENTS_FOLDER)

        def block(content_element: str) -> Dict[str, str]:
            settings_name = settings_element(content_element)
            if content_element not in content_elements:
                raise NotFoundError("content element type", content_element, CONTENT_ELEMENTS_FOLDER)
            if settings_name not in settings_elements:
                raise NotFoundError("settings element type", settings_name, SETTINGS_ELEMENTS_FOLDER)
            return {
                "contentElementTypeKey": str(content_elements[content_element]),
                "settingsElementTypeKey": str(settings_elements[settings_name]),
            }

        self._update(DataTypeNames.BLOCK_LIST_ICON_LIST, BLOCK_LIST, {
            "blocks": [block(ContentElements.ICON_LINK_ROW)],
        })
        self._update(DataTypeNames.BLOCK_LIST_MAIN_CONTENT, BLOCK_LIST, {
            "blocks": [block(name) for name in MAIN_CONTENT_BLOCKS],
        })

    def update_documents(self) -> None:
        """Root the author and category pickers at their list pages below Home."""
        logger.info("Updating data types (configuration updates for documents)")

        documents = self.api.get_tree_root("document")
        if not documents:
            raise NotFoundError("document", DocumentTypeNames.HOME)
        home_id = uuid.UUID(str(documents[0]["id"]))

        author_list_id = self.resolver.document_type_id(DocumentTypeNames.AUTHOR_LIST, *PAGES_FOLDER)
        category_list_id = self.resolver.document_type_id(DocumentTypeNames.CATEGORY_LIST, *PAGES_FOLDER)

        self._update_content_picker(DataTypeNames.CONTENT_PICKER_AUTHORS, 1, home_id, author_list_id)
        self._update_content_picker(DataTypeNames.CONTENT_PICKER_CATEGORIES, 0, home_id, category_list_id)

    def _update_content_picker(
        self,
        name: str,
        max_number: int,
        home_id: uuid.UUID,
        document_type_id: uuid.UUID,
    ) -> None:
        # Dynamic root: start at Home, then the nearest descendant of the list document type
        self._update(name, CONTENT_PICKER, {
            "startNode": {
                "type": "content",
                "dynamicRoot": {
                    "originAlias": "ByKey",
                    "originKey": str(home_id),
                    "querySteps": [
                        {
                            "alias": "NearestDescendantOrSelf",
                            "anyOfDocTypeKeys": [str(document_type_id)],
                        }
                    ],
                },
            },
            "minNumber": 0,
            "maxNumber": max_number,
        })

    def _update(self, name: str, editor: Tuple[str, str], values: Dict[str, Any]) -> None:
        data_type_id = self.resolver.data_type_id(name)
        logger.debug(f"Updating data type '{name}'")
        self.api.update_data_type(data_type_id, data_type_payload(name, editor, values))
