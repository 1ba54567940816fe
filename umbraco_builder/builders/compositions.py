"""Compositions: reusable property sets composed into element and document types."""

import logging
from typing import List

from .base import DocumentTypeBuilderBase
from .models import ContainerSpec, DocumentTypeSpec, PropertyTypeSpec
from .names import Compositions, DataTypeNames

logger = logging.getLogger(__name__)

ELEMENT_ICON = "icon-defrag color-blue"
DOCUMENT_ICON = "icon-settings color-red"

SPACING_PROPERTIES = [
    ("Padding Top", "paddingTop"),
    ("Padding Bottom", "paddingBottom"),
    ("Padding Left", "paddingLeft"),
    ("Padding Right", "paddingRight"),
    ("Margin Top", "marginTop"),
    ("Margin Bottom", "marginBottom"),
    ("Margin Left", "marginLeft"),
    ("Margin Right", "marginRight"),
]


def settings_compositions() -> List[DocumentTypeSpec]:
    """Element compositions used by the block settings element types."""
    return [
        DocumentTypeSpec(
            name=Compositions.HIDE_PROPERTY,
            alias="hideProperty",
            icon=ELEMENT_ICON,
            is_element=True,
            containers=[ContainerSpec("Settings", 100)],
            properties=[
                PropertyTypeSpec(
                    "Hide", "hide", DataTypeNames.TOGGLE, "Settings", 10,
                    description="Set this to true if you want to hide this row from the front end of the site",
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.SPACING_PROPERTIES,
            alias="spacingProperties",
            icon=ELEMENT_ICON,
            is_element=True,
            containers=[ContainerSpec("Padding", 120)],
            properties=[
                PropertyTypeSpec(name, alias, DataTypeNames.DROPDOWN_SPACING, "Padding", sort_order)
                for sort_order, (name, alias) in zip(range(5, 45, 5), SPACING_PROPERTIES)
            ],
        ),
    ]


def document_compositions() -> List[DocumentTypeSpec]:
    """Compositions used by the page document types."""
    return [
        DocumentTypeSpec(
            name=Compositions.ARTICLE_CONTROLS,
            alias="articleControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("Content", 10)],
            properties=[
                PropertyTypeSpec(
                    "Article Date", "articleDate", DataTypeNames.DATE_PICKER_WITH_TIME, "Content", 20,
                    description="Enter the date for the article", mandatory=True,
                ),
                PropertyTypeSpec(
                    "Author", "author", DataTypeNames.CONTENT_PICKER_AUTHORS, "Content", 25,
                    mandatory=True,
                ),
                PropertyTypeSpec(
                    "Categories", "categories", DataTypeNames.CONTENT_PICKER_CATEGORIES, "Content", 30,
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.CONTACT_FORM_CONTROLS,
            alias="contactFormControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("Content", 10), ContainerSpec("Result Messages", 20)],
            properties=[
                PropertyTypeSpec(
                    "Instruction Message", "instructionMessage", DataTypeNames.RICH_TEXT_EDITOR, "Content", 20,
                    description="Enter the message to tell the user what to do",
                ),
                PropertyTypeSpec(
                    "Success Message", "successMessage", DataTypeNames.RICH_TEXT_EDITOR, "Result Messages", 5,
                    description="Enter the message to show on success", mandatory=True,
                ),
                PropertyTypeSpec(
                    "Error Message", "errorMessage", DataTypeNames.RICH_TEXT_EDITOR, "Result Messages", 10,
                    description="Enter the message to show on error", mandatory=True,
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.CONTENT_CONTROLS,
            alias="contentControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("Content", 10)],
            properties=[
                PropertyTypeSpec(
                    "Content Rows", "contentRows", DataTypeNames.BLOCK_LIST_MAIN_CONTENT, "Content", 16,
                    description="Add the rows of content for the page",
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.FOOTER_CONTROLS,
            alias="footerControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("Footer", 20)],
            properties=[
                PropertyTypeSpec(
                    "Social Icon Links", "socialIconLinks", DataTypeNames.BLOCK_LIST_ICON_LIST, "Footer", 5,
                    description="Add any social links using the SVG icons",
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.HEADER_CONTROLS,
            alias="headerControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("Content", 10)],
            properties=[
                PropertyTypeSpec(
                    "Title", "title", DataTypeNames.TEXT_STRING, "Content", 5,
                    description="Enter a title for this page if you want it to be different to the page name",
                ),
                PropertyTypeSpec(
                    "Subtitle", "subtitle", DataTypeNames.TEXT_STRING, "Content", 10,
                    description="Enter a subtitle for this page",
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.MAIN_IMAGE_CONTROLS,
            alias="mainImageControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("Content", 10)],
            properties=[
                PropertyTypeSpec(
                    "Main Image", "mainImage", DataTypeNames.MEDIA_PICKER_IMAGE, "Content", 15,
                    description="Choose the main image for this page",
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.SEO_CONTROLS,
            alias="sEOControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("SEO", 25)],
            properties=[
                PropertyTypeSpec(
                    "Meta Name", "metaName", DataTypeNames.TEXT_STRING, "SEO", 5,
                    description="Enter the meta name for this page",
                ),
                PropertyTypeSpec(
                    "Meta Description", "metaDescription", DataTypeNames.TEXT_AREA, "SEO", 10,
                    description="Enter the meta description for this page",
                ),
                PropertyTypeSpec(
                    "Meta Keywords", "metaKeywords", DataTypeNames.TAGS, "SEO", 15,
                    description="Enter the keywords for this page",
                ),
                PropertyTypeSpec(
                    "Is Indexable", "isIndexable", DataTypeNames.TOGGLE_DEFAULT_TRUE, "SEO", 20,
                    description="Set this to true if you want this page to be indexable by robots",
                ),
                PropertyTypeSpec(
                    "Is Followable", "isFollowable", DataTypeNames.TOGGLE_DEFAULT_TRUE, "SEO", 25,
                    description="Set this to true if you want the page to be followable by robots",
                ),
            ],
        ),
        DocumentTypeSpec(
            name=Compositions.VISIBILITY_CONTROLS,
            alias="visibilityControls",
            icon=DOCUMENT_ICON,
            containers=[ContainerSpec("Visibility", 30)],
            properties=[
                PropertyTypeSpec(
                    "Hide From Top Navigation", "hideFromTopNavigation", DataTypeNames.TOGGLE, "Visibility", 5,
                ),
                PropertyTypeSpec(
                    "Hide From Search", "umbracoNaviHide", DataTypeNames.TOGGLE, "Visibility", 10,
                    description="Tick this if you want to hide this page from the search results",
                ),
                PropertyTypeSpec(
                    "Hide From XML Sitemap", "hideFromXMLSitemap", DataTypeNames.TOGGLE, "Visibility", 15,
                    description="Tick this if you want to hide this page from the XML sitemap",
                ),
            ],
        ),
    ]


class CompositionsBuilder(DocumentTypeBuilderBase):
    """Creates Compositions / Content Blocks / Setting Models and the compositions in them."""

    def build(self) -> None:
        logger.info("Starting compositions")

        logger.info("- adding folders")
        compositions_folder_id = self.create_folder("Compositions")
        content_blocks_folder_id = self.create_folder("Content Blocks", compositions_folder_id)
        settings_models_folder_id = self.create_folder("Setting Models", content_blocks_folder_id)

        logger.info("- adding element type settings compositions")
        for spec in settings_compositions():
            self.create_document_type(spec, settings_models_folder_id)

        logger.info("- adding document type compositions")
        for spec in document_compositions():
            self.create_document_type(spec, compositions_folder_id)
