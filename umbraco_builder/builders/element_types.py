"""Element types for the block list rows and their settings."""

import logging
from typing import List

from .base import DocumentTypeBuilderBase
from .models import ContainerSpec, DocumentTypeSpec, PropertyTypeSpec
from .names import SETTINGS_COMPOSITIONS_FOLDER, Compositions, ContentElements, DataTypeNames, settings_element

logger = logging.getLogger(__name__)

SETTINGS_ICON = "icon-settings color-light-blue"


def _content_element(name: str, alias: str, icon: str, *properties: PropertyTypeSpec) -> DocumentTypeSpec:
    return DocumentTypeSpec(
        name=name,
        alias=alias,
        icon=f"{icon} color-blue",
        is_element=True,
        containers=[ContainerSpec("Content", 0)],
        properties=list(properties),
    )


def content_elements() -> List[DocumentTypeSpec]:
    return [
        _content_element(
            ContentElements.CODE_SNIPPET_ROW, "codeSnippetRow", "icon-code",
            PropertyTypeSpec("Title", "title", DataTypeNames.TEXT_STRING, "Content", 1,
                             description="Enter a name for this code snippet"),
            PropertyTypeSpec("Code", "code", DataTypeNames.TEXT_AREA, "Content", 1),
        ),
        _content_element(
            ContentElements.ICON_LINK_ROW, "iconLinkRow", "icon-link",
            PropertyTypeSpec("Icon", "icon", DataTypeNames.MEDIA_PICKER_SVG, "Content", 10,
                             description="Choose the icon for this item. It must be an SVG",
                             mandatory=True, mandatory_message="You must choose an icon"),
            PropertyTypeSpec("Link", "link", DataTypeNames.URL_PICKER_SINGLE, "Content", 20,
                             description="Enter your link for this item",
                             mandatory=True, mandatory_message="You must add a link"),
        ),
        _content_element(
            ContentElements.IMAGE_CAROUSEL_ROW, "imageCarouselRow", "icon-files",
            PropertyTypeSpec("Images", "images", DataTypeNames.MEDIA_PICKER_MULTIPLE_IMAGE, "Content", 1,
                             description="Choose the images for the carousel row"),
        ),
        _content_element(
            ContentElements.IMAGE_ROW, "imageRow", "icon-picture",
            PropertyTypeSpec("Image", "image", DataTypeNames.MEDIA_PICKER_IMAGE, "Content", 10,
                             description="Add the image for this row"),
            PropertyTypeSpec("Caption", "caption", DataTypeNames.TEXT_STRING, "Content", 20,
                             description="Enter a caption for the image"),
        ),
        _content_element(
            ContentElements.LATEST_ARTICLES_ROW, "latestArticlesRow", "icon-bulleted-list",
            PropertyTypeSpec("Article List", "articleList", DataTypeNames.DOCUMENT_PICKER, "Content", 5,
                             description="Choose the parent page where you want to display articles from",
                             mandatory=True, mandatory_message="You need to choose an article list page"),
            PropertyTypeSpec("Page Size", "pageSize", DataTypeNames.NUMERIC, "Content", 10,
                             description="Choose the amount of articles to display per page",
                             mandatory=True, mandatory_message="You need to enter the page size"),
            PropertyTypeSpec("Show Pagination", "showPagination", DataTypeNames.TOGGLE, "Content", 15,
                             description="Set this to true if you would like to show the pagination for these articles"),
        ),
        _content_element(
            ContentElements.RICH_TEXT_ROW, "richTextRow", "icon-notepad",
            PropertyTypeSpec("Content", "content", DataTypeNames.RICH_TEXT_EDITOR, "Content", 10,
                             description="Enter the content for this rich text item"),
        ),
        _content_element(
            ContentElements.VIDEO_ROW, "videoRow", "icon-video",
            PropertyTypeSpec("Video Url", "videoUrl", DataTypeNames.TEXT_STRING, "Content", 10,
                             description="Add the YouTube Url in here"),
            PropertyTypeSpec("Caption", "caption", DataTypeNames.TEXT_STRING, "Content", 20,
                             description="Add a caption to display under the video if you would like"),
        ),
    ]


# (content element, settings element alias, settings compositions)
# Icon links can be hidden but have no spacing.
SETTINGS_ELEMENTS = [
    (ContentElements.CODE_SNIPPET_ROW, "codeSnippetRowSettings", (Compositions.HIDE_PROPERTY, Compositions.SPACING_PROPERTIES)),
    (ContentElements.ICON_LINK_ROW, "iconLinkRowSettings", (Compositions.HIDE_PROPERTY,)),
    (ContentElements.IMAGE_CAROUSEL_ROW, "imageCarouselRowSettings", (Compositions.HIDE_PROPERTY, Compositions.SPACING_PROPERTIES)),
    (ContentElements.IMAGE_ROW, "imageRowSettings", (Compositions.HIDE_PROPERTY, Compositions.SPACING_PROPERTIES)),
    (ContentElements.LATEST_ARTICLES_ROW, "latestArticlesRowSettings", (Compositions.HIDE_PROPERTY, Compositions.SPACING_PROPERTIES)),
    (ContentElements.RICH_TEXT_ROW, "richTextRowSettings", (Compositions.HIDE_PROPERTY, Compositions.SPACING_PROPERTIES)),
    (ContentElements.VIDEO_ROW, "videoRowSettings", (Compositions.HIDE_PROPERTY, Compositions.SPACING_PROPERTIES)),
]


class ElementTypesBuilder(DocumentTypeBuilderBase):
    """Creates Elements / Content Models and Elements / Setting Models."""

    def build(self) -> None:
        logger.info("Starting element types")

        logger.info("- adding folders")
        elements_folder_id = self.create_folder("Elements")
        content_models_folder_id = self.create_folder("Content Models", elements_folder_id)
        settings_models_folder_id = self.create_folder("Setting Models", elements_folder_id)

        logger.info("- adding content element types")
        for spec in content_elements():
            self.create_document_type(spec, content_models_folder_id)

        logger.info("- adding settings element types")
        for content_element, alias, compositions in SETTINGS_ELEMENTS:
            spec = DocumentTypeSpec(
                name=settings_element(content_element),
                alias=alias,
                icon=SETTINGS_ICON,
                is_element=True,
                compositions=[
                    self.resolver.document_type_id(name, *SETTINGS_COMPOSITIONS_FOLDER)
                    for name in compositions
                ],
            )
            self.create_document_type(spec, settings_models_folder_id)
