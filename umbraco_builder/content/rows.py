"""Helpers that append the site's standard content rows to a block list.

Each helper takes the resolved content and settings element type ids and adds
one row whose settings carry hide=False.
"""

import uuid
from typing import Iterable

from .block_value import BlockListValue
from .values import (
    ContentPickerValue,
    MediaPickerValue,
    MultiUrlPickerValue,
    PropertyValue,
    RichTextValue,
)


def _visible():
    return [PropertyValue("hide", False)]


def add_rich_text_row(rows: BlockListValue, markup: str, content_type_id: uuid.UUID, settings_type_id: uuid.UUID) -> None:
    rows.add_row(
        content_type_id,
        [PropertyValue("content", RichTextValue(markup))],
        settings_type_id,
        _visible(),
    )


def add_image_row(
    rows: BlockListValue,
    image_id: uuid.UUID,
    caption: str,
    content_type_id: uuid.UUID,
    settings_type_id: uuid.UUID,
) -> None:
    rows.add_row(
        content_type_id,
        [
            PropertyValue("image", [MediaPickerValue(media_key=image_id)]),
            PropertyValue("caption", caption),
        ],
        settings_type_id,
        _visible(),
    )


def add_video_row(
    rows: BlockListValue,
    video_url: str,
    caption: str,
    content_type_id: uuid.UUID,
    settings_type_id: uuid.UUID,
) -> None:
    rows.add_row(
        content_type_id,
        [PropertyValue("videoUrl", video_url), PropertyValue("caption", caption)],
        settings_type_id,
        _visible(),
    )


def add_code_snippet_row(
    rows: BlockListValue,
    title: str,
    code: str,
    content_type_id: uuid.UUID,
    settings_type_id: uuid.UUID,
) -> None:
    rows.add_row(
        content_type_id,
        [PropertyValue("title", title), PropertyValue("code", code)],
        settings_type_id,
        _visible(),
    )


def add_image_carousel_row(
    rows: BlockListValue,
    image_ids: Iterable[uuid.UUID],
    content_type_id: uuid.UUID,
    settings_type_id: uuid.UUID,
) -> None:
    rows.add_row(
        content_type_id,
        [PropertyValue("images", [MediaPickerValue(media_key=image_id) for image_id in image_ids])],
        settings_type_id,
        _visible(),
    )


def add_latest_articles_row(
    rows: BlockListValue,
    article_list_id: uuid.UUID,
    page_size: int,
    show_pagination: bool,
    content_type_id: uuid.UUID,
    settings_type_id: uuid.UUID,
) -> None:
    rows.add_row(
        content_type_id,
        [
            PropertyValue("articleList", article_list_id),
            PropertyValue("pageSize", page_size),
            PropertyValue("showPagination", show_pagination),
        ],
        settings_type_id,
        _visible(),
    )


def add_icon_link_row(
    rows: BlockListValue,
    icon_id: uuid.UUID,
    url: str,
    name: str,
    content_type_id: uuid.UUID,
    settings_type_id: uuid.UUID,
    target: str = "_blank",
) -> None:
    """Append a social icon link (icon media plus one external URL)."""
    rows.add_row(
        content_type_id,
        [
            PropertyValue("icon", [MediaPickerValue(media_key=icon_id)]),
            PropertyValue("link", [MultiUrlPickerValue(url=url, name=name, target=target)]),
        ],
        settings_type_id,
        _visible(),
    )


def content_picks(document_ids: Iterable[uuid.UUID]):
    """Build a content picker value list from document ids."""
    return [ContentPickerValue(unique=document_id) for document_id in document_ids]
