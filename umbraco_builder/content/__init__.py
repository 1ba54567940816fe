"""Structured content values for umbraco-builder.

This package models property values (media, content and URL pickers, rich
text) and the block graph used by block list and rich text properties.
"""

from .values import (
    to_wire,
    PropertyValue,
    MediaPickerValue,
    ContentPickerValue,
    MultiUrlPickerValue,
    RichTextValue,
)
from .block_value import (
    BlockLayoutItem,
    BlockItemData,
    BlockExposeItem,
    BlockValue,
    BlockListValue,
    RichTextBlockValue,
)

__all__ = [
    "to_wire",
    "PropertyValue",
    "MediaPickerValue",
    "ContentPickerValue",
    "MultiUrlPickerValue",
    "RichTextValue",
    "BlockLayoutItem",
    "BlockItemData",
    "BlockExposeItem",
    "BlockValue",
    "BlockListValue",
    "RichTextBlockValue",
]
