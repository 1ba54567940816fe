"""Block content graph for block list and rich text properties.

A block value is four collections that reference each other by key:

    layout        {alias: [{contentKey, settingsKey?}]}   display order
    contentData   [{contentTypeKey, key, values}]         one per row
    settingsData  [{contentTypeKey, key, values}]         rows with settings only
    expose        [{contentKey}]                          one per row

add_row() appends to all of them at once, so every layout content key has
exactly one content entry and one expose entry, and every layout settings
key has exactly one settings entry. Keys are fresh UUIDs per row. Rows can
only be appended; there is no removal.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .values import PropertyValue, to_wire


@dataclass
class BlockLayoutItem:
    """Layout entry pointing at a content row and its optional settings row."""
    content_key: uuid.UUID
    settings_key: Optional[uuid.UUID] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"contentKey": str(self.content_key)}
        if self.settings_key is not None:
            data["settingsKey"] = str(self.settings_key)
        return data


@dataclass
class BlockItemData:
    """Content or settings data for one row."""
    content_type_key: uuid.UUID
    key: uuid.UUID
    values: List[PropertyValue] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contentTypeKey": str(self.content_type_key),
            "key": str(self.key),
            "values": [value.to_dict() for value in self.values],
        }


@dataclass
class BlockExposeItem:
    """Marks a content row as exposed (published) for the invariant culture."""
    content_key: uuid.UUID

    def to_dict(self) -> Dict[str, Any]:
        return {"contentKey": str(self.content_key)}


class BlockValue:
    """Base class for block values; subclasses fix the layout alias.

    Example:
        >>> rows = BlockListValue()
        >>> rows.add_row(rich_text_row_id, [PropertyValue("content", RichTextValue("<p>Hi</p>"))],
        ...              rich_text_settings_id, [PropertyValue("hide", False)])
        >>> payload = rows.to_dict()
    """

    alias: str = ""

    def __init__(self):
        if not self.alias:
            raise TypeError(f"{type(self).__name__} has no layout alias; use BlockListValue or RichTextBlockValue")
        self.layout: Dict[str, List[BlockLayoutItem]] = {}
        self.content_data: List[BlockItemData] = []
        self.settings_data: List[BlockItemData] = []
        self.expose: List[BlockExposeItem] = []

    def __len__(self) -> int:
        return len(self.content_data)

    def add_row(
        self,
        content_type_key: uuid.UUID,
        content_values: Iterable[PropertyValue],
        settings_type_key: Optional[uuid.UUID] = None,
        settings_values: Optional[Iterable[PropertyValue]] = None,
    ) -> None:
        """Append one row (and its settings row when both settings arguments are given).

        Args:
            content_type_key: Id of the content element type
            content_values: Property values of the content row
            settings_type_key: Id of the settings element type
            settings_values: Property values of the settings row
        """
        content_key = uuid.uuid4()
        has_settings = settings_type_key is not None and settings_values is not None
        settings_key = uuid.uuid4() if has_settings else None

        self.layout.setdefault(self.alias, []).append(
            BlockLayoutItem(content_key=content_key, settings_key=settings_key)
        )
        self.content_data.append(
            BlockItemData(content_type_key, content_key, list(content_values))
        )
        if settings_key is not None:
            self.settings_data.append(
                BlockItemData(settings_type_key, settings_key, list(settings_values))  # type: ignore[arg-type]
            )
        self.expose.append(BlockExposeItem(content_key=content_key))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "layout": {
                alias: [item.to_dict() for item in items]
                for alias, items in self.layout.items()
            },
            "contentData": to_wire(self.content_data),
            "settingsData": to_wire(self.settings_data),
            "expose": to_wire(self.expose),
        }


class BlockListValue(BlockValue):
    """Value of a block list property."""
    alias = "Umbraco.BlockList"


class RichTextBlockValue(BlockValue):
    """Blocks embedded in a rich text property."""
    alias = "Umbraco.RichText"
