"""Property value models for document and block content.

Every model here serializes to the JSON shape the Management API expects
for the matching property editor. Use to_wire() on any nested structure of
these models, UUIDs, datetimes, lists and dicts to get JSON-ready data.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional


def to_wire(value: Any) -> Any:
    """Convert a value (and anything nested in it) to JSON-ready data.

    Models with a to_dict() method are serialized through it, UUIDs become
    strings and datetimes become ISO 8601 strings.

    Example:
        >>> to_wire([MediaPickerValue(media_key=image_id)])
        [{'key': '...', 'mediaKey': '...'}]
    """
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    return value


@dataclass
class PropertyValue:
    """An alias/value pair, used for document values and block item values.

    Attributes:
        alias: Property type alias (e.g., "title")
        value: Raw value or value model
        culture: Culture for variant properties (None for invariant)
    """
    alias: str
    value: Any
    culture: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"alias": self.alias, "value": to_wire(self.value)}
        if self.culture is not None:
            data["culture"] = self.culture
        return data


@dataclass
class MediaPickerValue:
    """One picked media item. The entry key is generated per instance."""
    media_key: uuid.UUID
    key: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, Any]:
        return {"key": str(self.key), "mediaKey": str(self.media_key)}


@dataclass
class ContentPickerValue:
    """One picked document in a multi node tree picker."""
    unique: uuid.UUID
    type: str = "document"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "unique": str(self.unique)}


@dataclass
class MultiUrlPickerValue:
    """One external link in a multi URL picker."""
    url: str
    name: str
    target: Optional[str] = None
    type: str = "external"

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "target": self.target, "name": self.name, "type": self.type}


@dataclass
class RichTextValue:
    """Rich text markup with an (empty) rich text block value."""
    markup: str

    def to_dict(self) -> Dict[str, Any]:
        # Deferred import: block_value imports this module for to_wire
        from .block_value import RichTextBlockValue
        return {"markup": self.markup, "blocks": RichTextBlockValue().to_dict()}
