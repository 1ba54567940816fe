"""Name-to-identifier resolution for umbraco-builder."""

from .name_index import NameIndex
from .identifier_resolver import IdentifierResolver, ResourceCategory, item_name, index_items

__all__ = [
    "NameIndex",
    "IdentifierResolver",
    "ResourceCategory",
    "item_name",
    "index_items",
]
