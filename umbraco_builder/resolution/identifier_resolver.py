"""Resolve human-readable names to Management API identifiers.

The builders refer to data types, media types, document types, media items
and templates by name. IdentifierResolver fetches the relevant tree listings
once per (category, scope), caches them in NameIndex instances and answers
every later lookup from memory.

Scopes:
    DATA_TYPE, MEDIA_TYPE: no scope (root listing)
    DOCUMENT_TYPE: a folder path, e.g. ("Elements", "Content Models");
        an empty path indexes the root document types
    MEDIA: a single root media folder name, e.g. ("Authors",)
    TEMPLATE: no scope (root templates merged with children of Master)
"""

import logging
import threading
import uuid
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from ..management_client.api_wrapper import ManagementApi
from ..management_client.errors import NotFoundError, ValidationError
from .name_index import NameIndex

logger = logging.getLogger(__name__)

MASTER_TEMPLATE = "Master"
XML_SITEMAP_TEMPLATE = "XMLSitemap"


class ResourceCategory(str, Enum):
    """Resource categories that can be resolved by name."""
    DATA_TYPE = "data type"
    MEDIA_TYPE = "media type"
    DOCUMENT_TYPE = "document type"
    MEDIA = "media"
    TEMPLATE = "template"


def item_name(item: Dict[str, Any]) -> Optional[str]:
    """Return the display name of a tree item.

    Typed trees carry a top-level name; media and document items carry
    their name on the first variant.
    """
    name = item.get("name")
    if name:
        return name
    variants = item.get("variants") or []
    if variants:
        return variants[0].get("name")
    return None


def index_items(items: Iterable[Dict[str, Any]], category: str) -> Dict[str, uuid.UUID]:
    """Build a name -> id mapping, keeping the first item for duplicate names."""
    names: Dict[str, uuid.UUID] = {}
    for item in items:
        name = item_name(item)
        if name is None:
            continue
        if name in names:
            logger.warning(f"Duplicate {category} name '{name}', keeping the first one")
            continue
        names[name] = uuid.UUID(str(item["id"]))
    return names


class IdentifierResolver:
    """Caching name -> id resolver shared by all builders of a run.

    Example:
        >>> resolver = IdentifierResolver(api)
        >>> resolver.data_type_id("Textstring")
        UUID('0cc0eba1-9960-42c9-bf9b-60e150b429ae')
        >>> resolver.document_type_ids("Elements", "Content Models")
        {'Rich Text Row': UUID(...), ...}
    """

    def __init__(self, api: ManagementApi):
        self._api = api
        self._indexes: Dict[Tuple[ResourceCategory, Tuple[str, ...]], NameIndex] = {}
        self._indexes_lock = threading.Lock()
        self._loaders = {
            ResourceCategory.DATA_TYPE: self._load_data_types,
            ResourceCategory.MEDIA_TYPE: self._load_media_types,
            ResourceCategory.DOCUMENT_TYPE: self._load_document_types,
            ResourceCategory.MEDIA: self._load_media,
            ResourceCategory.TEMPLATE: self._load_templates,
        }

    def _index(self, category: ResourceCategory, scope: Sequence[str]) -> NameIndex:
        key = (ResourceCategory(category), tuple(scope))
        with self._indexes_lock:
            index = self._indexes.get(key)
            if index is None:
                loader = self._loaders[key[0]]
                index = NameIndex(key[0].value, key[1], lambda: loader(key[1]))
                self._indexes[key] = index
            return index

    def names(self, category: ResourceCategory, scope: Sequence[str] = ()) -> Dict[str, uuid.UUID]:
        """Return a copy of the full name -> id mapping for a category and scope.

        Raises:
            FetchError: If the listing was empty
            NotFoundError: If a folder in the scope does not exist
            ValidationError: If required root templates are missing
        """
        return dict(self._index(category, scope).get())

    def resolve(self, category: ResourceCategory, name: str, scope: Sequence[str] = ()) -> uuid.UUID:
        """Resolve a single name to its identifier.

        Raises:
            NotFoundError: If the name is not present in the populated index
            FetchError: If the index could not be populated
        """
        names = self._index(category, scope).get()
        try:
            return names[name]
        except KeyError:
            raise NotFoundError(ResourceCategory(category).value, name, scope) from None

    def data_type_id(self, name: str) -> uuid.UUID:
        return self.resolve(ResourceCategory.DATA_TYPE, name)

    def media_type_id(self, name: str) -> uuid.UUID:
        return self.resolve(ResourceCategory.MEDIA_TYPE, name)

    def document_type_ids(self, *folder_path: str) -> Dict[str, uuid.UUID]:
        return self.names(ResourceCategory.DOCUMENT_TYPE, folder_path)

    def document_type_id(self, name: str, *folder_path: str) -> uuid.UUID:
        return self.resolve(ResourceCategory.DOCUMENT_TYPE, name, folder_path)

    def media_ids(self, folder: str) -> Dict[str, uuid.UUID]:
        return self.names(ResourceCategory.MEDIA, (folder,))

    def media_id(self, folder: str, name: str) -> uuid.UUID:
        return self.resolve(ResourceCategory.MEDIA, name, (folder,))

    def template_ids(self) -> Dict[str, uuid.UUID]:
        return self.names(ResourceCategory.TEMPLATE)

    def template_id(self, name: str) -> uuid.UUID:
        return self.resolve(ResourceCategory.TEMPLATE, name)

    def _load_data_types(self, scope: Tuple[str, ...]) -> Dict[str, uuid.UUID]:
        logger.debug("Fetching data types")
        return index_items(self._api.get_tree_root("data-type", folders_only=False), "data type")

    def _load_media_types(self, scope: Tuple[str, ...]) -> Dict[str, uuid.UUID]:
        logger.debug("Fetching media types")
        return index_items(self._api.get_tree_root("media-type", folders_only=False), "media type")

    def _load_document_types(self, folder_path: Tuple[str, ...]) -> Dict[str, uuid.UUID]:
        """Walk the folder path one level at a time, then index its document types."""
        logger.debug(f"Fetching document types in '{'/'.join(folder_path)}'")
        if not folder_path:
            items = self._api.get_tree_root("document-type", folders_only=False)
        else:
            parent_id: Optional[uuid.UUID] = None
            for depth, folder_name in enumerate(folder_path):
                if parent_id is None:
                    folders = self._api.get_tree_root("document-type", folders_only=True)
                else:
                    folders = self._api.get_tree_children("document-type", parent_id, folders_only=True)
                folder = next(
                    (
                        item for item in folders
                        if item.get("name") == folder_name and item.get("isFolder") is True
                    ),
                    None,
                )
                if folder is None:
                    raise NotFoundError(
                        "document type folder", folder_name, folder_path[:depth]
                    )
                parent_id = uuid.UUID(str(folder["id"]))
            items = self._api.get_tree_children("document-type", parent_id, folders_only=False)

        return index_items(
            (item for item in items if not item.get("isFolder", False)),
            "document type",
        )

    def _load_media(self, scope: Tuple[str, ...]) -> Dict[str, uuid.UUID]:
        if len(scope) != 1:
            raise ValueError("Media must be resolved within exactly one root folder")
        folder_name = scope[0]
        logger.debug(f"Fetching media in folder '{folder_name}'")
        roots = self._api.get_tree_root("media")
        folder = next((item for item in roots if item_name(item) == folder_name), None)
        if folder is None:
            raise NotFoundError("media folder", folder_name)
        children = self._api.get_tree_children("media", uuid.UUID(str(folder["id"])))
        return index_items(children, "media")

    def _load_templates(self, scope: Tuple[str, ...]) -> Dict[str, uuid.UUID]:
        logger.debug("Fetching templates")
        root_templates = index_items(self._api.get_tree_root("template"), "template")
        master_id = root_templates.get(MASTER_TEMPLATE)
        sitemap_id = root_templates.get(XML_SITEMAP_TEMPLATE)
        if master_id is None or sitemap_id is None:
            raise ValidationError("Could not find the required templates at root level")

        templates: Dict[str, uuid.UUID] = index_items(
            self._api.get_tree_children("template", master_id), "template"
        )
        templates[MASTER_TEMPLATE] = master_id
        templates[XML_SITEMAP_TEMPLATE] = sitemap_id
        return templates
