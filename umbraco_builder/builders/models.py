"""Data models for builder requests.

The builders describe what to create with these dataclasses and turn them
into Management API payloads with to_payload(). Names (data types,
containers) are kept symbolic here and resolved to ids by the builder.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..content.values import PropertyValue, to_wire


@dataclass
class ContainerSpec:
    """A tab or group on a document type.

    Attributes:
        name: Container name shown in the back office (e.g., "Content")
        sort_order: Position among the document type's containers
        type: "Tab" or "Group"
        id: Client-side id, generated per instance
    """
    name: str
    sort_order: int = 0
    type: str = "Tab"
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "parent": None,
            "name": self.name,
            "type": self.type,
            "sortOrder": self.sort_order,
        }


@dataclass
class PropertyTypeSpec:
    """A property on a document type, referring to its data type by name.

    Attributes:
        name: Display name (e.g., "Main Image")
        alias: Property alias (e.g., "mainImage")
        data_type: Name of the data type, resolved at creation time
        container: Name of the container the property lives in
        sort_order: Position inside the container
        description: Editor help text
        mandatory: Whether a value is required
        mandatory_message: Validation message shown when the value is missing
    """
    name: str
    alias: str
    data_type: str
    container: str
    sort_order: int = 0
    description: Optional[str] = None
    mandatory: bool = False
    mandatory_message: Optional[str] = None

    def to_payload(self, data_type_id: uuid.UUID, container_id: uuid.UUID) -> Dict[str, Any]:
        return {
            "id": str(uuid.uuid4()),
            "container": {"id": str(container_id)},
            "sortOrder": self.sort_order,
            "alias": self.alias,
            "name": self.name,
            "description": self.description,
            "dataType": {"id": str(data_type_id)},
            "variesByCulture": False,
            "variesBySegment": False,
            "validation": {
                "mandatory": self.mandatory,
                "mandatoryMessage": self.mandatory_message,
                "regEx": None,
                "regExMessage": None,
            },
            "appearance": {"labelOnTop": False},
        }


@dataclass
class DocumentTypeSpec:
    """Everything needed to create one document type, element type or composition.

    Attributes:
        name: Document type name
        alias: Document type alias
        icon: Back office icon, including its colour class
        is_element: True for element types and element compositions
        containers: Tabs and groups
        properties: Property types, each pointing at a container by name
        compositions: Ids of composed document types
        template_id: Allowed and default template
        allowed_document_types: Ids of allowed child document types, in order
        allowed_as_root: Whether documents of this type may be created at root
        collection_id: Data type id of the collection (list view) configuration
    """
    name: str
    alias: str
    icon: str
    is_element: bool = False
    containers: List[ContainerSpec] = field(default_factory=list)
    properties: List[PropertyTypeSpec] = field(default_factory=list)
    compositions: List[uuid.UUID] = field(default_factory=list)
    template_id: Optional[uuid.UUID] = None
    allowed_document_types: List[uuid.UUID] = field(default_factory=list)
    allowed_as_root: bool = False
    collection_id: Optional[uuid.UUID] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def container_id(self, name: str) -> uuid.UUID:
        for container in self.containers:
            if container.name == name:
                return container.id
        raise ValueError(f"Document type '{self.name}' has no container named '{name}'")

    def to_payload(
        self,
        parent_id: Optional[uuid.UUID],
        data_type_id: Callable[[str], uuid.UUID],
    ) -> Dict[str, Any]:
        """Build the create request body.

        Args:
            parent_id: Folder to create the document type in (None for root)
            data_type_id: Callable resolving a data type name to its id
        """
        payload: Dict[str, Any] = {
            "id": str(self.id),
            "name": self.name,
            "alias": self.alias,
            "description": None,
            "icon": self.icon,
            "allowedAsRoot": self.allowed_as_root,
            "variesByCulture": False,
            "variesBySegment": False,
            "isElement": self.is_element,
            "parent": {"id": str(parent_id)} if parent_id else None,
            "containers": [container.to_payload() for container in self.containers],
            "properties": [
                prop.to_payload(data_type_id(prop.data_type), self.container_id(prop.container))
                for prop in self.properties
            ],
            "compositions": [
                {"documentType": {"id": str(composition_id)}, "compositionType": "Composition"}
                for composition_id in self.compositions
            ],
            "allowedDocumentTypes": [
                {"documentType": {"id": str(child_id)}, "sortOrder": sort_order}
                for sort_order, child_id in enumerate(self.allowed_document_types, start=1)
            ],
            "allowedTemplates": [],
            "defaultTemplate": None,
            "collection": None,
            "cleanup": {"preventCleanup": False},
        }
        if self.template_id is not None:
            payload["allowedTemplates"] = [{"id": str(self.template_id)}]
            payload["defaultTemplate"] = {"id": str(self.template_id)}
        if self.collection_id is not None:
            payload["collection"] = {"id": str(self.collection_id)}
        return payload


@dataclass
class DocumentRequest:
    """A document to create or update.

    Replaces the family of create/update overloads with one request object:
    only name and document_type are required, everything else is optional.

    Attributes:
        name: Invariant variant name
        document_type: Document type name, resolved within the pages folder
        template: Template name (None for no template)
        parent_id: Parent document id (None for root)
        values: Property values
        id: Client-side id, generated per instance

    Example:
        >>> DocumentRequest("Contact", DocumentTypeNames.CONTACT, template=TemplateNames.CONTACT,
        ...                 parent_id=home_id, values=[PropertyValue("title", "Contact Us")])
    """
    name: str
    document_type: str
    template: Optional[str] = None
    parent_id: Optional[uuid.UUID] = None
    values: List[PropertyValue] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def variants(self) -> List[Dict[str, Any]]:
        return [{"culture": None, "segment": None, "name": self.name}]

    def create_payload(self, document_type_id: uuid.UUID, template_id: Optional[uuid.UUID]) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "parent": {"id": str(self.parent_id)} if self.parent_id else None,
            "documentType": {"id": str(document_type_id)},
            "template": {"id": str(template_id)} if template_id else None,
            "variants": self.variants(),
            "values": to_wire(self.values),
        }

    def update_payload(self, template_id: Optional[uuid.UUID]) -> Dict[str, Any]:
        return {
            "template": {"id": str(template_id)} if template_id else None,
            "variants": self.variants(),
            "values": to_wire(self.values),
        }
