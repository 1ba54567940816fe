"""Base classes shared by the provisioning builders."""

import logging
import uuid
from typing import Optional

from ..management_client.api_wrapper import ManagementApi
from ..resolution.identifier_resolver import IdentifierResolver
from .models import DocumentTypeSpec

logger = logging.getLogger(__name__)


class BuilderBase:
    """A provisioning step.

    Builders share one ManagementApi (and therefore one token cache) and one
    IdentifierResolver, so lookups made by an earlier builder are reused by
    later ones.
    """

    def __init__(self, api: ManagementApi, resolver: IdentifierResolver):
        self.api = api
        self.resolver = resolver

    def build(self) -> None:
        raise NotImplementedError


class DocumentTypeBuilderBase(BuilderBase):
    """Builder that creates document type folders and document types."""

    def create_folder(self, name: str, parent_id: Optional[uuid.UUID] = None) -> uuid.UUID:
        logger.debug(f"Creating document type folder '{name}'")
        return self.api.create_document_type_folder(name, parent_id)

    def create_document_type(self, spec: DocumentTypeSpec, parent_id: Optional[uuid.UUID]) -> uuid.UUID:
        """Create a document type from its spec, resolving data types by name.

        Raises:
            NotFoundError: If a referenced data type does not exist
        """
        logger.debug(f"Creating document type '{spec.name}'")
        payload = spec.to_payload(parent_id, self.resolver.data_type_id)
        return self.api.create_document_type(payload)
