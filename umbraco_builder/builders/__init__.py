"""Provisioning builders for the sample Umbraco site."""

from .base import BuilderBase, DocumentTypeBuilderBase
from .dictionary_items import DictionaryItemsBuilder
from .templates import TemplatesBuilder
from .media import MediaBuilder
from .data_types import DataTypesBuilder
from .compositions import CompositionsBuilder
from .element_types import ElementTypesBuilder
from .document_types import DocumentTypesBuilder
from .documents import DocumentsBuilder
from .models import ContainerSpec, PropertyTypeSpec, DocumentTypeSpec, DocumentRequest

__all__ = [
    "BuilderBase",
    "DocumentTypeBuilderBase",
    "DictionaryItemsBuilder",
    "TemplatesBuilder",
    "MediaBuilder",
    "DataTypesBuilder",
    "CompositionsBuilder",
    "ElementTypesBuilder",
    "DocumentTypesBuilder",
    "DocumentsBuilder",
    "ContainerSpec",
    "PropertyTypeSpec",
    "DocumentTypeSpec",
    "DocumentRequest",
]
