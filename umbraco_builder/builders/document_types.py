"""Page document types, composed from the compositions and bound to templates."""

import logging
import uuid
from typing import Dict, List, Optional, Sequence

from ..management_client.errors import NotFoundError
from .base import DocumentTypeBuilderBase
from .models import DocumentTypeSpec
from .names import COMPOSITIONS_FOLDER, Compositions, DataTypeNames, DocumentTypeNames, TemplateNames

logger = logging.getLogger(__name__)

PAGE_COMPOSITIONS = (
    Compositions.CONTENT_CONTROLS,
    Compositions.HEADER_CONTROLS,
    Compositions.MAIN_IMAGE_CONTROLS,
    Compositions.SEO_CONTROLS,
    Compositions.VISIBILITY_CONTROLS,
)


class DocumentTypesBuilder(DocumentTypeBuilderBase):
    """Creates the Pages folder and every page document type.

    Home is created last: it is the only type allowed at root and it allows
    every other top-level page type as a child.
    """

    def __init__(self, api, resolver):
        super().__init__(api, resolver)
        self._compositions: Dict[str, uuid.UUID] = {}
        self._templates: Dict[str, uuid.UUID] = {}
        self._folder_id: Optional[uuid.UUID] = None

    def build(self) -> None:
        logger.info("Starting document types")

        self._compositions = self.resolver.document_type_ids(*COMPOSITIONS_FOLDER)
        self._templates = self.resolver.template_ids()

        logger.info("- adding folders")
        self._folder_id = self.create_folder("Pages")

        logger.info("- adding document types")
        home_children: List[uuid.UUID] = []

        article_id = self._create(
            DocumentTypeNames.ARTICLE, "article", "icon-document-font", TemplateNames.ARTICLE,
            (Compositions.ARTICLE_CONTROLS,) + PAGE_COMPOSITIONS,
        )
        home_children.append(self._create_list(
            DocumentTypeNames.ARTICLE_LIST, "articleList", "icon-thumbnail-list", article_id, TemplateNames.ARTICLE_LIST,
        ))

        author_id = self._create(
            DocumentTypeNames.AUTHOR, "author", "icon-user", TemplateNames.AUTHOR, PAGE_COMPOSITIONS,
        )
        home_children.append(self._create_list(
            DocumentTypeNames.AUTHOR_LIST, "authorList", "icon-users", author_id, TemplateNames.AUTHOR_LIST,
        ))

        category_id = self._create(DocumentTypeNames.CATEGORY, "category", "icon-tag", None, ())
        home_children.append(self._create_list(
            DocumentTypeNames.CATEGORY_LIST, "categoryList", "icon-tags", category_id, None,
            (Compositions.VISIBILITY_CONTROLS,),
        ))

        home_children.append(self._create(
            DocumentTypeNames.CONTACT, "contact", "icon-mailbox", TemplateNames.CONTACT,
            (Compositions.CONTACT_FORM_CONTROLS,) + PAGE_COMPOSITIONS[1:],
        ))
        home_children.append(self._create(
            DocumentTypeNames.CONTENT, "content", "icon-document", TemplateNames.CONTENT, PAGE_COMPOSITIONS,
        ))
        home_children.append(self._create(
            DocumentTypeNames.ERROR, "error", "icon-application-error", TemplateNames.ERROR, PAGE_COMPOSITIONS,
        ))
        home_children.append(self._create(
            DocumentTypeNames.SEARCH, "search", "icon-search", TemplateNames.SEARCH, PAGE_COMPOSITIONS[1:],
        ))
        home_children.append(self._create(
            DocumentTypeNames.XML_SITEMAP, "xMLSitemap", "icon-map", TemplateNames.XML_SITEMAP,
            (Compositions.VISIBILITY_CONTROLS,),
        ))

        spec = self._spec(
            DocumentTypeNames.HOME, "home", "icon-home", TemplateNames.HOME,
            (
                Compositions.CONTENT_CONTROLS,
                Compositions.FOOTER_CONTROLS,
                Compositions.HEADER_CONTROLS,
                Compositions.MAIN_IMAGE_CONTROLS,
                Compositions.SEO_CONTROLS,
            ),
        )
        spec.allowed_document_types = home_children
        spec.allowed_as_root = True
        self.create_document_type(spec, self._folder_id)

    def _spec(
        self,
        name: str,
        alias: str,
        icon: str,
        template: Optional[str],
        compositions: Sequence[str],
    ) -> DocumentTypeSpec:
        return DocumentTypeSpec(
            name=name,
            alias=alias,
            icon=f"{icon} color-blue",
            compositions=[self._lookup(self._compositions, "composition", composition) for composition in compositions],
            template_id=self._lookup(self._templates, "template", template) if template else None,
        )

    def _create(self, name, alias, icon, template, compositions) -> uuid.UUID:
        return self.create_document_type(self._spec(name, alias, icon, template, compositions), self._folder_id)

    def _create_list(
        self,
        name: str,
        alias: str,
        icon: str,
        child_id: uuid.UUID,
        template: Optional[str],
        compositions: Sequence[str] = PAGE_COMPOSITIONS,
    ) -> uuid.UUID:
        """Create a list page type: one allowed child type, shown in a list view collection."""
        spec = self._spec(name, alias, icon, template, compositions)
        spec.allowed_document_types = [child_id]
        spec.collection_id = self.resolver.data_type_id(DataTypeNames.LIST_VIEW_CONTENT)
        return self.create_document_type(spec, self._folder_id)

    @staticmethod
    def _lookup(names, category: str, name: str) -> uuid.UUID:
        try:
            return names[name]
        except KeyError:
            raise NotFoundError(category, name) from None
