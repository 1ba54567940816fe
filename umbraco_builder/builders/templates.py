"""Templates, created from the Razor views on disk."""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from ..management_client.errors import AssetNotFoundError
from .base import BuilderBase
from .names import TemplateNames

logger = logging.getLogger(__name__)

# (name, alias); each alias maps to {views_dir}/{alias}.cshtml
TEMPLATES: List[Tuple[str, str]] = [
    (TemplateNames.MASTER, "master"),
    (TemplateNames.ARTICLE, "article"),
    (TemplateNames.ARTICLE_LIST, "articleList"),
    (TemplateNames.AUTHOR, "author"),
    (TemplateNames.AUTHOR_LIST, "authorList"),
    (TemplateNames.CONTACT, "contact"),
    (TemplateNames.CONTENT, "content"),
    (TemplateNames.ERROR, "error"),
    (TemplateNames.HOME, "home"),
    (TemplateNames.SEARCH, "search"),
    (TemplateNames.XML_SITEMAP, "xMLSitemap"),
]


class TemplatesBuilder(BuilderBase):
    """Creates one template per view file.

    The Management API derives the template hierarchy (master layout) from
    the view contents, so no parent is sent.
    """

    def __init__(self, api, resolver, views_dir: Union[str, Path] = "Views"):
        super().__init__(api, resolver)
        self.views_dir = Path(views_dir)

    def build(self) -> None:
        logger.info("Starting templates")
        for name, alias in TEMPLATES:
            self.create_template(name, alias)

    def create_template(self, name: str, alias: str) -> None:
        """Create a template from {views_dir}/{alias}.cshtml.

        Raises:
            AssetNotFoundError: If the view file does not exist
        """
        view_path = self.views_dir / f"{alias}.cshtml"
        if not view_path.is_file():
            raise AssetNotFoundError(str(view_path))

        content = view_path.read_text(encoding="utf-8")
        logger.debug(f"Creating template '{name}' from {view_path}")
        self.api.create_template({"name": name, "alias": alias, "content": content})
