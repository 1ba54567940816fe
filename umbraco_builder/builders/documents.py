"""Documents: the sample site content tree.

Documents are created in two passes. The first pass creates the whole tree,
so every document has an id. The second pass updates the documents whose
values point at other documents (latest articles rows, authors, categories).
Finally Home is published together with all of its descendants.
"""

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from functools import partial
from typing import Dict, Iterable, List, Optional, Sequence

from ..content import rows
from ..content.block_value import BlockListValue
from ..content.values import MediaPickerValue, PropertyValue, RichTextValue
from ..management_client.errors import NotFoundError
from .base import BuilderBase
from .models import DocumentRequest
from .names import (
    AUTHORS_FOLDER,
    CONTENT_ELEMENTS_FOLDER,
    PAGES_FOLDER,
    SAMPLE_IMAGES_FOLDER,
    SETTINGS_ELEMENTS_FOLDER,
    SOCIAL_ICONS_FOLDER,
    ContentElements,
    DocumentTypeNames,
    TemplateNames,
    settings_element,
)

logger = logging.getLogger(__name__)

MAX_WORKERS = 4

HOME = "Home"
BLOG = "Blog"
AUTHOR = "Paul Seal"

CATEGORIES = ["Community", "Conferences", "Meetups", "Podcasts", "Resources", "Umbraco", "Videos"]

SOCIAL_LINKS = [
    ("Github Alt", "https://github.com/prjseal", "View this package repository on GitHub"),
    ("Umbraco", "https://marketplace.umbraco.com/package/clean", "View this in the Umbraco Marketplace"),
    ("Twitter", "https://twitter.com/codesharepaul", "Follow me on twitter"),
    ("Share Nodes", "https://codeshare.co.uk", "Read my blog codeshare.co.uk"),
    ("Discord", "https://discord.gg/umbraco", "Join the Umbraco discord server"),
    ("Paypal", "https://codeshare.co.uk/coffee", "You can buy me a coffee on PayPal if you would like to"),
    ("Mastodon", "https://umbracocommunity.social/@CodeSharePaul", "Follow me on Mastodon"),
]

# Blog articles: name -> (subtitle, main image, article date, categories, rows)
# Rows are ("text", markup), ("image", sample image, caption) or ("video", url, caption).
ARTICLES = {
    "Community": (
        "The friendly CMS",
        "First timers at codegarden",
        datetime(2023, 7, 28, 12, 0, 0),
        ["Community"],
        [
            ("text", "<p>There is a large community around umbraco, it is one of the main attractions "
                     "when choosing it as your Content Management System of choice.</p>"),
            ("image", "First timers at codegarden", "Umbraco community enjoying another great talk"),
            ("text", "<h2><a rel=\"noopener\" href=\"https://our.umbraco.com\" target=\"_blank\">Our Umbraco Forum</a></h2>\n"
                     "<p>Our is the official Umbraco forum. If you have a problem, you should search there first.</p>\n"
                     "<h2><a rel=\"noopener\" href=\"https://discord.gg/umbraco\" target=\"_blank\">Discord Server</a></h2>\n"
                     "<p>There is a growing community of people on the Discord Server now.</p>"),
        ],
    ),
    "Meetups": (
        "What's happening near you?",
        "Front row audience smiles",
        datetime(2023, 7, 30, 12, 0, 0),
        ["Meetups"],
        [
            ("text", "<p>Until I had gone to my first meetup, I didn't realise how comforting and safe it would "
                     "feel to be around like minded people.</p>"),
            ("image", "Community front row", "We love to hear great talks at meetups"),
            ("text", "<p>Here are some popular Umbraco meetups, some of them are virtual meetups.</p>"),
        ],
    ),
    "Conferences": (
        "Around the world",
        "Say cheese",
        datetime(2023, 7, 30, 12, 0, 0),
        ["Conferences"],
        [
            ("text", "<p>There are many Umbraco conferences held around the world.</p>\n"
                     "<p>The main one is codegarden which is held in Odense, Denmark.</p>"),
            ("image", "Codegarden keynote", "750 people attended Codegarden 2019"),
            ("video", "https://www.youtube.com/watch?v=CQJIl2xoDhc", "Codegarden 2022 | Official Aftermovie"),
        ],
    ),
    "YouTube Tutorials": (
        "For learning Umbraco",
        "Tutorials",
        datetime(2023, 8, 4, 6, 0, 0),
        ["Videos"],
        [
            ("text", "<p>There are lots of free videos on YouTube for you to be able to learn more about Umbraco.</p>"),
            ("video", "https://www.youtube.com/watch?v=Yu29dE-0OoI", "Getting Started with Umbraco"),
        ],
    ),
}

FEATURES_CODE_SNIPPET = (
    "@inherits UmbracoViewPage<BlockListItem>\n"
    "@using Umbraco.Cms.Core.Models.Blocks\n"
    "\n"
    "<div class=\"row clearfix\">\n"
    "    <div class=\"col-md-12 column\">\n"
    "        <pre><code>@row.Code</code></pre>\n"
    "    </div>\n"
    "</div>"
)

CAROUSEL_IMAGES = [
    "Chairs lamps",
    "Bluetooth white keyboard",
    "Phone pen binder",
    "Triangle table chairs",
    "Community front row",
    "Skrift at codegarden",
]


class DocumentsBuilder(BuilderBase):
    """Creates, links and publishes the sample content."""

    def __init__(self, api, resolver):
        super().__init__(api, resolver)
        self._documents: Dict[str, uuid.UUID] = {}

    def build(self) -> None:
        logger.info("Starting documents")

        logger.info("- fetching required items")
        self.prefetch()

        logger.info("- creating documents (first pass)")
        self.create_documents()

        logger.info("- updating documents (second pass)")
        self.update_documents()

        logger.info("- publishing documents")
        self.api.publish_document_with_descendants(self.document_id(HOME))

    def prefetch(self) -> None:
        """Warm the resolver with every lookup this builder needs, in parallel."""
        lookups = [
            partial(self.resolver.media_ids, SOCIAL_ICONS_FOLDER),
            partial(self.resolver.media_ids, SAMPLE_IMAGES_FOLDER),
            partial(self.resolver.media_ids, AUTHORS_FOLDER),
            partial(self.resolver.document_type_ids, *CONTENT_ELEMENTS_FOLDER),
            partial(self.resolver.document_type_ids, *SETTINGS_ELEMENTS_FOLDER),
            partial(self.resolver.document_type_ids, *PAGES_FOLDER),
            self.resolver.template_ids,
        ]
        with ThreadPoolExecutor(max_workers=MAX_WORKERS) as executor:
            futures = [executor.submit(lookup) for lookup in lookups]
            for future in as_completed(futures):
                # Re-raises the first lookup failure
                future.result()

    # Lookups

    def document_id(self, key: str) -> uuid.UUID:
        try:
            return self._documents[key]
        except KeyError:
            raise NotFoundError("document", key) from None

    def sample_image(self, name: str) -> uuid.UUID:
        return self.resolver.media_id(SAMPLE_IMAGES_FOLDER, name)

    def _element_types(self, content_element: str):
        return (
            self.resolver.document_type_id(content_element, *CONTENT_ELEMENTS_FOLDER),
            self.resolver.document_type_id(settings_element(content_element), *SETTINGS_ELEMENTS_FOLDER),
        )

    # Requests

    def create(self, request: DocumentRequest) -> uuid.UUID:
        """Create a document from a request and return its id."""
        document_type_id = self.resolver.document_type_id(request.document_type, *PAGES_FOLDER)
        template_id = self.resolver.template_id(request.template) if request.template else None
        logger.debug(f"Creating document '{request.name}' ({request.document_type})")
        return self.api.create_document(request.create_payload(document_type_id, template_id))

    def update(self, request: DocumentRequest) -> None:
        """Replace the name, template and values of the document with request.id."""
        template_id = self.resolver.template_id(request.template) if request.template else None
        logger.debug(f"Updating document '{request.name}'")
        self.api.update_document(request.id, request.update_payload(template_id))

    def create_blank(self, document_type: str, parent_id: Optional[uuid.UUID]) -> uuid.UUID:
        """Create a placeholder document; its real name and values are set in the second pass."""
        return self.create(DocumentRequest(uuid.uuid4().hex, document_type, parent_id=parent_id))

    # Values

    def content_rows(self, row_specs: Iterable[Sequence]) -> BlockListValue:
        """Build a content rows block list from ("text" | "image" | "video", ...) tuples."""
        value = BlockListValue()
        for row in row_specs:
            kind = row[0]
            if kind == "text":
                rows.add_rich_text_row(value, row[1], *self._element_types(ContentElements.RICH_TEXT_ROW))
            elif kind == "image":
                rows.add_image_row(value, self.sample_image(row[1]), row[2],
                                   *self._element_types(ContentElements.IMAGE_ROW))
            elif kind == "video":
                rows.add_video_row(value, row[1], row[2], *self._element_types(ContentElements.VIDEO_ROW))
            else:
                raise ValueError(f"Unknown content row kind: '{kind}'")
        return value

    def latest_articles(self, page_size: int, show_pagination: bool) -> BlockListValue:
        value = BlockListValue()
        rows.add_latest_articles_row(
            value, self.document_id(BLOG), page_size, show_pagination,
            *self._element_types(ContentElements.LATEST_ARTICLES_ROW),
        )
        return value

    def page_values(
        self,
        content_rows: Optional[BlockListValue] = None,
        title: Optional[str] = None,
        subtitle: Optional[str] = None,
        main_image: Optional[uuid.UUID] = None,
        meta_description: Optional[str] = None,
        indexable: bool = True,
    ) -> List[PropertyValue]:
        values = []
        if content_rows is not None:
            values.append(PropertyValue("contentRows", content_rows))
        values.append(PropertyValue("title", title))
        values.append(PropertyValue("subtitle", subtitle))
        if main_image is not None:
            values.append(PropertyValue("mainImage", [MediaPickerValue(media_key=main_image)]))
        values.append(PropertyValue("isIndexable", indexable))
        values.append(PropertyValue("isFollowable", indexable))
        if meta_description is not None:
            values.append(PropertyValue("metaDescription", meta_description))
        return values

    @staticmethod
    def hidden_values() -> List[PropertyValue]:
        return [
            PropertyValue("hideFromTopNavigation", True),
            PropertyValue("umbracoNaviHide", True),
            PropertyValue("hideFromXMLSitemap", True),
        ]

    # First pass

    def create_documents(self) -> None:
        home_id = self.create_blank(DocumentTypeNames.HOME, None)
        self._documents[HOME] = home_id
        self.create_features(home_id)
        self.create_about(home_id)

        blog_id = self.create_blank(DocumentTypeNames.ARTICLE_LIST, home_id)
        self._documents[BLOG] = blog_id
        for name in ARTICLES:
            self._documents[f"Blog:{name}"] = self.create_blank(DocumentTypeNames.ARTICLE, blog_id)

        self.create_contact(home_id)
        self.create_error(home_id)
        self.create(DocumentRequest(
            "XMLSitemap", DocumentTypeNames.XML_SITEMAP, TemplateNames.XML_SITEMAP, home_id,
            values=self.hidden_values(),
        ))
        self.create(DocumentRequest(
            "Search", DocumentTypeNames.SEARCH, TemplateNames.SEARCH, home_id,
            values=[
                PropertyValue("mainImage", [MediaPickerValue(media_key=self.sample_image("Phone pen binder"))]),
                PropertyValue("isIndexable", False),
                PropertyValue("isFollowable", False),
            ],
        ))

        authors_id = self.create(DocumentRequest("Authors", DocumentTypeNames.AUTHOR_LIST, TemplateNames.AUTHOR_LIST, home_id))
        self._documents[f"Authors:{AUTHOR}"] = self.create_author(authors_id)

        categories_id = self.create(DocumentRequest(
            "Categories", DocumentTypeNames.CATEGORY_LIST, parent_id=home_id,
            values=self.hidden_values(),
        ))
        for category in CATEGORIES:
            self._documents[f"Categories:{category}"] = self.create(
                DocumentRequest(category, DocumentTypeNames.CATEGORY, parent_id=categories_id)
            )

    def create_features(self, home_id: uuid.UUID) -> uuid.UUID:
        content = self.content_rows([
            ("text", "<h2>Rich Text Row</h2>\n<p>There is a simple rich text row for writing your usual "
                     "formatted content in a WYSIWIG style.</p>"),
            ("text", "<h2>Image Row</h2>\n<p>You can use the image row to render a full width image.</p>"),
            ("image", "Phone pen binder", "Image Row Example"),
            ("text", "<h2>Video Row</h2>\n<p>This lets you embed a YouTube video by just entering the normal "
                     "URL of the video.</p>"),
            ("video", "https://www.youtube.com/watch?v=Dn2tI1--LOs",
             "What's next in C# - Mads Torgersen @ Umbraco Codegarden 2022"),
            ("text", "<h2>Code Snippet Row</h2>\n<p>There is a code snippet row to enable you to easily share "
                     "code snippets in your website.</p>"),
        ])
        rows.add_code_snippet_row(
            content, "Code from the codeSnippetRow.cshtml file", FEATURES_CODE_SNIPPET,
            *self._element_types(ContentElements.CODE_SNIPPET_ROW),
        )
        rows.add_rich_text_row(
            content,
            "<h2>Image Carousel Row</h2>\n<p>You can add a simple image carousel to a page by using the "
            "Image Carousel Row.</p>",
            *self._element_types(ContentElements.RICH_TEXT_ROW),
        )
        rows.add_image_carousel_row(
            content, [self.sample_image(name) for name in CAROUSEL_IMAGES],
            *self._element_types(ContentElements.IMAGE_CAROUSEL_ROW),
        )
        return self.create(DocumentRequest(
            "Features", DocumentTypeNames.CONTENT, TemplateNames.CONTENT, home_id,
            values=self.page_values(
                content, subtitle="in this starter kit", main_image=self.sample_image("Desktop notebook glasses"),
            ),
        ))

    def create_about(self, home_id: uuid.UUID) -> uuid.UUID:
        content = self.content_rows([
            ("text", "<p>The Clean Starter Kit for Umbraco uses the Start Bootstrap Theme Clean Blog which is "
                     "built using Bootstrap 5.</p>"),
            ("image", "Friendly chair", "Umbraco, the friendly CMS"),
            ("text", "<p>With this starter kit you should be able to quickly and easily set up a new website "
                     "and share your content with others.</p>"),
        ])
        return self.create(DocumentRequest(
            "About", DocumentTypeNames.CONTENT, TemplateNames.CONTENT, home_id,
            values=self.page_values(
                content, subtitle="All about this starter kit", main_image=self.sample_image("Triangle table chairs"),
            ),
        ))

    def create_contact(self, home_id: uuid.UUID) -> uuid.UUID:
        return self.create(DocumentRequest(
            "Contact", DocumentTypeNames.CONTACT, TemplateNames.CONTACT, home_id,
            values=[
                PropertyValue("title", "Contact Us"),
                PropertyValue("subtitle", "Get in touch"),
                PropertyValue("instructionMessage", RichTextValue(
                    "<p>Want to get in touch? Fill out the form below to send me a message and I will get "
                    "back to you as soon as possible!</p>"
                )),
                PropertyValue("successMessage", RichTextValue(
                    "<h2>Thank you</h2>\n<p>Thanks for your email. We will be in touch soon.</p>"
                )),
                PropertyValue("errorMessage", RichTextValue(
                    "<h2>Error</h2>\n<p>Sorry there was a problem with submitting the form. Please try again.</p>"
                )),
                PropertyValue("mainImage", [MediaPickerValue(media_key=self.sample_image("Bluetooth white keyboard"))]),
                PropertyValue("isIndexable", True),
                PropertyValue("isFollowable", True),
            ],
        ))

    def create_error(self, home_id: uuid.UUID) -> uuid.UUID:
        content = self.content_rows([
            ("text", "<p>Sorry, we couldn't find the page you were looking for.</p>\n"
                     "<p>Why not go back to the <a href=\"/\">home page</a> and start again?</p>"),
        ])
        values = [
            PropertyValue("contentRows", content),
            PropertyValue("title", "Page not found"),
            PropertyValue("mainImage", [MediaPickerValue(media_key=self.sample_image("Triangle table chairs"))]),
            PropertyValue("isIndexable", False),
            PropertyValue("isFollowable", False),
        ] + self.hidden_values()
        return self.create(DocumentRequest(
            "Error", DocumentTypeNames.ERROR, TemplateNames.ERROR, home_id, values=values,
        ))

    def create_author(self, authors_id: uuid.UUID) -> uuid.UUID:
        content = self.content_rows([
            ("text", "<p>Paul Seal is an Umbraco Tech Lead and multiple times Umbraco MVP who works for the "
                     "Umbraco Gold Partners ClerksWell.</p>"),
        ])
        return self.create(DocumentRequest(
            AUTHOR, DocumentTypeNames.AUTHOR, TemplateNames.AUTHOR, authors_id,
            values=self.page_values(
                content,
                main_image=self.resolver.media_id(AUTHORS_FOLDER, "Profile Pic 2023"),
                meta_description="Paul Seal is an Umbraco Tech Lead and multiple times Umbraco MVP who works "
                                 "for the Umbraco Gold Partners ClerksWell.",
            ),
        ))

    # Second pass

    def update_documents(self) -> None:
        self.update_home()
        self.update(DocumentRequest(
            BLOG, DocumentTypeNames.ARTICLE_LIST, TemplateNames.ARTICLE_LIST,
            id=self.document_id(BLOG),
            values=self.page_values(
                self.latest_articles(5, True),
                subtitle="Many blog posts for you",
                main_image=self.sample_image("Desktop notebook glasses"),
            ),
        ))
        for name, (subtitle, main_image, article_date, categories, row_specs) in ARTICLES.items():
            self.update_article(name, subtitle, main_image, article_date, categories, row_specs)

    def update_home(self) -> None:
        icon_content_id, icon_settings_id = self._element_types(ContentElements.ICON_LINK_ROW)
        social_links = BlockListValue()
        for icon, url, name in SOCIAL_LINKS:
            rows.add_icon_link_row(
                social_links, self.resolver.media_id(SOCIAL_ICONS_FOLDER, icon), url, name,
                icon_content_id, icon_settings_id,
            )

        self.update(DocumentRequest(
            HOME, DocumentTypeNames.HOME, TemplateNames.HOME,
            id=self.document_id(HOME),
            values=[
                PropertyValue("contentRows", self.latest_articles(3, False)),
                PropertyValue("socialIconLinks", social_links),
                PropertyValue("title", "Clean Starter Kit"),
                PropertyValue("subtitle", "For Umbraco"),
                PropertyValue("mainImage", [MediaPickerValue(media_key=self.sample_image("Bluetooth white keyboard"))]),
                PropertyValue("isIndexable", True),
                PropertyValue("isFollowable", True),
            ],
        ))

    def update_article(
        self,
        name: str,
        subtitle: Optional[str],
        main_image: str,
        article_date: datetime,
        categories: Sequence[str],
        row_specs: Iterable[Sequence],
    ) -> None:
        values = self.page_values(self.content_rows(row_specs), subtitle=subtitle, main_image=self.sample_image(main_image))
        values.append(PropertyValue("articleDate", article_date))
        values.append(PropertyValue("author", rows.content_picks([self.document_id(f"Authors:{AUTHOR}")])))
        values.append(PropertyValue(
            "categories",
            rows.content_picks(self.document_id(f"Categories:{category}") for category in categories),
        ))
        self.update(DocumentRequest(
            name, DocumentTypeNames.ARTICLE, TemplateNames.ARTICLE,
            id=self.document_id(f"Blog:{name}"),
            values=values,
        ))
