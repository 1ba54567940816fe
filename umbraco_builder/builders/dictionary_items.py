"""Dictionary items (translated UI strings used by the site views)."""

import logging
from typing import List, Tuple

from .base import BuilderBase

logger = logging.getLogger(__name__)

DEFAULT_CULTURE = "en-US"

DICTIONARY_ITEMS: List[Tuple[str, str]] = [
    ("Article.By", "by"),
    ("Article.On", "on"),
    ("Article.Posted", "Posted"),
    ("ArticleList.ViewAll", "View all posts"),
    ("Author.ReadMore", "Read More"),
    ("ContactForm.Email", "Email Address"),
    ("ContactForm.Message", "Message"),
    ("ContactForm.Name", "Name"),
    ("ContactForm.Send", "Send"),
    ("Footer.CopyrightStatement", "Clean Starter Kit"),
    ("Footer.CopyrightTitle", "Copyright"),
    ("Navigation.MenuTitle", "Menu"),
    ("Navigation.SiteName", "Clean Starter Kit"),
    ("Paging.Next", "Next"),
    ("Paging.Of", "of"),
    ("Paging.Page", "Page"),
    ("Paging.Previous", "Prev"),
    ("Search.Placeholder", "Search..."),
    ("Search.Results", "<p>We found <strong>{0}</strong> results when searching for <strong>{1}</strong></p>"),
    ("Search.SearchButton", "Search"),
]


class DictionaryItemsBuilder(BuilderBase):
    """Creates the dictionary items with a single translation each."""

    def __init__(self, api, resolver, culture: str = DEFAULT_CULTURE):
        super().__init__(api, resolver)
        self.culture = culture

    def build(self) -> None:
        logger.info("Starting dictionary items")
        for name, translation in DICTIONARY_ITEMS:
            self.add_dictionary_item(name, translation)

    def add_dictionary_item(self, name: str, translation: str) -> None:
        self.api.create_dictionary_item({
            "name": name,
            "parent": None,
            "translations": [{"isoCode": self.culture, "translation": translation}],
        })
