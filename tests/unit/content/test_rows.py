"""Unit tests for content.rows module."""

import uuid

from umbraco_builder.content.block_value import BlockListValue
from umbraco_builder.content.rows import (
    add_icon_link_row,
    add_image_carousel_row,
    add_latest_articles_row,
    add_rich_text_row,
    content_picks,
)


class TestRows:
    """Test cases for the standard content rows."""

    def test_rows_are_visible(self):
        """Every helper adds a settings row with hide=False."""
        rows = BlockListValue()
        content, settings = uuid.uuid4(), uuid.uuid4()

        add_rich_text_row(rows, "<p>Intro</p>", content, settings)
        data = rows.to_dict()

        assert data["settingsData"][0]["contentTypeKey"] == str(settings)
        assert data["settingsData"][0]["values"] == [{"alias": "hide", "value": False}]
        assert data["contentData"][0]["values"][0]["value"]["markup"] == "<p>Intro</p>"

    def test_image_carousel_row(self):
        """The carousel row picks every image in order."""
        rows = BlockListValue()
        images = [uuid.uuid4(), uuid.uuid4()]

        add_image_carousel_row(rows, images, uuid.uuid4(), uuid.uuid4())

        picked = rows.to_dict()["contentData"][0]["values"][0]
        assert picked["alias"] == "images"
        assert [item["mediaKey"] for item in picked["value"]] == [str(image) for image in images]

    def test_latest_articles_row(self):
        """The latest articles row references the article list document."""
        rows = BlockListValue()
        article_list = uuid.uuid4()

        add_latest_articles_row(rows, article_list, 3, False, uuid.uuid4(), uuid.uuid4())

        values = {value["alias"]: value["value"] for value in rows.to_dict()["contentData"][0]["values"]}
        assert values == {"articleList": str(article_list), "pageSize": 3, "showPagination": False}

    def test_icon_link_row_opens_new_tab(self):
        """Icon links default to target _blank."""
        rows = BlockListValue()

        add_icon_link_row(rows, uuid.uuid4(), "https://github.com/umbraco", "GitHub", uuid.uuid4(), uuid.uuid4())

        link = rows.to_dict()["contentData"][0]["values"][1]["value"][0]
        assert link["target"] == "_blank"
        assert link["name"] == "GitHub"

    def test_content_picks(self):
        """content_picks builds one document pick per id."""
        ids = [uuid.uuid4(), uuid.uuid4()]

        assert [pick.unique for pick in content_picks(ids)] == ids
