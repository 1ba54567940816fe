"""Unit tests for the dictionary item, template and media builders."""

import uuid
from pathlib import Path
from unittest.mock import Mock

import pytest

from umbraco_builder.builders.dictionary_items import DICTIONARY_ITEMS, DictionaryItemsBuilder
from umbraco_builder.builders.media import (
    AUTHOR_IMAGES,
    SAMPLE_IMAGES,
    SOCIAL_ICONS,
    MediaBuilder,
)
from umbraco_builder.builders.templates import TEMPLATES, TemplatesBuilder
from umbraco_builder.management_client.errors import AssetNotFoundError


@pytest.fixture
def api():
    return Mock()


@pytest.fixture
def resolver():
    return Mock()


class TestDictionaryItemsBuilder:
    """Test cases for DictionaryItemsBuilder."""

    def test_build_creates_every_item(self, api, resolver):
        """Every dictionary item is posted once."""
        DictionaryItemsBuilder(api, resolver).build()

        assert api.create_dictionary_item.call_count == len(DICTIONARY_ITEMS)

    def test_translation_uses_configured_culture(self, api, resolver):
        """The single translation carries the configured ISO code."""
        builder = DictionaryItemsBuilder(api, resolver, culture="da-DK")

        builder.add_dictionary_item("Article.By", "By")

        api.create_dictionary_item.assert_called_once_with({
            "name": "Article.By",
            "parent": None,
            "translations": [{"isoCode": "da-DK", "translation": "By"}],
        })


class TestTemplatesBuilder:
    """Test cases for TemplatesBuilder."""

    def test_build_reads_each_view(self, api, resolver, tmp_path):
        """Each template is created from its view file contents."""
        # Arrange
        for _, alias in TEMPLATES:
            (tmp_path / f"{alias}.cshtml").write_text(f"@* {alias} *@", encoding="utf-8")

        # Act
        TemplatesBuilder(api, resolver, views_dir=tmp_path).build()

        # Assert
        assert api.create_template.call_count == len(TEMPLATES)
        first = api.create_template.call_args_list[0].args[0]
        assert first == {"name": "Master", "alias": "master", "content": "@* master *@"}

    def test_missing_view_raises(self, api, resolver, tmp_path):
        """A missing view file raises AssetNotFoundError before any call."""
        builder = TemplatesBuilder(api, resolver, views_dir=tmp_path)

        with pytest.raises(AssetNotFoundError) as exc_info:
            builder.create_template("Home", "home")

        assert exc_info.value.file_path == str(tmp_path / "home.cshtml")
        api.create_template.assert_not_called()


class TestMediaBuilder:
    """Test cases for MediaBuilder."""

    def _write_media(self, root: Path) -> None:
        for folder, files in (
            ("Authors", AUTHOR_IMAGES),
            ("Sample Images", SAMPLE_IMAGES),
            ("Social Icons", SOCIAL_ICONS),
        ):
            (root / folder).mkdir()
            for _, file_name in files:
                (root / folder / file_name).write_bytes(b"data")

    def test_build_creates_folders_and_files(self, api, resolver, tmp_path):
        """Three folders are created and every file is uploaded and created."""
        # Arrange
        self._write_media(tmp_path)
        svg_type = uuid.uuid4()
        resolver.media_type_id.side_effect = lambda name: svg_type if "SVG" in name else uuid.uuid4()
        api.create_media.side_effect = lambda payload: uuid.uuid4()
        api.upload_temporary_file.side_effect = lambda path: uuid.uuid4()

        # Act
        MediaBuilder(api, resolver, media_dir=tmp_path).build()

        # Assert
        file_count = len(AUTHOR_IMAGES) + len(SAMPLE_IMAGES) + len(SOCIAL_ICONS)
        assert api.create_media.call_count == 3 + file_count
        assert api.upload_temporary_file.call_count == file_count
        folders = [call.args[0] for call in api.create_media.call_args_list[:3]]
        assert [folder["variants"][0]["name"] for folder in folders] == ["Social Icons", "Sample Images", "Authors"]
        assert all(folder["parent"] is None for folder in folders)
        last = api.create_media.call_args_list[-1].args[0]
        assert last["mediaType"] == {"id": str(svg_type)}

    def test_file_references_temporary_upload(self, api, resolver, tmp_path):
        """The media item points at the uploaded temporary file and its folder."""
        (tmp_path / "Authors").mkdir()
        (tmp_path / "Authors" / "me.png").write_bytes(b"png")
        temporary_id, folder_id, image_type = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        api.upload_temporary_file.return_value = temporary_id

        MediaBuilder(api, resolver, media_dir=tmp_path).create_file(
            "Me", Path("Authors") / "me.png", image_type, folder_id
        )

        api.upload_temporary_file.assert_called_once_with(tmp_path / "Authors" / "me.png")
        payload = api.create_media.call_args.args[0]
        assert payload["parent"] == {"id": str(folder_id)}
        assert payload["values"] == [
            {"alias": "umbracoFile", "value": {"temporaryFileId": str(temporary_id)}}
        ]

    def test_missing_file_raises(self, api, resolver, tmp_path):
        """A missing media file raises AssetNotFoundError without uploading."""
        builder = MediaBuilder(api, resolver, media_dir=tmp_path)

        with pytest.raises(AssetNotFoundError):
            builder.create_file("Me", Path("Authors") / "me.png", uuid.uuid4(), uuid.uuid4())

        api.upload_temporary_file.assert_not_called()
