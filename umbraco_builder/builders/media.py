"""Media folders and the image/SVG files uploaded into them."""

import logging
import uuid
from pathlib import Path
from typing import List, Tuple, Union

from ..management_client.errors import AssetNotFoundError
from .base import BuilderBase
from .names import AUTHORS_FOLDER, SAMPLE_IMAGES_FOLDER, SOCIAL_ICONS_FOLDER, MediaTypeNames

logger = logging.getLogger(__name__)

# (media name, file name) per root folder; files live in {media_dir}/{folder}/
AUTHOR_IMAGES: List[Tuple[str, str]] = [
    ("Profile Pic 2023", "profile-pic-2023.png"),
]

SAMPLE_IMAGES: List[Tuple[str, str]] = [
    ("24 days people at codegarden", "24-days-people-at-codegarden.jpg"),
    ("Authors", "authors.jpg"),
    ("Bluetooth white keyboard", "bluetooth-white-keyboard.jpg"),
    ("Candid Contributions", "candid-contributions.jpg"),
    ("Chairs lamps", "chairs-lamps.jpg"),
    ("Codegarden keynote", "codegarden-keynote.jpg"),
    ("Community front row", "community-front-row.jpg"),
    ("Desktop notebook glasses", "desktop-notebook-glasses.jpg"),
    ("Diary", "diary.jpg"),
    ("First timers at codegarden", "first-timers-at-codegarden.jpg"),
    ("Friendly chair", "friendly-chair.jpg"),
    ("Front row audience smiles", "front-row-audience-smiles.jpg"),
    ("Mastodon", "mastodon.png"),
    ("Meetup organizers at codegarden", "meetup-organizers-at-codegarden.jpg"),
    ("Package Manifest", "package-manifest.jpg"),
    ("Phone pen binder", "phone-pen-binder.jpg"),
    ("Podcast headphones coffee", "podcast-coffee.jpg"),
    ("Say cheese", "say-cheese.jpg"),
    ("Skrift at codegarden", "skrift-at-codegarden.jpg"),
    ("Triangle table chairs", "triangle-table-chairs.jpg"),
    ("Tutorials", "tutorials.jpg"),
    ("Umbracoffee codegarden", "umbracoffee-codegarden.jpg"),
]

SOCIAL_ICONS: List[Tuple[str, str]] = [
    ("Cc Paypal", "cc-paypal.svg"),
    ("Discord", "discord.svg"),
    ("Github", "github.svg"),
    ("Github Alt", "github-alt.svg"),
    ("Mastodon", "mastodon.svg"),
    ("Paypal", "paypal.svg"),
    ("Share Nodes", "share-nodes.svg"),
    ("Square Github", "square-github.svg"),
    ("Square Twitter", "square-twitter.svg"),
    ("Twitter", "twitter.svg"),
    ("Umbraco", "umbraco.svg"),
]


class MediaBuilder(BuilderBase):
    """Creates the three root media folders and uploads every file into them."""

    def __init__(self, api, resolver, media_dir: Union[str, Path] = "Media"):
        super().__init__(api, resolver)
        self.media_dir = Path(media_dir)

    def build(self) -> None:
        logger.info("Starting media")

        logger.info("- fetching required items")
        folder_type_id = self.resolver.media_type_id(MediaTypeNames.FOLDER)
        image_type_id = self.resolver.media_type_id(MediaTypeNames.IMAGE)
        svg_type_id = self.resolver.media_type_id(MediaTypeNames.VECTOR_GRAPHICS)

        logger.info("- adding folders")
        social_icons_id = self.create_folder(SOCIAL_ICONS_FOLDER, folder_type_id)
        sample_images_id = self.create_folder(SAMPLE_IMAGES_FOLDER, folder_type_id)
        authors_id = self.create_folder(AUTHORS_FOLDER, folder_type_id)

        logger.info("- adding images")
        for name, file_name in AUTHOR_IMAGES:
            self.create_file(name, Path(AUTHORS_FOLDER) / file_name, image_type_id, authors_id)
        for name, file_name in SAMPLE_IMAGES:
            self.create_file(name, Path(SAMPLE_IMAGES_FOLDER) / file_name, image_type_id, sample_images_id)
        for name, file_name in SOCIAL_ICONS:
            self.create_file(name, Path(SOCIAL_ICONS_FOLDER) / file_name, svg_type_id, social_icons_id)

    def create_folder(self, name: str, folder_type_id: uuid.UUID) -> uuid.UUID:
        return self.api.create_media({
            "parent": None,
            "mediaType": {"id": str(folder_type_id)},
            "variants": [{"culture": None, "segment": None, "name": name}],
            "values": [],
        })

    def create_file(
        self,
        name: str,
        relative_path: Path,
        media_type_id: uuid.UUID,
        folder_id: uuid.UUID,
    ) -> uuid.UUID:
        """Upload a file and create a media item referencing it.

        Raises:
            AssetNotFoundError: If the file does not exist under media_dir
        """
        file_path = self.media_dir / relative_path
        if not file_path.is_file():
            raise AssetNotFoundError(str(file_path))

        temporary_file_id = self.api.upload_temporary_file(file_path)
        logger.debug(f"Creating media '{name}' from {file_path}")
        return self.api.create_media({
            "parent": {"id": str(folder_id)},
            "mediaType": {"id": str(media_type_id)},
            "variants": [{"culture": None, "segment": None, "name": name}],
            "values": [
                {"alias": "umbracoFile", "value": {"temporaryFileId": str(temporary_file_id)}},
            ],
        })
