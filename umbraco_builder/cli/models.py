"""Data models for CLI operations.

All models use dataclasses, following the patterns in
umbraco_builder/builders/models.py.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional

# Provisioning steps in dependency order
STEPS: List[str] = [
    "dictionary-items",
    "templates",
    "media",
    "data-types",
    "compositions",
    "element-types",
    "document-types",
    "data-types-document-types",
    "documents",
    "data-types-documents",
]

STEP_DESCRIPTIONS: Dict[str, str] = {
    "dictionary-items": "Create dictionary items",
    "templates": "Create templates from the view files",
    "media": "Create media folders and upload media files",
    "data-types": "Create custom data types",
    "compositions": "Create composition document types",
    "element-types": "Create content and settings element types",
    "document-types": "Create page document types",
    "data-types-document-types": "Configure block lists with element types",
    "documents": "Create, link and publish the sample content",
    "data-types-documents": "Configure content picker start nodes",
}


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): All requested steps completed
    - GENERAL_ERROR (1): Configuration, asset or unexpected API failure
    - AUTH_ERROR (3): Missing credentials or token request failure
    - NETWORK_ERROR (4): The Umbraco host could not be reached
    - RESOLUTION_ERROR (5): A referenced item could not be found remotely

    Example:
        >>> raise typer.Exit(ExitCode.AUTH_ERROR)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
    RESOLUTION_ERROR = 5


@dataclass
class BuilderConfig:
    """Run settings loaded from umbraco-builder.yaml.

    Attributes:
        views_dir: Directory containing the template .cshtml views
        media_dir: Directory containing the media files (one subfolder per media folder)
        page_size: Items requested per tree listing page
        timeout: Transport timeout in seconds for every API call
        culture: ISO code for dictionary item translations
        steps: Steps to run, in order (defaults to every step)

    Example:
        >>> config = BuilderConfig(views_dir="site/Views", steps=["templates"])
    """
    views_dir: str = "Views"
    media_dir: str = "Media"
    page_size: int = 100
    timeout: float = 30
    culture: str = "en-US"
    steps: List[str] = field(default_factory=lambda: list(STEPS))


@dataclass
class RunSummary:
    """Result of a provisioning run.

    Attributes:
        completed: Steps that finished, in order
        failed: Step that raised, if any
        error: Message of the failure, if any
    """
    completed: List[str] = field(default_factory=list)
    failed: Optional[str] = None
    error: Optional[str] = None
