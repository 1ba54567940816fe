"""Populate-once name index.

A NameIndex maps the names of one resource category (and scope) to their
remote identifiers. It is filled by a loader on first access and never
changes afterwards. Population runs under the index's own lock, so concurrent
first lookups trigger a single load; a failed load leaves the index empty and
the next lookup tries again.
"""

import logging
import threading
import uuid
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..management_client.errors import FetchError, ManagementApiError

logger = logging.getLogger(__name__)

Loader = Callable[[], Dict[str, uuid.UUID]]


class NameIndex:
    """Lazily populated, read-only name -> id mapping."""

    def __init__(self, category: str, scope: Sequence[str], loader: Loader):
        self.category = category
        self.scope: Tuple[str, ...] = tuple(scope)
        self._loader = loader
        self._lock = threading.Lock()
        self._names: Optional[Dict[str, uuid.UUID]] = None

    @property
    def populated(self) -> bool:
        return self._names is not None

    def get(self) -> Dict[str, uuid.UUID]:
        """Return the mapping, loading it on first use.

        Raises:
            FetchError: If the loader returned no items or a listing call failed
            BuilderError: Auth, connectivity and lookup errors propagate unchanged
        """
        names = self._names
        if names is not None:
            return names

        with self._lock:
            if self._names is None:
                try:
                    loaded = self._loader()
                except ManagementApiError as e:
                    raise FetchError(self.category, self.scope, reason=str(e)) from e
                if not loaded:
                    raise FetchError(self.category, self.scope)
                logger.debug(
                    f"Indexed {len(loaded)} {self.category} names"
                    + (f" in '{'/'.join(self.scope)}'" if self.scope else "")
                )
                self._names = loaded
            return self._names
