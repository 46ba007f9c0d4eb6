"""
Service layer for property listings.

Landlords create listings; everyone can list them.  A listing is
accepted only when ``name``, ``location``, ``price`` and ``contact``
are all present.  A field counts as missing when it is ``None`` or an
empty string; any other value, including a numeric price of ``0``, is
stored exactly as given.

Identifiers are derived from the creation time in milliseconds but are
never reused: when two listings are created within the same
millisecond the second one gets the next integer.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Optional

from palevel_api.app.core.errors import ValidationError
from palevel_api.app.schemas.listing import ListingCreate, ListingRead
from palevel_api.app.services.listing_store import ListingStore


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "location", "price", "contact")
MISSING_FIELDS_MESSAGE = "All fields are required."


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def is_missing(value: Any) -> bool:
    """Return ``True`` if ``value`` does not count as a supplied field."""
    return value is None or value == ""


class ListingIdGenerator:
    """Hands out strictly increasing, timestamp‑derived listing ids."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _now_ms
        self._last_id = 0

    def next_id(self) -> int:
        listing_id = max(self._clock(), self._last_id + 1)
        self._last_id = listing_id
        return listing_id


class ListingService:
    """Validate, create and list listings backed by a ``ListingStore``."""

    def __init__(
        self,
        store: ListingStore,
        id_generator: Optional[ListingIdGenerator] = None,
    ) -> None:
        self.store = store
        self.id_generator = id_generator or ListingIdGenerator()

    def create_listing(self, data: ListingCreate) -> ListingRead:
        """Store a new listing and return it.

        Raises
        ------
        ValidationError
            If any required field is missing.  Nothing is stored in
            that case.
        """
        missing = [field for field in REQUIRED_FIELDS if is_missing(getattr(data, field))]
        if missing:
            # The client only sees the generic message; the field names
            # are for the server log.
            logger.warning("Rejected listing, missing fields: %s", ", ".join(missing))
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        listing = ListingRead(
            id=self.id_generator.next_id(),
            name=data.name,
            location=data.location,
            price=data.price,
            contact=data.contact,
        )
        self.store.append(listing)
        logger.info(
            "Created listing %s (%s, %s); %d listings stored",
            listing.id,
            listing.name,
            listing.location,
            len(self.store),
        )
        return listing

    def list_listings(self) -> List[ListingRead]:
        """Return every listing in creation order."""
        return self.store.all()
