"""
In‑memory storage for listings.

``ListingStore`` keeps every listing in creation order for as long as
the owning application lives.  Listings are never updated or removed,
and nothing is written to disk: restarting the process starts from an
empty store.
"""

from __future__ import annotations

from typing import List

from palevel_api.app.schemas.listing import ListingRead


class ListingStore:
    """Ordered, append‑only collection of listings."""

    def __init__(self) -> None:
        self._listings: List[ListingRead] = []

    def append(self, listing: ListingRead) -> None:
        """Add ``listing`` after all previously stored listings."""
        self._listings.append(listing)

    def all(self) -> List[ListingRead]:
        """Return the stored listings in insertion order.

        The returned list is a snapshot; modifying it does not affect
        the store.
        """
        return list(self._listings)

    def __len__(self) -> int:
        return len(self._listings)
