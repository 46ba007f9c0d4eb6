"""
Listing endpoints.

``POST /api/listings`` lets landlords add a property and ``GET
/api/listings`` returns every listing in the order it was created.
Both routes are public.  A creation request with a missing field is
answered with HTTP 400 and ``{"error": "All fields are required."}``
by the ``ValidationError`` handler registered in ``main.py``.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request, status

from palevel_api.app.schemas.listing import ListingCreate, ListingRead
from palevel_api.app.services.listing_service import ListingService

router = APIRouter()


def get_listing_service(request: Request) -> ListingService:
    """Return the service bound to the running application."""
    return request.app.state.listing_service


@router.post("", response_model=ListingRead, status_code=status.HTTP_201_CREATED)
async def create_listing(
    listing_in: Optional[ListingCreate] = Body(None),
    service: ListingService = Depends(get_listing_service),
) -> ListingRead:
    """Create a new listing.

    A request without a body, or with a JSON ``null`` body, is treated
    as one with every field missing.
    """
    return service.create_listing(listing_in if listing_in is not None else ListingCreate())


@router.get("", response_model=List[ListingRead])
async def list_listings(
    service: ListingService = Depends(get_listing_service),
) -> List[ListingRead]:
    """Return all listings, oldest first.

    An empty list is returned before anything has been created.
    """
    return service.list_listings()
