"""
Pydantic models for property listings.

``ListingCreate`` describes the body landlords submit from the
frontend form.  Every field is optional at the schema level so that a
missing field reaches the service layer, which answers with the single
``"All fields are required."`` error instead of the framework's
field‑by‑field validation report.  ``ListingRead`` is the stored and
returned representation.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

# Prices are stored exactly as submitted: the form sends text, API
# clients may send a number.  Strict types keep JSON booleans from
# being coerced to 0 or 1.
Price = Union[StrictStr, StrictInt, StrictFloat]


class ListingCreate(BaseModel):
    """Schema for creating a listing."""

    name: Optional[str] = Field(None, examples=["Room1"])
    location: Optional[str] = Field(None, examples=["Lusaka"])
    price: Optional[Price] = Field(None, examples=["500"])
    contact: Optional[str] = Field(None, examples=["0977000000"])


class ListingRead(BaseModel):
    """Schema for reading a listing from the API."""

    id: int
    name: str
    location: str
    price: Price
    contact: str

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
