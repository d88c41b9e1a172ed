"""Request and response models for the shipping service API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CartItem(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class Address(BaseModel):
    street_address: str
    city: str
    state: str
    country: str
    zip_code: str


class Money(BaseModel):
    """Amount of money in the units/nanos representation.

    ``units`` is the whole part and ``nanos`` the fractional part in
    billionths; both carry the sign of the amount.
    """

    model_config = ConfigDict(frozen=True)

    currency_code: str = Field("USD", min_length=3, max_length=3)
    units: int
    nanos: int = Field(..., ge=-999_999_999, le=999_999_999)


class QuoteRequest(BaseModel):
    items: list[CartItem] = Field(default_factory=list)
    address: Address | None = None

    @property
    def number_of_items(self) -> int:
        return sum(item.quantity for item in self.items)


class QuoteResponse(BaseModel):
    cost_usd: Money


class ShipOrderRequest(BaseModel):
    """An order to ship: at least one item and a destination address."""

    items: list[CartItem] = Field(..., min_length=1)
    address: Address


class ShipOrderResponse(BaseModel):
    tracking_id: str


class ErrorResponse(BaseModel):
    error: str
    detail: str
