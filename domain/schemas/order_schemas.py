from pydantic import BaseModel, ConfigDict, Field
from typing import List


class CartLine(BaseModel):
    """One distinct meal in the cart with its aggregated quantity"""

    id: str
    name: str
    price: float
    quantity: int = Field(1, ge=1)

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class Customer(BaseModel):
    """Checkout form fields. The postal code travels as 'postal-code' on the wire."""

    email: str
    name: str
    street: str
    postal_code: str = Field(..., alias="postal-code")
    city: str

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class Order(BaseModel):
    """An accepted order as persisted in the orders file"""

    id: str
    items: List[CartLine]
    customer: Customer

    model_config = ConfigDict(extra="allow")


class MessageResponse(BaseModel):
    """Body of every non-listing response"""

    message: str
