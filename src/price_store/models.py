from dataclasses import dataclass
from typing import Any
from uuid import UUID

from .errors import NotFoundError, ValidationError


@dataclass(frozen=True)
class Price:
    id: UUID
    price: int

    def to_dict(self) -> dict:
        return {"id": str(self.id), "price": self.price}


def parse_price_payload(data: Any) -> int:
    """Pull the integer ``price`` out of a decoded JSON body.

    JSON booleans decode to bool, a subclass of int; they are
    rejected along with floats, strings and null.
    """
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    if "price" not in data:
        raise ValidationError("price is required")
    price = data["price"]
    if isinstance(price, bool) or not isinstance(price, int):
        raise ValidationError("price must be an integer")
    return price


def parse_price_id(raw: str) -> UUID:
    # malformed ids were never issued
    try:
        return UUID(raw)
    except ValueError:
        raise NotFoundError() from None
