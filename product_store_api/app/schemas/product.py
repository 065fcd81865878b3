"""
Pydantic models for product data.

``ProductCreate`` validates a full product body strictly: strings must
be JSON strings, ``price`` a JSON number and ``inStock`` a JSON
boolean.  No coercion happens, so ``"9.99"`` is not a price and ``1``
is not a boolean.

``ProductUpdate`` backs the partial‑update semantics of ``PUT``: every
field is optional and a value of the wrong type is dropped rather than
rejected, which leaves the stored value untouched.

On the wire the stock flag is called ``inStock``; in Python it is
``in_stock``.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter, model_validator
from pydantic import ValidationError as SchemaValidationError

# ``bool`` is a subclass of ``int`` in Python; StrictInt still rejects it.
Price = Union[StrictInt, StrictFloat]

_FIELD_ADAPTERS: Dict[str, TypeAdapter] = {
    "name": TypeAdapter(StrictStr),
    "description": TypeAdapter(StrictStr),
    "price": TypeAdapter(Price),
    "category": TypeAdapter(StrictStr),
    "inStock": TypeAdapter(StrictBool),
}


class ProductBase(BaseModel):
    name: StrictStr = Field(..., examples=["Widget-1"])
    description: StrictStr = Field(..., examples=["A small widget"])
    price: Price = Field(..., examples=[9.99])
    category: StrictStr = Field(..., examples=["tools"])
    in_stock: StrictBool = Field(..., alias="inStock", examples=[True])


class ProductCreate(ProductBase):
    """Schema for creating a product.  Every field is required."""
    pass


class Product(ProductBase):
    """Schema for a stored product as returned by the API."""

    id: str


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    All fields are optional.  Supplied values of the wrong type are
    discarded before validation, so they never overwrite stored data.
    """

    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    price: Optional[Price] = None
    category: Optional[StrictStr] = None
    in_stock: Optional[StrictBool] = Field(None, alias="inStock")

    @model_validator(mode="before")
    @classmethod
    def drop_mistyped_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            # Left for pydantic to reject; use ``from_body`` for raw request bodies.
            return data
        kept = {}
        for key, value in data.items():
            adapter = _FIELD_ADAPTERS.get(key)
            if adapter is None:
                continue
            try:
                adapter.validate_python(value)
            except SchemaValidationError:
                continue
            kept[key] = value
        return kept

    @classmethod
    def from_body(cls, body: Any) -> "ProductUpdate":
        """Build an update from a raw request body.

        A missing or non‑object body carries no changes.
        """
        return cls.model_validate(body if isinstance(body, dict) else {})

    def changes(self) -> Dict[str, Any]:
        """Return the fields that were supplied with a valid value."""
        return self.model_dump(exclude_unset=True)


class ProductPage(BaseModel):
    """One page of a (possibly filtered) product listing."""

    total: int
    page: int
    limit: int
    products: List[Product]
