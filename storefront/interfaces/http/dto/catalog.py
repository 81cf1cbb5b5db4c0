from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from storefront.domain.catalog.entities import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NewProduct,
    ProductFilter,
)
from storefront.shared.errors.validation_types import ValidationErrorType


class ProductDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: Decimal
    inventory_count: int


class CreateProductRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2, allow_inf_nan=False)
    inventory_count: int = Field(ge=0)

    @field_validator("price", mode="before")
    @classmethod
    def _price_from_float(cls, value: object) -> object:
        # JSON numbers arrive as floats.
        if isinstance(value, float):
            return str(value)
        return value

    def to_new_product(self) -> NewProduct:
        return NewProduct(
            name=self.name,
            description=self.description,
            price=self.price,
            inventory_count=self.inventory_count,
        )


class UpdateInventoryRequestDTO(BaseModel):
    inventory_count: int = Field(ge=0)


class ProductQueryDTO(BaseModel):
    """Query-string criteria for ``GET /api/products``."""

    name_contains: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    min_price: Decimal | None = Field(None, ge=0, allow_inf_nan=False)
    max_price: Decimal | None = Field(None, ge=0, allow_inf_nan=False)
    in_stock: bool | None = None

    @model_validator(mode="after")
    def _check_range(self) -> "ProductQueryDTO":
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise PydanticCustomError(
                ValidationErrorType.PRICE_RANGE_INVERTED,
                "min_price must be <= max_price",
                {},
            )
        return self

    def to_filter(self) -> ProductFilter:
        return ProductFilter(
            name_contains=self.name_contains or None,
            min_price=self.min_price,
            max_price=self.max_price,
            in_stock=self.in_stock,
        )
