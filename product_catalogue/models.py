from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    quantityInStock: int = Field(..., ge=0)
    reorderLevel: int
    price: float = Field(..., ge=0)
    reorderAmount: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        quantity_in_stock: int,
        reorder_level: int,
        price: float,
        reorder_amount: Optional[int] = None,
    ) -> Product:
        """Positional constructor, mirrors the field order of a stock record."""
        return cls(
            id=id,
            name=name,
            quantityInStock=quantity_in_stock,
            reorderLevel=reorder_level,
            price=price,
            reorderAmount=reorder_amount,
        )

    @property
    def needs_reorder(self) -> bool:
        # Stock sitting exactly on the reorder level counts
        return self.quantityInStock <= self.reorderLevel


class Batch(BaseModel):
    type: Literal["Batch"] = "Batch"
    products: List[Product]


class SearchCriteria(BaseModel):
    price: Optional[float] = None
    keyword: Optional[str] = None

    @model_validator(mode='after')
    def exactly_one_filter(self) -> SearchCriteria:
        given = [key for key in ("price", "keyword") if getattr(self, key) is not None]
        if len(given) != 1:
            raise ValueError(f"exactly one of 'price' or 'keyword' is required, got {given or 'none'}")
        return self


class ReorderReport(BaseModel):
    productIds: List[str] = Field(default_factory=list)


class SearchResult(BaseModel):
    searchedProducts: List[str] = Field(default_factory=list)
