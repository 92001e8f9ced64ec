# backend/app/schemas/product_schema.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProductIn(BaseModel):
    # no str/bool coercion, no NaN or Infinity; ints still pass as prices
    model_config = ConfigDict(strict=True, allow_inf_nan=False)
    # any id in the body is ignored; the path or the database decides it
    id: Optional[int] = None
    name: str
    price: float


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    price: float
