from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

import app.api.convertors  # noqa: F401  registers order_field, sort_mode, search
from app.db import get_db
from app.repositories.product_repo import ProductField, ProductRepository, SortMode
from app.schemas.product_schema import ProductIn, ProductOut

router = APIRouter(tags=["products"])

MAX_COUNT = 10
# products.id is a postgres serial
MAX_ID = 2**31 - 1


def _to_int(value: Optional[str]) -> int:
    # unparsable values count as 0 and get clamped by the caller
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _check_id(product_id: int) -> int:
    if product_id > MAX_ID:
        raise HTTPException(status_code=400, detail="Invalid product ID")
    return product_id


def _to_dict(p) -> dict:
    return ProductOut.model_validate(p).model_dump()


@router.get("/products", summary="List products")
def list_products(
    count: Optional[str] = Query(None, description="page size, 1..10"),
    start: Optional[str] = Query(None, description="offset, >= 0"),
    db: Session = Depends(get_db),
):
    count_ = _to_int(count)
    start_ = _to_int(start)
    if count_ > MAX_COUNT or count_ < 1:
        count_ = MAX_COUNT
    if start_ < 0:
        start_ = 0
    repo = ProductRepository(db)
    return [_to_dict(p) for p in repo.list(start=start_, count=count_)]


@router.get("/product/{product_id:int}", summary="Get product by id")
def get_product(product_id: int, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    p = repo.get_by_id(_check_id(product_id))
    if p is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return _to_dict(p)


@router.post("/product", status_code=201, summary="Create product")
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    """
    Echoes the request body with the new id. The price is returned as sent,
    not rounded to the two decimals that get stored.
    """
    repo = ProductRepository(db)
    p = repo.create(payload.name, payload.price)
    return ProductOut(id=p.id, name=payload.name, price=payload.price).model_dump()


@router.put("/product/{product_id:int}", summary="Update product")
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    """Echoes the body under the path id, unrounded, whether or not a row matched."""
    product_id = _check_id(product_id)
    repo = ProductRepository(db)
    repo.update(product_id, payload.name, payload.price)
    return ProductOut(id=product_id, name=payload.name, price=payload.price).model_dump()


@router.delete("/product/{product_id:int}", summary="Delete product")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    repo.delete(_check_id(product_id))
    return {"result": "success"}


@router.get(
    "/products/order/{field:order_field}/{mode:sort_mode}",
    summary="List products sorted by name or price",
)
def order_products(field: ProductField, mode: SortMode, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    return [_to_dict(p) for p in repo.order_by(field, mode)]


@router.get("/products/search/{search:search}", summary="Search products by name")
def search_products(search: str, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    return [_to_dict(p) for p in repo.search(search)]
