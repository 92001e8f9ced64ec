from enum import Enum
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.product import Product


class ProductField(str, Enum):
    NAME = "name"
    PRICE = "price"


class SortMode(str, Enum):
    ASC = "asc"
    DESC = "desc"


# the only ORDER BY statements that can ever be issued
_ORDER_STATEMENTS = {
    (ProductField.NAME, SortMode.ASC): select(Product).order_by(Product.name.asc()),
    (ProductField.NAME, SortMode.DESC): select(Product).order_by(Product.name.desc()),
    (ProductField.PRICE, SortMode.ASC): select(Product).order_by(Product.price.asc()),
    (ProductField.PRICE, SortMode.DESC): select(Product).order_by(Product.price.desc()),
}


def _coerce(enum_cls, value, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


class ProductRepository:
    """
    Data access for the products table.

    Every method issues a single statement. Writes are committed right
    away; there are no multi-statement transactions.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product, or None when no row has this id."""
        return self.db.get(Product, product_id)

    def list(self, start: int = 0, count: int = 10) -> List[Product]:
        return self.db.query(Product).limit(count).offset(start).all()

    def create(self, name: str, price: float) -> Product:
        p = Product(name=name, price=price)
        self.db.add(p)
        # INSERT ... RETURNING id
        self.db.flush()
        self.db.commit()
        return p

    def update(self, product_id: int, name: str, price: float) -> None:
        # zero matched rows is not an error
        self.db.query(Product).filter(Product.id == product_id).update(
            {Product.name: name, Product.price: price}, synchronize_session=False
        )
        self.db.commit()

    def delete(self, product_id: int) -> None:
        self.db.query(Product).filter(Product.id == product_id).delete(
            synchronize_session=False
        )
        self.db.commit()

    def search(self, text: str) -> List[Product]:
        like = f"%{text}%"
        return self.db.query(Product).filter(Product.name.ilike(like)).all()

    def order_by(self, field, mode) -> List[Product]:
        """
        Return all products sorted by ``field`` in ``mode`` order.

        Values outside the enums fall back per axis: an unknown field sorts
        by price, an unknown mode sorts ascending.
        """
        key = (
            _coerce(ProductField, field, ProductField.PRICE),
            _coerce(SortMode, mode, SortMode.ASC),
        )
        return list(self.db.execute(_ORDER_STATEMENTS[key]).scalars().all())
