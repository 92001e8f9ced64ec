from sqlalchemy import Column, Integer, Numeric, Text

from app.db import Base


class Product(Base):
    __tablename__ = "products"
    # sqlite would otherwise hand out max(id)+1 and reuse a deleted id
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0, server_default="0.00")

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
