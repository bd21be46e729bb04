"""
SQLAlchemy ORM models for catalogue items.

Single-table inheritance: Book, Album and Movie share the ``item`` table
and are told apart by the ``dtype`` discriminator column.
"""

from sqlalchemy import Column, Integer, String

from .base import Base


class Item(Base):
    """Abstract catalogue item."""

    __tablename__ = "item"

    id = Column("item_id", Integer, primary_key=True, autoincrement=True)
    dtype = Column(String(31), nullable=False)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)

    # Subtype columns (nullable, single table)
    author = Column(String(255))
    isbn = Column(String(50))
    artist = Column(String(255))
    etc = Column(String(255))
    director = Column(String(255))
    actor = Column(String(255))

    __mapper_args__ = {
        "polymorphic_on": dtype,
        "with_polymorphic": "*",
    }

    def remove_stock(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock.

        Raises:
            ValueError: If the stock would go negative
        """
        rest = self.stock_quantity - quantity
        if rest < 0:
            raise ValueError(
                f"Not enough stock for {self.name}: "
                f"requested {quantity}, available {self.stock_quantity}"
            )
        self.stock_quantity = rest

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, name={self.name})>"


class Book(Item):
    __mapper_args__ = {"polymorphic_identity": "B"}


class Album(Item):
    __mapper_args__ = {"polymorphic_identity": "A"}


class Movie(Item):
    __mapper_args__ = {"polymorphic_identity": "M"}
