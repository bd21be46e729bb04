"""SQLAlchemy ORM model for members."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import composite, relationship

from core.domain.value_objects import Address

from .base import Base


class Member(Base):
    """Customer placing orders."""

    __tablename__ = "member"

    id = Column("member_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    # Embedded address
    city = Column(String(100))
    street = Column(String(255))
    zipcode = Column(String(20))
    address = composite(Address, city, street, zipcode)

    # Inverse side, never serialized
    orders = relationship("Order", back_populates="member", order_by="Order.id")

    @classmethod
    def create(cls, name: str, address: Address) -> "Member":
        return cls(name=name, address=address)

    def __repr__(self):
        return f"<Member(id={self.id}, name={self.name})>"
