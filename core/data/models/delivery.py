"""SQLAlchemy ORM model for deliveries."""

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import composite, relationship

from core.domain.enums import DeliveryStatus
from core.domain.value_objects import Address

from .base import Base


class Delivery(Base):
    """Shipping record of exactly one order."""

    __tablename__ = "delivery"

    id = Column("delivery_id", Integer, primary_key=True, autoincrement=True)

    city = Column(String(100))
    street = Column(String(255))
    zipcode = Column(String(20))
    address = composite(Address, city, street, zipcode)

    status = Column(Enum(DeliveryStatus), nullable=False, default=DeliveryStatus.READY)

    # Inverse side of Order.delivery, never serialized
    order = relationship("Order", back_populates="delivery", uselist=False)

    @classmethod
    def create(cls, address: Address) -> "Delivery":
        return cls(address=address, status=DeliveryStatus.READY)

    def __repr__(self):
        return f"<Delivery(id={self.id}, status={self.status})>"
