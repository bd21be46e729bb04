"""Tests for entity-to-DTO field copies."""

from datetime import datetime

from core.application.dtos.order_dto import OrderDto, SimpleOrderDto
from core.domain.enums import OrderStatus
from core.infrastructure.database.seed import build_sample_orders


ORDER_DATE = datetime(2024, 5, 1, 12, 0, 0)


def _sample_orders():
    orders = build_sample_orders(order_date=ORDER_DATE)
    # Transient entities carry no ids until flushed
    for order_id, order in enumerate(orders, start=1):
        order.id = order_id
    return orders


def test_order_dto_copies_graph():
    order_a, _ = _sample_orders()

    dto = OrderDto.from_entity(order_a)

    assert dto.order_id == 1
    assert dto.name == "userA"
    assert dto.order_date == ORDER_DATE
    assert dto.order_status == OrderStatus.ORDERED
    assert (dto.address.city, dto.address.street, dto.address.zipcode) == ("Seoul", "1", "1111")
    assert [(i.item_name, i.order_price, i.count) for i in dto.order_items] == [
        ("JPA1 BOOK", 10000, 1),
        ("JPA2 BOOK", 20000, 2),
    ]


def test_order_dto_serializes_camel_case():
    _, order_b = _sample_orders()

    body = OrderDto.from_entity(order_b).model_dump(mode="json", by_alias=True)

    assert set(body) == {"orderId", "name", "orderDate", "orderStatus", "address", "orderItems"}
    assert body["orderStatus"] == "ORDERED"
    assert body["orderItems"][0] == {"itemName": "SPRING1 BOOK", "orderPrice": 20000, "count": 3}


def test_simple_order_dto_skips_items():
    order_a, _ = _sample_orders()

    dto = SimpleOrderDto.from_entity(order_a)

    assert dto.order_id == 1
    assert dto.name == "userA"
    assert "order_items" not in dto.model_dump()
