"""Integration tests for the order listing endpoints."""

import httpx
import pytest

from tests.conftest import EXPECTED_ORDER_ITEMS


DTO_VARIANTS = [
    "/api/v2/orders",
    "/api/v3/orders",
    "/api/v3.1/orders",
    "/api/osiv/v3/orders",
    "/api/v4/orders",
    "/api/v5/orders",
    "/api/v6/orders",
]


def _dto_items(body: list) -> dict:
    return {
        order["orderId"]: [(i["itemName"], i["orderPrice"], i["count"]) for i in order["orderItems"]]
        for order in body
    }


def _entity_items(body: list) -> dict:
    return {
        order["id"]: [(oi["item"]["name"], oi["orderPrice"], oi["count"]) for oi in order["orderItems"]]
        for order in body
    }


@pytest.mark.asyncio
async def test_every_variant_returns_the_same_orders(test_client: httpx.AsyncClient):
    """Same data set, same (order id -> items) map, whatever the strategy."""
    response = await test_client.get("/api/v1/orders")
    assert response.status_code == 200
    assert _entity_items(response.json()) == EXPECTED_ORDER_ITEMS

    for path in DTO_VARIANTS:
        response = await test_client.get(path)

        assert response.status_code == 200, f"{path}: {response.text}"
        assert _dto_items(response.json()) == EXPECTED_ORDER_ITEMS, path


@pytest.mark.asyncio
async def test_every_variant_keeps_orders_without_items(test_client: httpx.AsyncClient, order_without_items):
    expected = {**EXPECTED_ORDER_ITEMS, order_without_items: []}

    response = await test_client.get("/api/v1/orders")
    assert _entity_items(response.json()) == expected

    for path in DTO_VARIANTS:
        response = await test_client.get(path)

        assert response.status_code == 200, f"{path}: {response.text}"
        assert _dto_items(response.json()) == expected, path


@pytest.mark.asyncio
@pytest.mark.parametrize("path", DTO_VARIANTS)
async def test_order_dto_shape(test_client: httpx.AsyncClient, path):
    response = await test_client.get(path)

    order = response.json()[0]
    assert set(order) == {"orderId", "name", "orderDate", "orderStatus", "address", "orderItems"}
    assert order["name"] == "userA"
    assert order["orderStatus"] == "ORDERED"
    assert order["address"] == {"city": "Seoul", "street": "1", "zipcode": "1111"}
    assert order["orderItems"][0] == {"itemName": "JPA1 BOOK", "orderPrice": 10000, "count": 1}


@pytest.mark.asyncio
async def test_v1_exposes_entities_without_back_references(test_client: httpx.AsyncClient):
    response = await test_client.get("/api/v1/orders")

    order = response.json()[0]
    assert set(order) == {"id", "member", "delivery", "orderDate", "status", "orderItems"}
    assert order["member"] == {
        "id": 1,
        "name": "userA",
        "address": {"city": "Seoul", "street": "1", "zipcode": "1111"},
    }
    assert order["delivery"]["status"] == "READY"
    assert "order" not in order["delivery"]
    assert "order" not in order["orderItems"][0]
    # Stock already reduced by the order
    assert order["orderItems"][0]["item"]["stockQuantity"] == 99


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/v1/orders", "/api/v2/orders"])
async def test_search_parameters(test_client: httpx.AsyncClient, path):
    by_name = await test_client.get(path, params={"member_name": "userB"})
    canceled = await test_client.get(path, params={"order_status": "CANCELED"})
    invalid = await test_client.get(path, params={"order_status": "SHIPPED"})

    assert len(by_name.json()) == 1
    order = by_name.json()[0]
    assert (order["member"]["name"] if "member" in order else order["name"]) == "userB"
    assert canceled.json() == []
    assert invalid.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "offset,limit,expected_ids",
    [
        (0, 100, [1, 2]),
        (0, 1, [1]),
        (1, 1, [2]),
        (1, 100, [2]),
        (2, 100, []),
    ],
)
async def test_v3_1_paging(test_client: httpx.AsyncClient, offset, limit, expected_ids):
    response = await test_client.get("/api/v3.1/orders", params={"offset": offset, "limit": limit})

    assert response.status_code == 200
    body = response.json()
    assert len(body) <= limit
    assert [order["orderId"] for order in body] == expected_ids


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"offset": -1}, {"limit": 0}, {"limit": 1001}])
async def test_v3_1_rejects_bad_paging(test_client: httpx.AsyncClient, params):
    response = await test_client.get("/api/v3.1/orders", params=params)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_v6_returns_grouped_orders_not_rows(test_client: httpx.AsyncClient):
    response = await test_client.get("/api/v6/orders")

    body = response.json()
    assert len(body) == 2
    assert "orderId" not in body[0]["orderItems"][0]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,expected_queries",
    [
        ("/api/v3/orders", 1),
        ("/api/v3.1/orders", 3),
        ("/api/osiv/v3/orders", 1),
        ("/api/v4/orders", 3),
        ("/api/v5/orders", 2),
        ("/api/v6/orders", 1),
    ],
)
async def test_query_counts(test_client: httpx.AsyncClient, query_counter, path, expected_queries):
    query_counter.reset()

    response = await test_client.get(path)

    assert response.status_code == 200
    assert query_counter.count == expected_queries


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/v1/orders", "/api/v2/orders"])
async def test_lazy_variants_pay_n_plus_one(test_client: httpx.AsyncClient, query_counter, path):
    query_counter.reset()

    response = await test_client.get(path)

    orders = len(response.json())
    # orders + member, delivery and order_items per order at least
    assert query_counter.count >= 1 + 3 * orders


@pytest.mark.asyncio
async def test_health_and_root(test_client: httpx.AsyncClient):
    health = await test_client.get("/health")
    root = await test_client.get("/")

    assert health.json() == {"status": "healthy"}
    assert root.json()["docs"] == "/docs"


@pytest.mark.asyncio
@pytest.mark.parametrize("path,id_field", [("/api/v1/orders", "id"), ("/api/v2/orders", "orderId")])
async def test_lazy_variants_page(test_client: httpx.AsyncClient, path, id_field):
    first = await test_client.get(path, params={"limit": 1})
    second = await test_client.get(path, params={"offset": 1, "limit": 1})
    past_end = await test_client.get(path, params={"offset": 2})
    too_large = await test_client.get(path, params={"limit": 1001})

    assert [order[id_field] for order in first.json()] == [1]
    assert [order[id_field] for order in second.json()] == [2]
    assert past_end.json() == []
    assert too_large.status_code == 422
