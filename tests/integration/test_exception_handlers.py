"""Tests for the global exception handlers."""

import httpx
import pytest
from fastapi import FastAPI
from sqlalchemy.exc import MissingGreenlet, StatementError

from apps.api.main import register_exception_handlers
from core.application.dtos.order_dto import OrderItemDto
from core.data.models import Order


@pytest.fixture
def error_app(test_session_factory, seeded_orders) -> FastAPI:
    """App whose routes fail the ways the order endpoints can."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/detached")
    async def detached():
        async with test_session_factory() as session:
            order = await session.get(Order, 1)
        return {"name": order.member.name}

    @app.get("/no-greenlet")
    async def no_greenlet():
        async with test_session_factory() as session:
            order = await session.get(Order, 1)
            return {"name": order.member.name}

    @app.get("/wrapped-no-greenlet")
    async def wrapped_no_greenlet():
        raise StatementError(
            "lazy load of Order.member", None, {}, MissingGreenlet("greenlet_spawn has not been called")
        )

    @app.get("/statement-failed")
    async def statement_failed():
        raise StatementError("select failed", "SELECT 1", {}, RuntimeError("disk I/O error"))

    @app.get("/invalid-model")
    async def invalid_model():
        return OrderItemDto(item_name="JPA1 BOOK", order_price=10000, count=0)

    @app.get("/bad-value")
    async def bad_value():
        raise ValueError("Not enough stock for JPA1 BOOK")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


async def _get(app: FastAPI, path: str) -> httpx.Response:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,error",
    [
        ("/detached", "DetachedInstanceError"),
        ("/no-greenlet", "MissingGreenlet"),
        ("/wrapped-no-greenlet", "MissingGreenlet"),
    ],
)
async def test_lazy_loading_faults_become_500(error_app, path, error):
    response = await _get(error_app, path)

    assert response.status_code == 500
    assert response.json() == {
        "detail": "Lazy association accessed outside an active session",
        "error": error,
        "path": path,
    }


@pytest.mark.asyncio
async def test_value_error_becomes_400(error_app):
    response = await _get(error_app, "/bad-value")

    assert response.status_code == 400
    assert response.json() == {"detail": "Not enough stock for JPA1 BOOK"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/boom", "/statement-failed", "/invalid-model"])
async def test_unexpected_error_becomes_500(error_app, path):
    response = await _get(error_app, path)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
