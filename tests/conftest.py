"""Shared fixtures for cart service tests"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cart_service.core.config import Settings
from cart_service.database.cart import CartEngine
from cart_service.main import create_app


@pytest.fixture
def engine() -> CartEngine:
    """Fresh, empty cart engine"""
    return CartEngine()


@pytest.fixture
def app() -> FastAPI:
    """Fresh application with its own empty cart"""
    return create_app(Settings())


@pytest.fixture
def test_client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def milk() -> dict:
    return {"productId": 1, "name": "Milk", "price": 2.50, "quantity": 2}


@pytest.fixture
def bread() -> dict:
    return {"productId": 2, "name": "Bread", "price": 1.99, "quantity": 1}
