"""Pytest fixtures for catalog store and API tests."""

import pytest
from fastapi.testclient import TestClient

from catalog.api import create_app
from catalog.repos.product_repo import ProductRepo
from catalog.services.product_service import ProductService, build_product_service


@pytest.fixture
def service():
    """Seeded ProductService (Laptop, Phone)."""
    return build_product_service(with_seed=True)


@pytest.fixture
def empty_service():
    """ProductService over an empty store."""
    return ProductService(ProductRepo())


@pytest.fixture
def client(service):
    """TestClient bound to a fresh app with its own store."""
    return TestClient(create_app(service=service))
