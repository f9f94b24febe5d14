# catalog/api/__init__.py
from fastapi import FastAPI

from catalog.api.routers import health, products
from catalog.services.product_service import ProductService, build_product_service


def create_app(service: ProductService | None = None) -> FastAPI:
    app = FastAPI(
        title="Catalog Service",
        version="1.0.0",
    )
    app.state.product_service = service if service is not None else build_product_service()

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app
