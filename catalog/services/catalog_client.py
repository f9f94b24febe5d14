# catalog/services/catalog_client.py
from typing import List

import requests

from catalog.domain.schemas import Product
from catalog.utils.retry import connect_retry, http_retry
from catalog.utils.settings import CATALOG_SERVICE_URL, HTTP_TIMEOUT_SECONDS
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or CATALOG_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else HTTP_TIMEOUT_SECONDS

    @http_retry()
    def list_products(self) -> List[Product]:
        url = f"{self.base_url}/api/product"
        logger.info(f"CatalogClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return [Product.model_validate(p) for p in resp.json()]

    @http_retry()
    def get_product(self, product_id: int) -> Product | None:
        url = f"{self.base_url}/api/product/{product_id}"
        logger.info(f"CatalogClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return Product.model_validate(resp.json())

    @connect_retry()
    def create_product(self, name: str, price: float) -> Product:
        url = f"{self.base_url}/api/product"
        logger.info(f"CatalogClient POST {url}")

        resp = requests.post(
            url,
            json={"name": name, "price": price},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return Product.model_validate(resp.json())
