# catalog/services/product_service.py
from typing import List

from catalog.data.seed import seed
from catalog.domain.schemas import Product
from catalog.repos.product_repo import ProductRepo
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Use case'y dla katalogu produktow
    query (list, get) tylko odczyt
    command (add) dopisuje produkt z nowym id
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    #query
    def list_products(self) -> List[Product]:
        return self.repo.get_all()

    def get_product(self, product_id: int) -> Product | None:
        product = self.repo.get_product(product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
        return product

    #command
    def add_product(self, product: Product) -> Product:
        # id od callera jest ignorowane, brak walidacji name/price
        created = self.repo.create_product(product)
        logger.info(
            f"Added product {created.id} name={created.name!r} price={created.price}"
        )
        return created


def build_product_service(with_seed: bool = True) -> ProductService:
    repo = ProductRepo()
    if with_seed:
        seed(repo)
        logger.info(f"Catalog seeded with {repo.count()} products")
    return ProductService(repo)
