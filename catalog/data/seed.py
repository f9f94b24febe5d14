# catalog/data/seed.py
from catalog.domain.schemas import Product
from catalog.repos.product_repo import ProductRepo

SEED_PRODUCTS = (
    Product(name="Laptop", price=999.99),
    Product(name="Phone", price=499.99),
)


def seed(repo: ProductRepo) -> None:
    # not forcing: only seed if empty
    if repo.count():
        return
    for product in SEED_PRODUCTS:
        repo.create_product(product)
