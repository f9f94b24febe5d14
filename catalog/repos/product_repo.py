# catalog/repos/product_repo.py
from threading import RLock
from typing import List

from catalog.domain.schemas import Product


class ProductRepo:
    """
    In-memory kolekcja produktow.
    Jeden lock na liste i nadawanie id, read-modify-write (max + 1, append)
    dzieje sie w jednej sekcji krytycznej
    """

    def __init__(self):
        self._lock = RLock()
        #stan budowany tylko przez create_product
        self._products: List[Product] = []

    def get_all(self) -> List[Product]:
        #kopia, zeby nikt nie modyfikowal listy z zewnatrz
        with self._lock:
            return list(self._products)

    def get_product(self, product_id: int) -> Product | None:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def create_product(self, product: Product) -> Product:
        with self._lock:
            new_id = max((p.id for p in self._products), default=0) + 1
            #nowa wartosc z nadpisanym id, input callera zostaje nietkniety
            created = product.model_copy(update={"id": new_id})
            self._products.append(created)
        return created
