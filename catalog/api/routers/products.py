# catalog/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from catalog.domain.schemas import Product
from catalog.services.product_service import ProductService

router = APIRouter(prefix="/api/product", tags=["product"])


def get_service(request: Request) -> ProductService:
    #jeden store na proces, trzymany w app.state
    return request.app.state.product_service


@router.get("", response_model=List[Product])
def list_products(svc: ProductService = Depends(get_service)):
    return svc.list_products()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, svc: ProductService = Depends(get_service)):
    product = svc.get_product(product_id)
    if product is None:
        # 404 z pustym body
        return Response(status_code=404)
    return product


@router.post("", response_model=Product, status_code=201)
def create_product(
    payload: Product,
    request: Request,
    response: Response,
    svc: ProductService = Depends(get_service),
):
    created = svc.add_product(payload)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=created.id)
    )
    return created
