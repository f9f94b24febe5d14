# catalog/api/routers/health.py
from fastapi import APIRouter

from catalog.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok", service="catalog-service")
