# catalog/domain/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Schema produktu w katalogu (request i response).

    id == 0 oznacza produkt jeszcze nie zapisany, prawdziwe id nadaje store.
    Brak walidacji nazwy i ceny: pusta nazwa i ujemna cena sa akceptowane.
    """

    id: int = Field(0, description="ID produktu, nadawane przez store")
    name: str = Field("", description="Nazwa produktu")
    price: float = Field(0.0, description="Cena produktu")

    model_config = ConfigDict(frozen=True)


class HealthOut(BaseModel):
    status: str
    service: str
