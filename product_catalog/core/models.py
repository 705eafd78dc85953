from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict
from product_catalog.core.constants import StoreError

class Product(BaseModel):
    # Se aceptan claves extra: update_product conserva las que traiga el patch
    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    description: str
    price: int | float  # un precio entero se guarda como entero
    thumbnail: str
    code: str
    stock: int

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@dataclass
class OperationResult:
    ok: bool
    error: Optional[StoreError] = None
    message: str = ""
    product: Optional[Product] = None
    persisted: bool = False  # False si no hubo escritura o si la escritura falló

    def __bool__(self) -> bool:
        return self.ok
