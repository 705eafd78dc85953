from __future__ import annotations
from typing import Any, Mapping, Optional
from product_catalog.core.constants import REQUIRED_TEXT_FIELDS, StoreError
from product_catalog.core.models import Product

def _is_missing(value: Any) -> bool:
    return value is None or value == ""

def missing_required_fields(candidate: Mapping[str, Any], reject_zero_price: bool = True) -> list[str]:
    missing: list[str] = []
    for field in REQUIRED_TEXT_FIELDS:
        value = candidate.get(field)
        # price: por defecto se exige valor "truthy", así que 0 cuenta como faltante
        if field == "price" and reject_zero_price:
            if not value:
                missing.append(field)
        elif _is_missing(value):
            missing.append(field)

    # stock: solo None/ausente es error, 0 es un stock válido
    if candidate.get("stock") is None:
        missing.append("stock")
    return missing

def code_in_use(code: Any, products: list[Product], exclude_id: Optional[int] = None) -> bool:
    return any(p.code == code and p.id != exclude_id for p in products)

def validate_new_product(
    candidate: Mapping[str, Any],
    products: list[Product],
    reject_zero_price: bool = True,
) -> tuple[Optional[StoreError], list[str]]:
    """
    Reglas de alta, en orden:
      1. campos obligatorios presentes
      2. code no repetido (comparación exacta, distingue mayúsculas)
    Retorna (tipo_de_error | None, mensajes)
    """
    missing = missing_required_fields(candidate, reject_zero_price=reject_zero_price)
    if missing:
        return StoreError.VALIDATION, [f"Todos los campos son obligatorios. Faltan: {', '.join(missing)}"]

    if code_in_use(candidate.get("code"), products):
        return StoreError.DUPLICATE_CODE, [f"El código {candidate.get('code')} ya existe para otro producto."]

    return None, []
