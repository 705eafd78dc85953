from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ValidationError

from product_catalog.core.constants import StoreError
from product_catalog.core.models import OperationResult, Product
from product_catalog.engine.catalog import load_products, save_products
from product_catalog.engine.validator import code_in_use, validate_new_product

logger = logging.getLogger(__name__)


def _as_dict(data: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return dict(data)


class CatalogStore:
    """
    Catálogo de productos en memoria, sincronizado con un archivo JSON.

    Cada alta/modificación/baja exitosa reescribe el archivo completo.
    Los errores no se lanzan: se registran en el log y se informan en el
    OperationResult devuelto (campo error).

    Opciones:
      - reject_zero_price: price=0 se considera faltante (comportamiento histórico)
      - unique_code_on_update: valida code repetido también al actualizar
    """

    def __init__(
        self,
        path: str | Path,
        *,
        reject_zero_price: bool = True,
        unique_code_on_update: bool = False,
    ):
        self.path = Path(path)
        self.reject_zero_price = reject_zero_price
        self.unique_code_on_update = unique_code_on_update

        self._products: list[Product] = self._read_file()
        self._next_id = max((p.id for p in self._products), default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    # -----------------------------
    # Persistencia
    # -----------------------------
    def _read_file(self) -> list[Product]:
        try:
            products = load_products(self.path)
        except FileNotFoundError:
            logger.info("Archivo %s no existe, se inicia con catálogo vacío", self.path)
            return []
        except (OSError, ValueError) as e:
            logger.error("Error leyendo el archivo %s (%s): %s", self.path, StoreError.READ_FAILED.value, e)
            return []
        logger.info("Cargados %d productos desde %s", len(products), self.path)
        return products

    def _write_file(self) -> bool:
        try:
            save_products(self._products, self.path)
        except (OSError, TypeError, ValueError) as e:
            # No se revierte el cambio en memoria: memoria y disco quedan distintos
            logger.error("Error escribiendo el archivo %s (%s): %s", self.path, StoreError.WRITE_FAILED.value, e)
            return False
        return True

    def _find_index(self, product_id: int) -> int:
        for idx, p in enumerate(self._products):
            if p.id == product_id:
                return idx
        return -1

    def _not_found(self, product_id: int) -> OperationResult:
        msg = f"Producto con id {product_id} no encontrado"
        logger.error(msg)
        return OperationResult(ok=False, error=StoreError.NOT_FOUND, message=msg)

    def _done(self, msg: str, product: Product) -> OperationResult:
        persisted = self._write_file()
        if persisted:
            logger.info(msg)
        else:
            logger.warning("%s El cambio quedó solo en memoria, no se pudo guardar en %s", msg, self.path)
        return OperationResult(
            ok=True,
            error=None if persisted else StoreError.WRITE_FAILED,
            message=msg,
            product=product,
            persisted=persisted,
        )

    # -----------------------------
    # Public API
    # -----------------------------
    def add_product(self, candidate: Mapping[str, Any] | BaseModel) -> OperationResult:
        data = _as_dict(candidate)
        data.pop("id", None)

        error, messages = validate_new_product(data, self._products, reject_zero_price=self.reject_zero_price)
        if error is not None:
            msg = " ".join(messages)
            logger.error(msg)
            return OperationResult(ok=False, error=error, message=msg)

        try:
            product = Product.model_validate({**data, "id": self._next_id})
        except ValidationError as e:
            msg = f"Datos inválidos para el producto: {e.error_count()} error(es)"
            logger.error("%s\n%s", msg, e)
            return OperationResult(ok=False, error=StoreError.VALIDATION, message=msg)

        self._next_id += 1
        self._products.append(product)
        return self._done(f"Producto {product.title} agregado con éxito (id {product.id}).", product)

    def get_products(self) -> list[Product]:
        return list(self._products)

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        idx = self._find_index(product_id)
        if idx == -1:
            logger.error("Producto con id %s no encontrado", product_id)
            return None
        return self._products[idx]

    def update_product(self, product_id: int, patch: Mapping[str, Any] | BaseModel) -> OperationResult:
        idx = self._find_index(product_id)
        if idx == -1:
            return self._not_found(product_id)

        changes = _as_dict(patch)
        if self.unique_code_on_update and "code" in changes:
            if code_in_use(changes["code"], self._products, exclude_id=product_id):
                msg = f"El código {changes['code']} ya existe para otro producto."
                logger.error(msg)
                return OperationResult(ok=False, error=StoreError.DUPLICATE_CODE, message=msg)

        # Solo tipos: sin chequeo de obligatorios; el patch pisa campo a campo y el id nunca cambia
        try:
            updated = Product.model_validate({**self._products[idx].to_dict(), **changes, "id": product_id})
        except ValidationError as e:
            msg = f"Datos inválidos para el producto con id {product_id}: {e.error_count()} error(es)"
            logger.error("%s\n%s", msg, e)
            return OperationResult(ok=False, error=StoreError.VALIDATION, message=msg)

        self._products[idx] = updated
        return self._done(f"Producto con id {product_id} actualizado con éxito.", updated)

    def delete_product(self, product_id: int) -> OperationResult:
        idx = self._find_index(product_id)
        if idx == -1:
            return self._not_found(product_id)

        removed = self._products.pop(idx)
        return self._done(f"Producto con id {product_id} eliminado con éxito.", removed)
