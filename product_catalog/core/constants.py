from enum import Enum

class StoreError(str, Enum):
    VALIDATION = "VALIDATION"
    DUPLICATE_CODE = "DUPLICATE_CODE"
    NOT_FOUND = "NOT_FOUND"
    READ_FAILED = "READ_FAILED"
    WRITE_FAILED = "WRITE_FAILED"

# Campos obligatorios al crear un producto (stock se valida aparte: 0 es válido)
REQUIRED_TEXT_FIELDS = ["title", "description", "price", "thumbnail", "code"]

PRODUCT_FIELDS = ["id", "title", "description", "price", "thumbnail", "code", "stock"]

DEFAULT_CATALOG_PATH = "products.json"
FILE_ENCODING = "utf-8"
