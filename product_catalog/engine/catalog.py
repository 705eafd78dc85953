from __future__ import annotations
import json
from pathlib import Path
from product_catalog.core.constants import FILE_ENCODING
from product_catalog.core.models import Product

def load_products(path: str | Path) -> list[Product]:
    data = json.loads(Path(path).read_text(encoding=FILE_ENCODING))
    if not isinstance(data, list):
        raise ValueError(f"Se esperaba una lista de productos, llegó {type(data).__name__}")
    return [Product.model_validate(item) for item in data]

def save_products(products: list[Product], path: str | Path) -> None:
    Path(path).write_text(
        json.dumps([p.to_dict() for p in products], ensure_ascii=False, indent=2),
        encoding=FILE_ENCODING,
    )
