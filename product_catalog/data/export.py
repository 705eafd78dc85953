from __future__ import annotations
import pandas as pd
from product_catalog.core.constants import PRODUCT_FIELDS
from product_catalog.core.models import Product

def products_to_frame(products: list[Product]) -> pd.DataFrame:
    if not products:
        return pd.DataFrame(columns=PRODUCT_FIELDS)
    df = pd.DataFrame([p.to_dict() for p in products])
    # columnas canónicas primero, luego las extra en orden de aparición
    extra = [c for c in df.columns if c not in PRODUCT_FIELDS]
    return df[PRODUCT_FIELDS + extra]

def export_to_excel(products: list[Product], path: str) -> None:
    with pd.ExcelWriter(path, engine="xlsxwriter") as writer:
        products_to_frame(products).to_excel(writer, index=False, sheet_name="products")

def export_to_csv(products: list[Product], path: str) -> None:
    products_to_frame(products).to_csv(path, index=False, encoding="utf-8")
