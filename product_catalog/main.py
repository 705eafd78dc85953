from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from product_catalog.core.logging_config import setup_logging
from product_catalog.core.settings import get_settings
from product_catalog.data.export import export_to_csv, export_to_excel
from product_catalog.engine.store import CatalogStore


def _parse_value(raw: str) -> Any:
    # "12.5" -> 12.5, "true" -> True, "abc" -> "abc"
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _parse_assignments(items: list[str]) -> dict[str, Any]:
    patch: dict[str, Any] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"Formato inválido '{item}', se espera campo=valor")
        patch[key.strip()] = _parse_value(raw)
    return patch


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="product-catalog", description="Catálogo de productos en archivo JSON.")
    parser.add_argument("--file", dest="path", default=None, help="Archivo JSON del catálogo (default: CATALOG_PATH)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Lista todos los productos")

    p_get = sub.add_parser("get", help="Muestra un producto por id")
    p_get.add_argument("id", type=int)

    p_add = sub.add_parser("add", help="Agrega un producto")
    p_add.add_argument("--title", required=True)
    p_add.add_argument("--description", required=True)
    p_add.add_argument("--price", type=float, required=True)
    p_add.add_argument("--thumbnail", required=True)
    p_add.add_argument("--code", required=True)
    p_add.add_argument("--stock", type=int, required=True)

    p_upd = sub.add_parser("update", help="Actualiza campos de un producto")
    p_upd.add_argument("id", type=int)
    p_upd.add_argument("--set", dest="assignments", action="append", default=[], metavar="CAMPO=VALOR")

    p_del = sub.add_parser("delete", help="Elimina un producto")
    p_del.add_argument("id", type=int)

    p_exp = sub.add_parser("export", help="Exporta el catálogo a .csv o .xlsx")
    p_exp.add_argument("output")

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level)

    parser = build_parser()
    args = parser.parse_args(argv)

    store = CatalogStore(
        args.path or settings.catalog_path,
        reject_zero_price=settings.reject_zero_price,
        unique_code_on_update=settings.unique_code_on_update,
    )

    if args.command == "list":
        _print_json([p.to_dict() for p in store.get_products()])
        return 0

    if args.command == "get":
        product = store.get_product_by_id(args.id)
        if product is None:
            return 1
        _print_json(product.to_dict())
        return 0

    if args.command == "add":
        result = store.add_product({
            "title": args.title,
            "description": args.description,
            "price": args.price,
            "thumbnail": args.thumbnail,
            "code": args.code,
            "stock": args.stock,
        })
    elif args.command == "update":
        try:
            patch = _parse_assignments(args.assignments)
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))
        result = store.update_product(args.id, patch)
    elif args.command == "delete":
        result = store.delete_product(args.id)
    else:
        out = Path(args.output)
        if out.suffix.lower() == ".xlsx":
            export_to_excel(store.get_products(), str(out))
        elif out.suffix.lower() == ".csv":
            export_to_csv(store.get_products(), str(out))
        else:
            parser.error("La exportación soporta solo .csv o .xlsx")
        return 0

    if not result.ok:
        return 1
    _print_json(result.product.to_dict())
    return 0


if __name__ == "__main__":
    sys.exit(main())
