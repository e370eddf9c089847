"""Utilidades compartidas por los servicios de inventario."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from servidor.domain.models import Producto


def fold_text(value: str) -> str:
    """Normaliza texto para comparaciones sin distinguir mayusculas."""
    return value.casefold()


def same_text(left: str, right: str) -> bool:
    """Compara dos textos de forma exacta ignorando mayusculas."""
    return fold_text(left) == fold_text(right)


def compute_inventory_value(productos: Iterable[Producto]) -> Decimal:
    """Calcula el valor total del inventario como suma de precio por stock."""
    return sum((producto.precio * producto.stock for producto in productos), Decimal("0"))

