"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class Producto:
    """Representa un producto en inventario.

    El codigo de barras es la clave unica dentro del inventario; el ``id``
    numerico solo se usa como llave de ordenamiento y busqueda binaria.
    """

    id: int
    nombre: str
    codigo_barras: str
    categoria: str
    precio: Decimal
    stock: int
