"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from servidor.domain.models import Producto


@dataclass(slots=True)
class ProductDraft:
    """DTO con los campos de texto capturados por el formulario de producto."""

    id: str
    codigo_barras: str
    nombre: str
    categoria: str
    precio: str
    stock: str


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Resultado de una busqueda junto con su costo en iteraciones."""

    producto: Producto | None
    iteraciones: int
    algoritmo: str

    @property
    def encontrado(self) -> bool:
        """Indica si la busqueda encontro un producto."""
        return self.producto is not None


@dataclass(slots=True, frozen=True)
class InventorySummary:
    """Resumen del inventario: cantidad de productos y valor total."""

    total_productos: int
    valor_total: Decimal
