"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from servidor.domain.models import Producto
from servidor.services.inventory_store import InventoryStore
from servidor.services.searching import binary_search_by_id, linear_search_by_name
from servidor.services.sorting import quick_sort_by_id, sort_products
from shared.errors import ServiceError, ValidationError
from shared.protocol import InventorySummary, SearchResult

LOGGER = logging.getLogger(__name__)


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def list_products(self) -> list[Producto]:
        """Solicita una copia del inventario en orden de insercion."""

    def add_product(self, producto: Producto) -> None:
        """Solicita agregar un producto al inventario."""

    def remove_product(self, codigo_barras: str) -> bool:
        """Solicita eliminar un producto por codigo de barras."""

    def find_product(self, codigo_barras: str) -> Producto | None:
        """Solicita un producto por codigo de barras."""

    def filter_by_category(self, categoria: str) -> list[Producto]:
        """Solicita los productos de una categoria."""

    def sort_products(self, criterio: str) -> list[Producto]:
        """Solicita una copia del inventario ordenada por criterio."""

    def search_by_id(self, id_buscado: int) -> SearchResult:
        """Solicita una busqueda binaria por ID."""

    def search_by_name(self, nombre: str) -> SearchResult:
        """Solicita una busqueda secuencial por nombre."""

    def inventory_summary(self) -> InventorySummary:
        """Solicita el resumen del inventario."""


class LocalServerGateway:
    """Implementacion local del gateway usando servicios en memoria."""

    def __init__(self, store: InventoryStore | None = None) -> None:
        self._store = store if store is not None else InventoryStore()

    def list_products(self) -> list[Producto]:
        """Retorna un snapshot del inventario."""
        return self._store.snapshot()

    def add_product(self, producto: Producto) -> None:
        """Agrega un producto delegando en el inventario."""
        try:
            self._store.add(producto)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al agregar producto.")
            raise ServiceError("No fue posible agregar el producto.") from exc

    def remove_product(self, codigo_barras: str) -> bool:
        """Elimina un producto; retorna False si no existia."""
        return self._store.remove(codigo_barras)

    def find_product(self, codigo_barras: str) -> Producto | None:
        """Busca un producto por codigo de barras."""
        return self._store.find_by_key(codigo_barras)

    def filter_by_category(self, categoria: str) -> list[Producto]:
        """Filtra el inventario por categoria."""
        return self._store.filter_by_category(categoria)

    def sort_products(self, criterio: str) -> list[Producto]:
        """Ordena un snapshot del inventario sin modificar el inventario."""
        try:
            return sort_products(self._store.snapshot(), criterio)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al ordenar productos por %s.", criterio)
            raise ServiceError("No fue posible ordenar los productos.") from exc

    def search_by_id(self, id_buscado: int) -> SearchResult:
        """Ordena un snapshot por ID y aplica busqueda binaria."""
        try:
            ordenados = quick_sort_by_id(self._store.snapshot())
            return binary_search_by_id(ordenados, id_buscado)
        except Exception as exc:
            LOGGER.exception("Fallo inesperado en busqueda binaria de ID %s.", id_buscado)
            raise ServiceError("No fue posible completar la búsqueda.") from exc

    def search_by_name(self, nombre: str) -> SearchResult:
        """Aplica busqueda secuencial sobre el snapshot en orden de insercion."""
        try:
            return linear_search_by_name(self._store.snapshot(), nombre)
        except Exception as exc:
            LOGGER.exception("Fallo inesperado en busqueda secuencial de '%s'.", nombre)
            raise ServiceError("No fue posible completar la búsqueda.") from exc

    def inventory_summary(self) -> InventorySummary:
        """Construye el resumen del inventario."""
        return InventorySummary(
            total_productos=len(self._store),
            valor_total=self._store.total_value(),
        )
