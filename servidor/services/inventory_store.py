"""Inventario en memoria con vista ordenada e indice por codigo de barras."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from servidor.domain.models import Producto
from servidor.services.inventory_utils import compute_inventory_value, same_text
from shared.errors import DuplicateKeyError, InvalidProductError

LOGGER = logging.getLogger(__name__)


class InventoryStore:
    """Administra los productos del inventario.

    Mantiene dos vistas sincronizadas: una lista en orden de insercion y un
    diccionario por codigo de barras. Ambas son privadas; solo se modifican
    a traves de ``add`` y ``remove``, que siempre actualizan las dos.
    """

    def __init__(self, productos_iniciales: Iterable[Producto] | None = None) -> None:
        self._productos: list[Producto] = []
        self._por_codigo: dict[str, Producto] = {}

        for producto in productos_iniciales or ():
            self.add(producto)

    def __len__(self) -> int:
        return len(self._productos)

    def __contains__(self, codigo_barras: object) -> bool:
        return isinstance(codigo_barras, str) and codigo_barras in self._por_codigo

    def snapshot(self) -> list[Producto]:
        """Retorna una copia de la lista en orden de insercion."""
        return list(self._productos)

    def add(self, producto: Producto) -> None:
        """Agrega un producto validado a ambas vistas."""
        if producto.codigo_barras in self._por_codigo:
            LOGGER.warning("Codigo de barras duplicado rechazado: %s", producto.codigo_barras)
            raise DuplicateKeyError(producto.codigo_barras)

        self._validate(producto)

        self._productos.append(producto)
        self._por_codigo[producto.codigo_barras] = producto
        LOGGER.info(
            "Producto agregado: codigo=%s, nombre=%s",
            producto.codigo_barras,
            producto.nombre,
        )

    def remove(self, codigo_barras: str) -> bool:
        """Elimina el producto por codigo de barras; retorna False si no existe."""
        producto = self._por_codigo.pop(codigo_barras, None)
        if producto is None:
            LOGGER.debug("Eliminar sin efecto, codigo inexistente: %s", codigo_barras)
            return False

        self._productos.remove(producto)
        LOGGER.info("Producto eliminado: codigo=%s", codigo_barras)
        return True

    def find_by_key(self, codigo_barras: str) -> Producto | None:
        """Retorna el producto asociado al codigo de barras, o None."""
        return self._por_codigo.get(codigo_barras)

    def exists(self, codigo_barras: str) -> bool:
        """Indica si existe un producto con el codigo de barras."""
        return codigo_barras in self._por_codigo

    def filter_by_category(self, categoria: str) -> list[Producto]:
        """Lista productos de una categoria, sin distinguir mayusculas."""
        return [
            producto
            for producto in self._productos
            if same_text(producto.categoria, categoria)
        ]

    def total_value(self) -> Decimal:
        """Valor total del inventario (precio por stock)."""
        return compute_inventory_value(self._productos)

    @staticmethod
    def _validate(producto: Producto) -> None:
        """Valida las reglas minimas para aceptar un producto."""
        if not producto.nombre or not producto.nombre.strip():
            raise InvalidProductError("El nombre del producto no puede estar vacío.")
        if not isinstance(producto.precio, Decimal) or not producto.precio.is_finite():
            raise InvalidProductError("El precio debe ser un número decimal válido.")
        if producto.precio < 0:
            raise InvalidProductError("El precio no puede ser negativo.")
        if producto.stock < 0:
            raise InvalidProductError("El stock no puede ser negativo.")
