"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from servidor.domain.models import Producto
from shared.criteria import CRITERIO_ID, SEARCH_CRITERIA, SORT_CRITERIA, normalize_criterion
from shared.errors import ValidationError
from shared.protocol import InventorySummary, ProductDraft, SearchResult

from .gateway import ServerGateway
from .validators import build_product_from_draft, parse_int_field

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones del usuario y servicios de inventario."""

    def __init__(self, gateway: ServerGateway) -> None:
        self._gateway = gateway

    def load_products(self, drafts: Iterable[ProductDraft]) -> int:
        """Carga un lote de productos y retorna cuantos se agregaron."""
        cargados = 0
        for draft in drafts:
            self.on_add_product(draft)
            cargados += 1

        LOGGER.info("Datos iniciales cargados: %d productos", cargados)
        return cargados

    def on_add_product(self, draft: ProductDraft) -> Producto:
        """Valida el formulario y agrega el producto al inventario."""
        producto = build_product_from_draft(draft)
        self._gateway.add_product(producto)
        return producto

    def on_remove_product(self, codigo_barras: str) -> bool:
        """Elimina un producto por codigo de barras."""
        codigo = codigo_barras.strip()
        if not codigo:
            raise ValidationError("Seleccione un producto para eliminar")

        eliminado = self._gateway.remove_product(codigo)
        if not eliminado:
            LOGGER.warning("No se pudo eliminar el producto: %s", codigo)
        return eliminado

    def on_find_product(self, codigo_barras: str) -> Producto | None:
        """Retorna el producto con el codigo de barras indicado, o None."""
        codigo = codigo_barras.strip()
        if not codigo:
            raise ValidationError("Por favor, ingrese un código de barras")

        producto = self._gateway.find_product(codigo)
        if producto is None:
            LOGGER.info("Codigo de barras sin producto asociado: %s", codigo)
        return producto

    def on_search(self, criterio: str, valor: str) -> SearchResult:
        """Busca por ID (binaria sobre copia ordenada) o por nombre (secuencial)."""
        criterion = normalize_criterion(criterio, SEARCH_CRITERIA)
        valor_limpio = valor.strip()
        if not valor_limpio:
            raise ValidationError("Por favor, ingrese un valor de búsqueda")

        if criterion == CRITERIO_ID:
            id_buscado = parse_int_field(
                valor_limpio,
                "Por favor, ingrese un ID válido (número entero)",
            )
            result = self._gateway.search_by_id(id_buscado)
        else:
            result = self._gateway.search_by_name(valor_limpio)

        LOGGER.info(
            "Busqueda por %s '%s': encontrado=%s, iteraciones=%d",
            criterion,
            valor_limpio,
            result.encontrado,
            result.iteraciones,
        )
        return result

    def on_sort(self, criterio: str) -> list[Producto]:
        """Retorna el inventario ordenado por el criterio indicado."""
        criterion = normalize_criterion(criterio, SORT_CRITERIA)
        return self._gateway.sort_products(criterion)

    def on_filter_category(self, categoria: str) -> list[Producto]:
        """Retorna los productos de la categoria indicada."""
        return self._gateway.filter_by_category(categoria.strip())

    def list_products(self) -> list[Producto]:
        """Retorna el inventario en orden de insercion."""
        return self._gateway.list_products()

    def inventory_summary(self) -> InventorySummary:
        """Retorna total de productos y valor del inventario."""
        return self._gateway.inventory_summary()
