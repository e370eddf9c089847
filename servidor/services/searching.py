"""Algoritmos de busqueda que reportan su costo en iteraciones."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from servidor.domain.models import Producto
from servidor.services.inventory_utils import same_text
from shared.protocol import SearchResult

LOGGER = logging.getLogger(__name__)

BINARY_SEARCH = "Búsqueda Binaria"
LINEAR_SEARCH = "Búsqueda Secuencial"


def binary_search_by_id(productos: Sequence[Producto], id_buscado: int) -> SearchResult:
    """Busca por ID en una secuencia ya ordenada por ID ascendente.

    Cuenta una iteracion por cada punto medio evaluado. Si la secuencia no
    esta ordenada el resultado no es confiable, pero la busqueda termina.
    """
    inicio = 0
    fin = len(productos) - 1
    iteraciones = 0

    while inicio <= fin:
        iteraciones += 1
        medio = (inicio + fin) // 2
        actual = productos[medio]
        if actual.id == id_buscado:
            LOGGER.debug("ID %s encontrado en %d iteraciones", id_buscado, iteraciones)
            return SearchResult(producto=actual, iteraciones=iteraciones, algoritmo=BINARY_SEARCH)
        if actual.id < id_buscado:
            inicio = medio + 1
        else:
            fin = medio - 1

    LOGGER.debug("ID %s no encontrado tras %d iteraciones", id_buscado, iteraciones)
    return SearchResult(producto=None, iteraciones=iteraciones, algoritmo=BINARY_SEARCH)


def linear_search_by_name(productos: Sequence[Producto], nombre: str) -> SearchResult:
    """Busca secuencialmente por nombre exacto, sin distinguir mayusculas."""
    iteraciones = 0

    for producto in productos:
        iteraciones += 1
        if same_text(producto.nombre, nombre):
            LOGGER.debug("Nombre '%s' encontrado en %d iteraciones", nombre, iteraciones)
            return SearchResult(producto=producto, iteraciones=iteraciones, algoritmo=LINEAR_SEARCH)

    LOGGER.debug("Nombre '%s' no encontrado tras %d iteraciones", nombre, iteraciones)
    return SearchResult(producto=None, iteraciones=iteraciones, algoritmo=LINEAR_SEARCH)
