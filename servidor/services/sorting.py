"""Algoritmos de ordenamiento de productos."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from decimal import Decimal

from servidor.domain.models import Producto
from servidor.services.inventory_utils import fold_text
from shared.criteria import (
    CRITERIO_ID,
    CRITERIO_NOMBRE,
    CRITERIO_PRECIO,
    SORT_CRITERIA,
    normalize_criterion,
)

LOGGER = logging.getLogger(__name__)


def quick_sort_by_id(productos: Sequence[Producto]) -> list[Producto]:
    """Ordena por ID ascendente con quicksort (pivote: ultimo elemento)."""
    return _partition_sort(productos, key=lambda producto: producto.id)


def quick_sort_by_price(productos: Sequence[Producto]) -> list[Producto]:
    """Ordena por precio ascendente con quicksort (pivote: ultimo elemento)."""
    return _partition_sort(productos, key=lambda producto: producto.precio)


def merge_sort_by_name(productos: Sequence[Producto]) -> list[Producto]:
    """Ordena por nombre sin distinguir mayusculas. Es estable."""
    if len(productos) <= 1:
        return list(productos)

    mitad = len(productos) // 2
    izquierda = merge_sort_by_name(productos[:mitad])
    derecha = merge_sort_by_name(productos[mitad:])
    return _merge_by_name(izquierda, derecha)


def sort_products(productos: Sequence[Producto], criterio: str) -> list[Producto]:
    """Ordena productos segun el criterio indicado (ID, Precio o Nombre)."""
    criterion = normalize_criterion(criterio, SORT_CRITERIA)
    sorters: dict[str, Callable[[Sequence[Producto]], list[Producto]]] = {
        CRITERIO_ID: quick_sort_by_id,
        CRITERIO_PRECIO: quick_sort_by_price,
        CRITERIO_NOMBRE: merge_sort_by_name,
    }
    ordenados = sorters[criterion](productos)
    LOGGER.debug("Ordenados %d productos por %s", len(ordenados), criterion)
    return ordenados


def _partition_sort(
    productos: Sequence[Producto],
    key: Callable[[Producto], int | Decimal],
) -> list[Producto]:
    """Quicksort sobre una pila explicita de trabajo.

    Cada particion deja a la izquierda los menores estrictos al pivote y a la
    derecha el resto (empates incluidos), en el orden en que se recorrieron.
    El pivote queda entre ambas. El resultado es el mismo que el de la
    version recursiva, sin depender del limite de recursion.
    """
    if len(productos) <= 1:
        return list(productos)

    resultado: list[Producto] = []
    # Cada entrada es una sublista por ordenar o un pivote ya ubicado.
    pendientes: list[tuple[list[Producto] | None, Producto | None]] = [(list(productos), None)]

    while pendientes:
        sublista, pivote_ubicado = pendientes.pop()
        if sublista is None:
            resultado.append(pivote_ubicado)
            continue

        if len(sublista) <= 1:
            resultado.extend(sublista)
            continue

        pivote = sublista[-1]
        pivote_key = key(pivote)
        menores: list[Producto] = []
        mayores: list[Producto] = []
        for producto in sublista[:-1]:
            if key(producto) < pivote_key:
                menores.append(producto)
            else:
                mayores.append(producto)

        pendientes.append((mayores, None))
        pendientes.append((None, pivote))
        pendientes.append((menores, None))

    return resultado


def _merge_by_name(izquierda: list[Producto], derecha: list[Producto]) -> list[Producto]:
    """Mezcla dos listas ordenadas; en empate toma primero de la izquierda."""
    resultado: list[Producto] = []
    i = j = 0

    while i < len(izquierda) and j < len(derecha):
        if fold_text(derecha[j].nombre) < fold_text(izquierda[i].nombre):
            resultado.append(derecha[j])
            j += 1
        else:
            resultado.append(izquierda[i])
            i += 1

    resultado.extend(izquierda[i:])
    resultado.extend(derecha[j:])
    return resultado
