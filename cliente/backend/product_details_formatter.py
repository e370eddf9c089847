"""Pure formatters for product, search result and inventory text blocks."""

from __future__ import annotations

from collections.abc import Iterable

from servidor.domain.models import Producto
from shared.protocol import InventorySummary, SearchResult

_NO_PRODUCTS = "No hay productos en el inventario."


def format_product_line(producto: Producto) -> str:
    """Formats a product as a single ``[ID | Codigo | Nombre | ...]`` line."""
    return (
        f"[ID:{producto.id:>3} | {producto.codigo_barras} | {producto.nombre:<15} | "
        f"{producto.precio:>6} | Stock: {producto.stock:>3} | {producto.categoria}]"
    )


def format_product_list(productos: Iterable[Producto], empty_message: str = _NO_PRODUCTS) -> str:
    """Formats one product line per row, or ``empty_message`` when empty."""
    lines = [format_product_line(producto) for producto in productos]
    if not lines:
        return empty_message
    return "\n".join(lines)


def format_search_result(result: SearchResult) -> str:
    """Builds the search result block as ``Campo: valor`` lines."""
    producto = result.producto
    if producto is None:
        lines = [
            "PRODUCTO NO ENCONTRADO",
            "No se encontró ningún producto que coincida con los criterios de búsqueda.",
        ]
    else:
        lines = [
            "PRODUCTO ENCONTRADO",
            f"ID: {producto.id}",
            f"Nombre: {producto.nombre}",
            f"Código de Barras: {producto.codigo_barras}",
            f"Categoría: {producto.categoria}",
            f"Precio: {producto.precio}",
            f"Stock: {producto.stock} unidades",
        ]

    lines.append(f"Algoritmo: {result.algoritmo}")
    lines.append(f"Iteraciones realizadas: {result.iteraciones}")
    return "\n".join(lines)


def format_inventory_summary(summary: InventorySummary) -> str:
    """Formats the ``Total de productos | Valor total`` summary line."""
    return (
        f"Total de productos: {summary.total_productos} | "
        f"Valor total del inventario: {summary.valor_total}"
    )
