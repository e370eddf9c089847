"""Fuente unica y helpers para criterios de busqueda y ordenamiento."""

from __future__ import annotations

from shared.errors import ValidationError

CRITERIO_ID = "ID"
CRITERIO_NOMBRE = "Nombre"
CRITERIO_PRECIO = "Precio"

SEARCH_CRITERIA: tuple[str, ...] = (
    CRITERIO_ID,
    CRITERIO_NOMBRE,
)

SORT_CRITERIA: tuple[str, ...] = (
    CRITERIO_ID,
    CRITERIO_PRECIO,
    CRITERIO_NOMBRE,
)


def normalize_criterion(value: str, available: tuple[str, ...]) -> str:
    """Resuelve un criterio ignorando mayusculas y espacios extra."""
    lookup = {criterion.casefold(): criterion for criterion in available}
    criterion = lookup.get(value.strip().casefold())
    if criterion is None:
        raise ValidationError(
            f"Criterio no soportado: '{value}'. Opciones: {', '.join(available)}."
        )
    return criterion
