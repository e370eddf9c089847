"""Validaciones para entradas del cliente."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from servidor.domain.models import Producto
from shared.errors import ValidationError
from shared.protocol import ProductDraft

_REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("id", "ID"),
    ("codigo_barras", "Código de barras"),
    ("nombre", "Nombre"),
    ("categoria", "Categoría"),
    ("precio", "Precio"),
    ("stock", "Stock"),
)


def build_product_from_draft(draft: ProductDraft) -> Producto:
    """Valida los campos del formulario y construye el producto."""
    validate_required_fields(draft)

    return Producto(
        id=parse_int_field(draft.id, "El ID debe ser un número entero válido"),
        codigo_barras=draft.codigo_barras.strip(),
        nombre=draft.nombre.strip(),
        categoria=draft.categoria.strip(),
        precio=parse_price(draft.precio),
        stock=parse_stock(draft.stock),
    )


def validate_required_fields(draft: ProductDraft) -> None:
    """Valida que todos los campos obligatorios tengan contenido."""
    missing_fields = [
        label
        for attribute, label in _REQUIRED_FIELDS
        if not (getattr(draft, attribute) or "").strip()
    ]
    if missing_fields:
        message = "Completa los campos obligatorios: " + ", ".join(missing_fields)
        raise ValidationError(message)


def parse_int_field(value: str, message: str) -> int:
    """Convierte texto a entero o lanza ValidationError con el mensaje dado."""
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValidationError(message) from exc


def parse_price(value: str) -> Decimal:
    """Convierte el precio a Decimal; debe ser un numero positivo."""
    message = "El precio debe ser un número positivo válido"
    try:
        precio = Decimal(value.strip())
    except InvalidOperation as exc:
        raise ValidationError(message) from exc

    if not precio.is_finite() or precio <= 0:
        raise ValidationError(message)
    return precio


def parse_stock(value: str) -> int:
    """Convierte el stock a entero no negativo."""
    message = "El stock debe ser un número entero no negativo"
    stock = parse_int_field(value, message)
    if stock < 0:
        raise ValidationError(message)
    return stock
