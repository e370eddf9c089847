"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class InvalidProductError(ValidationError):
    """Producto rechazado por el inventario (nombre vacio, precio o stock negativo)."""


class DuplicateKeyError(ServiceError):
    """Ya existe un producto con el mismo codigo de barras."""

    def __init__(self, codigo_barras: str) -> None:
        super().__init__(f"El código de barras '{codigo_barras}' ya existe en el sistema.")
        self.codigo_barras = codigo_barras
