"""Productos de ejemplo que el cliente carga al iniciar."""

from __future__ import annotations

from shared.protocol import ProductDraft

SAMPLE_PRODUCTS: tuple[ProductDraft, ...] = (
    ProductDraft("3", "3", "Teclado", "Electrónica", "1200", "20"),
    ProductDraft("4", "4", "Mouse", "Electrónica", "800", "35"),
    ProductDraft("5", "5", "Monitor", "Electrónica", "4500", "10"),
    ProductDraft("6", "6", "Impresora", "Electrónica", "3000", "5"),
    ProductDraft("7", "7", "Auriculares", "Electrónica", "1500", "25"),
    ProductDraft("8", "8", "Cámara Web", "Electrónica", "2000", "15"),
    ProductDraft("9", "9", "Disco Duro Externo", "Electrónica", "3500", "12"),
    ProductDraft("10", "10", "Memoria USB", "Electrónica", "500", "50"),
    ProductDraft("11", "11", "Sudadera", "Ropa", "300", "15"),
)
