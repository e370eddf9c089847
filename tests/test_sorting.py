"""Tests para algoritmos de ordenamiento."""

from __future__ import annotations

import random
import sys
import unittest
from decimal import Decimal

from servidor.domain.models import Producto
from servidor.services.sorting import (
    merge_sort_by_name,
    quick_sort_by_id,
    quick_sort_by_price,
    sort_products,
)
from shared.errors import ValidationError


class QuickSortTests(unittest.TestCase):
    """Valida quicksort por ID y por precio."""

    def test_quick_sort_by_id_orders_and_is_permutation(self) -> None:
        """Debe ordenar por ID ascendente conservando los mismos elementos."""
        rng = random.Random(7)
        ids = list(range(1, 60))
        rng.shuffle(ids)
        productos = [_build_producto(id=value, codigo_barras=str(value)) for value in ids]

        ordenados = quick_sort_by_id(productos)

        self.assertEqual([p.id for p in ordenados], sorted(ids))
        self.assertEqual({id(p) for p in ordenados}, {id(p) for p in productos})
        self.assertEqual(len(ordenados), len(productos))

    def test_quick_sort_does_not_mutate_input(self) -> None:
        """Debe retornar una lista nueva sin reordenar la original."""
        productos = [_build_producto(id=value, codigo_barras=str(value)) for value in (3, 1, 2)]
        original = list(productos)

        ordenados = quick_sort_by_id(productos)

        self.assertEqual(productos, original)
        self.assertIsNot(ordenados, productos)

    def test_quick_sort_tie_order_follows_partition_scan(self) -> None:
        """Empates van a la derecha del pivote en el orden del recorrido."""
        a = _build_producto(id=2, codigo_barras="a")
        b = _build_producto(id=1, codigo_barras="b")
        c = _build_producto(id=2, codigo_barras="c")
        d = _build_producto(id=2, codigo_barras="d")

        ordenados = quick_sort_by_id([a, b, c, d])

        self.assertEqual([p.codigo_barras for p in ordenados], ["b", "d", "c", "a"])

    def test_quick_sort_by_price_uses_decimal_prices(self) -> None:
        """Debe ordenar por precio ascendente usando Decimal."""
        precios = ["1200", "800", "4500", "0.10", "0.09", "3000"]
        productos = [
            _build_producto(id=index, codigo_barras=str(index), precio=Decimal(precio))
            for index, precio in enumerate(precios)
        ]

        ordenados = quick_sort_by_price(productos)

        self.assertEqual(
            [p.precio for p in ordenados],
            sorted(Decimal(precio) for precio in precios),
        )

    def test_empty_and_single_element_inputs(self) -> None:
        """Entradas vacias o de un elemento se retornan tal cual."""
        unico = _build_producto()
        for sorter in (quick_sort_by_id, quick_sort_by_price, merge_sort_by_name):
            with self.subTest(sorter=sorter.__name__):
                self.assertEqual(sorter([]), [])
                resultado = sorter([unico])
                self.assertEqual(len(resultado), 1)
                self.assertIs(resultado[0], unico)

    def test_descending_input_larger_than_recursion_limit(self) -> None:
        """El peor caso no debe agotar el limite de recursion."""
        size = sys.getrecursionlimit() + 200
        productos = [
            _build_producto(id=value, codigo_barras=str(value))
            for value in range(size, 0, -1)
        ]

        ordenados = quick_sort_by_id(productos)

        self.assertEqual([p.id for p in ordenados], list(range(1, size + 1)))


class MergeSortTests(unittest.TestCase):
    """Valida merge sort por nombre."""

    def test_merge_sort_by_name_is_case_insensitive(self) -> None:
        """Debe ordenar por nombre sin distinguir mayusculas."""
        nombres = ["teclado", "Mouse", "auriculares", "Monitor", "Cámara Web"]
        productos = [
            _build_producto(id=index, codigo_barras=str(index), nombre=nombre)
            for index, nombre in enumerate(nombres)
        ]

        ordenados = merge_sort_by_name(productos)

        self.assertEqual(
            [p.nombre for p in ordenados],
            ["auriculares", "Cámara Web", "Monitor", "Mouse", "teclado"],
        )

    def test_merge_sort_is_stable(self) -> None:
        """Nombres iguales (ignorando mayusculas) conservan su orden relativo."""
        nombres = ["b", "A", "a", "B", "c", "a"]
        productos = [
            _build_producto(id=index, codigo_barras=str(index), nombre=nombre)
            for index, nombre in enumerate(nombres)
        ]

        ordenados = merge_sort_by_name(productos)

        self.assertEqual([p.id for p in ordenados], [1, 2, 5, 0, 3, 4])

    def test_merge_sort_random_inputs_match_stable_sorted(self) -> None:
        """Debe coincidir con sorted() estable usando casefold."""
        rng = random.Random(11)
        for size in range(0, 40):
            productos = [
                _build_producto(
                    id=index,
                    codigo_barras=str(index),
                    nombre=rng.choice(["Mouse", "mouse", "Monitor", "Teclado", "sudadera"]),
                )
                for index in range(size)
            ]
            with self.subTest(size=size):
                expected = sorted(productos, key=lambda p: p.nombre.casefold())
                self.assertEqual(
                    [id(p) for p in merge_sort_by_name(productos)],
                    [id(p) for p in expected],
                )


class SortProductsTests(unittest.TestCase):
    """Valida el despacho por criterio."""

    def test_sort_products_dispatches_by_criterion(self) -> None:
        """Debe aceptar ID, Precio y Nombre sin distinguir mayusculas."""
        productos = [
            _build_producto(id=2, codigo_barras="2", nombre="b", precio=Decimal("1")),
            _build_producto(id=1, codigo_barras="1", nombre="c", precio=Decimal("3")),
            _build_producto(id=3, codigo_barras="3", nombre="a", precio=Decimal("2")),
        ]

        self.assertEqual([p.id for p in sort_products(productos, "ID")], [1, 2, 3])
        self.assertEqual([p.id for p in sort_products(productos, "precio")], [2, 3, 1])
        self.assertEqual([p.id for p in sort_products(productos, " NOMBRE ")], [3, 2, 1])

    def test_sort_products_rejects_unknown_criterion(self) -> None:
        """Debe lanzar ValidationError para criterios no soportados."""
        with self.assertRaises(ValidationError):
            sort_products([], "Stock")


def _build_producto(
    *,
    id: int = 1,
    codigo_barras: str = "1",
    nombre: str = "Producto",
    precio: Decimal = Decimal("100"),
) -> Producto:
    return Producto(
        id=id,
        nombre=nombre,
        codigo_barras=codigo_barras,
        categoria="General",
        precio=precio,
        stock=1,
    )


if __name__ == "__main__":
    unittest.main()
