"""Punto de entrada de consola del gestor de productos."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from cliente.backend.product_details_formatter import (
    format_inventory_summary,
    format_product_line,
    format_product_list,
    format_search_result,
)
from cliente.backend.sample_data import SAMPLE_PRODUCTS
from parametros import APP_NAME, DEFAULT_SORT_CRITERION, LOG_FORMAT
from servidor.services.inventory_store import InventoryStore
from shared.criteria import CRITERIO_ID, CRITERIO_NOMBRE, SORT_CRITERIA
from shared.errors import ServiceError, ValidationError
from shared.protocol import ProductDraft

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI para consultar, ordenar y buscar productos."""
    parser = argparse.ArgumentParser(
        prog="sortech",
        description=f"Gestor de productos {APP_NAME}: inventario, ordenamiento y búsqueda.",
    )
    parser.add_argument(
        "--agregar",
        nargs=6,
        metavar=("ID", "CODIGO", "NOMBRE", "CATEGORIA", "PRECIO", "STOCK"),
        help="Agrega un producto antes de ejecutar las consultas.",
    )
    parser.add_argument(
        "--eliminar",
        metavar="CODIGO",
        help="Elimina el producto con el codigo de barras indicado.",
    )
    parser.add_argument(
        "--codigo",
        metavar="CODIGO",
        help="Muestra el producto con el codigo de barras indicado.",
    )
    parser.add_argument(
        "--listar",
        action="store_true",
        help="Muestra el inventario en orden de insercion y su resumen.",
    )
    parser.add_argument(
        "--categoria",
        help="Muestra solo los productos de la categoria indicada.",
    )
    parser.add_argument(
        "--ordenar",
        nargs="?",
        const=DEFAULT_SORT_CRITERION,
        choices=SORT_CRITERIA,
        help="Muestra el inventario ordenado por ID, Precio o Nombre.",
    )
    search_group = parser.add_mutually_exclusive_group()
    search_group.add_argument(
        "--buscar-id",
        help="Busqueda binaria por ID sobre una copia ordenada por ID.",
    )
    search_group.add_argument(
        "--buscar-nombre",
        help="Busqueda secuencial por nombre exacto (sin distinguir mayusculas).",
    )
    parser.add_argument(
        "--sin-datos-ejemplo",
        action="store_true",
        help="Inicia con el inventario vacio.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Muestra logs de depuracion, incluido el costo de cada algoritmo.",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    """Configura logging para salida en consola."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def build_controller(load_samples: bool = True) -> AppController:
    """Construye el controlador con un inventario nuevo."""
    controller = AppController(gateway=LocalServerGateway(InventoryStore()))
    if load_samples:
        controller.load_products(SAMPLE_PRODUCTS)
    return controller


def run(controller: AppController, args: argparse.Namespace) -> int:
    """Ejecuta las acciones pedidas y retorna el codigo de salida."""
    try:
        if args.agregar is not None:
            producto = controller.on_add_product(ProductDraft(*args.agregar))
            print(f"Producto agregado correctamente: {format_product_line(producto)}")

        if args.eliminar is not None:
            if controller.on_remove_product(args.eliminar):
                print("Producto eliminado correctamente")
            else:
                print(f"No existe un producto con código '{args.eliminar.strip()}'.")

        if args.codigo is not None:
            producto = controller.on_find_product(args.codigo)
            if producto is None:
                print(f"No existe un producto con código '{args.codigo.strip()}'.")
            else:
                print(format_product_line(producto))

        if args.listar:
            print(format_product_list(controller.list_products()))
            print(format_inventory_summary(controller.inventory_summary()))

        if args.categoria is not None:
            print(
                format_product_list(
                    controller.on_filter_category(args.categoria),
                    empty_message=f"No hay productos en la categoría '{args.categoria}'.",
                )
            )

        if args.ordenar is not None:
            print(format_product_list(controller.on_sort(args.ordenar)))

        if args.buscar_id is not None:
            print(format_search_result(controller.on_search(CRITERIO_ID, args.buscar_id)))
        elif args.buscar_nombre is not None:
            print(format_search_result(controller.on_search(CRITERIO_NOMBRE, args.buscar_nombre)))
    except ValidationError as exc:
        LOGGER.warning("Entrada invalida: %s", exc)
        return 2
    except ServiceError as exc:
        LOGGER.error("Error de servicio: %s", exc)
        return 1

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Punto de entrada CLI."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        controller = build_controller(load_samples=not args.sin_datos_ejemplo)
    except (ValidationError, ServiceError):
        LOGGER.exception("Error al cargar datos iniciales.")
        return 1

    LOGGER.info("Aplicacion iniciada.")
    return run(controller, args)


if __name__ == "__main__":
    raise SystemExit(main())
