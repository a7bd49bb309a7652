"""
Enlaces de navegación (_links) y marcas de tiempo de las respuestas
"""
import time
from typing import Dict

from fastapi import Request

from ..schemas import Link

# Nombres de los endpoints en routers/vendedores.py
ROOT = "root_vendedor"
CREAR = "crear_vendedor"
BUSCAR = "buscar_vendedor"
ELIMINAR = "eliminar_vendedor"

PLANTILLA_ID = "{idVendedor}"


def timestamp_ms() -> int:
    """Epoch actual en milisegundos"""
    return int(time.time() * 1000)


def link_root(request: Request) -> Link:
    return Link(href=str(request.url_for(ROOT)), method="GET")


def link_crear(request: Request) -> Link:
    return Link(href=str(request.url_for(CREAR)), method="POST")


def link_buscar(request: Request, vendedor_id=PLANTILLA_ID) -> Link:
    return Link(href=str(request.url_for(BUSCAR, vendedor_id=vendedor_id)), method="GET")


def link_eliminar(request: Request, vendedor_id=PLANTILLA_ID) -> Link:
    return Link(href=str(request.url_for(ELIMINAR, vendedor_id=vendedor_id)), method="DELETE")


def links_root(request: Request) -> Dict[str, Link]:
    """Enlaces del endpoint raíz, con el id como plantilla"""
    return {
        "self": link_root(request),
        "crear-vendedor": link_crear(request),
        "buscar-vendedor": link_buscar(request),
        "eliminar-vendedor": link_eliminar(request),
    }


def links_crear(request: Request) -> Dict[str, Link]:
    return {
        "index": link_root(request),
        "self": link_crear(request),
    }


def links_error_crear(request: Request) -> Dict[str, Link]:
    return {
        "index": link_root(request),
        "crear-vendedor": link_crear(request),
    }


def links_vendedor(request: Request, vendedor_id: int) -> Dict[str, Link]:
    return {
        "self": link_buscar(request, vendedor_id),
        "index": link_root(request),
        "crear-nuevo": link_crear(request),
        "eliminar": link_eliminar(request, vendedor_id),
    }


def links_eliminar(request: Request) -> Dict[str, Link]:
    return {
        "index": link_root(request),
        "crear-nuevo": link_crear(request),
    }
