"""
Servicios de negocio
"""
from .vendedor_service import (
    VendedorService,
    ResultadoOperacion,
    TipoFallo,
    VendedorNoEncontradoError
)

__all__ = [
    "VendedorService",
    "ResultadoOperacion",
    "TipoFallo",
    "VendedorNoEncontradoError"
]
