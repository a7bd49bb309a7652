"""
Repositorios de acceso a datos
"""
from .vendedor_repository import VendedorRepository, VendedorStore

__all__ = [
    "VendedorRepository",
    "VendedorStore"
]
