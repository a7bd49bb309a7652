"""
Routers de la API
"""
from .vendedores import router as vendedores_router, get_vendedor_service

__all__ = [
    "vendedores_router",
    "get_vendedor_service"
]
