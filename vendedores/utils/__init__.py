"""
Utilidades del microservicio
"""
from .logging_config import setup_logging
from .middleware import setup_middleware
from . import links

__all__ = [
    "setup_logging",
    "setup_middleware",
    "links"
]
