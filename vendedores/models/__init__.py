"""
Modelos de la base de datos
"""
from .database import Base, SessionLocal, get_db, engine
from .vendedor import Vendedor

__all__ = [
    "Base",
    "SessionLocal",
    "get_db",
    "engine",
    "Vendedor",
]
