"""
Schemas Pydantic para validación
"""
from .vendedor import (
    Link,
    VendedorCreate,
    VendedorResponse,
    VendedorRoot,
    MensajeResponse,
    EliminacionResponse,
    ErrorResponse,
    HealthResponse
)

__all__ = [
    "Link",
    "VendedorCreate",
    "VendedorResponse",
    "VendedorRoot",
    "MensajeResponse",
    "EliminacionResponse",
    "ErrorResponse",
    "HealthResponse"
]
