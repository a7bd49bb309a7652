"""
Schemas de Vendedor
"""
from pydantic import BaseModel, Field
from typing import Dict, Optional


class Link(BaseModel):
    """Enlace de navegación hacia una operación disponible"""
    href: str = Field(..., description="URL absoluta de la operación")
    method: str = Field("GET", description="Método HTTP de la operación")


class VendedorCreate(BaseModel):
    """Schema para crear vendedor (sin id, lo asigna la base de datos)"""
    # Opcionales: la única validación es la que impone la base de datos
    branch_name: Optional[str] = Field(None, alias="branchName", description="Nombre de la sucursal")
    monthly_target: Optional[float] = Field(None, alias="monthlyTarget", description="Meta mensual de ventas")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "branchName": "Sucursal Central",
                "monthlyTarget": 1000000.0
            }
        }


class VendedorResponse(BaseModel):
    """Schema para respuesta de vendedor"""
    id: int = Field(..., description="ID del vendedor")
    branch_name: str = Field(..., alias="branchName", description="Nombre de la sucursal")
    monthly_target: float = Field(..., alias="monthlyTarget", description="Meta mensual de ventas")
    links: Optional[Dict[str, Link]] = Field(None, alias="_links")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "branchName": "Sucursal Central",
                "monthlyTarget": 1000000.0,
                "_links": {
                    "self": {"href": "http://localhost:8000/api/v1/vendedor/buscarVendedor/1", "method": "GET"}
                }
            }
        }

    @classmethod
    def from_model(cls, vendedor, links: Optional[Dict[str, Link]] = None) -> "VendedorResponse":
        return cls(
            id=vendedor.id,
            branch_name=vendedor.sucursal,
            monthly_target=vendedor.meta_mensual,
            links=links
        )


class VendedorRoot(BaseModel):
    """Schema del endpoint raíz con los enlaces a todas las operaciones"""
    message: str
    version: str
    links: Dict[str, Link] = Field(..., alias="_links")

    class Config:
        populate_by_name = True


class MensajeResponse(BaseModel):
    """Schema para respuesta de creación exitosa"""
    message: str
    timestamp: int = Field(..., description="Epoch en milisegundos")
    links: Dict[str, Link] = Field(..., alias="_links")

    class Config:
        populate_by_name = True


class EliminacionResponse(BaseModel):
    """Schema para respuesta de eliminación"""
    message: str
    id_vendedor: int = Field(..., alias="idVendedor")
    timestamp: int = Field(..., description="Epoch en milisegundos")
    links: Dict[str, Link] = Field(..., alias="_links")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Schema de error visible al cliente"""
    error: str
    message: str
    timestamp: int = Field(..., description="Epoch en milisegundos")
    links: Optional[Dict[str, Link]] = Field(None, alias="_links")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "error": "Recurso no encontrado",
                "message": "No se encontró el vendedor con ID: 99",
                "timestamp": 1760000000000
            }
        }


class HealthResponse(BaseModel):
    """Schema para health check"""
    status: str = Field(..., description="Estado del servicio")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión del servicio")
    database: str = Field(..., description="Estado de la base de datos")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "service": "MS-VENDEDORES",
                "version": "1.0.0",
                "database": "connected"
            }
        }
