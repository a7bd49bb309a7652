"""
Lógica de negocio de Vendedores

Traduce los datos de entrada a registros persistidos y convierte los
resultados del almacenamiento en mensajes para el cliente. Los fallos
conocidos (error al guardar, vendedor inexistente al eliminar) se
reportan en un ResultadoOperacion; solo la búsqueda por id lanza una
excepción cuando el vendedor no existe.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

from ..models import Vendedor
from ..repositories import VendedorStore
from ..schemas import VendedorCreate

logger = logging.getLogger(__name__)

MENSAJE_CREADO = "Vendedor creado con éxito"
PREFIJO_ERROR_CREAR = "Error al crear Vendedor: "
MENSAJE_NO_EXISTE = "No existe un cliente con el Id proporcionado"
MENSAJE_ELIMINADO = "Cliente eliminado correctamente"
PREFIJO_ERROR_ELIMINAR = "Error al eliminar cliente: "


class TipoFallo(str, Enum):
    """Tipos de fallo reportados por el servicio"""
    NO_ENCONTRADO = "no_encontrado"
    ERROR_ALMACEN = "error_almacen"


@dataclass(frozen=True)
class ResultadoOperacion:
    """Resultado de una operación del servicio"""
    exito: bool
    mensaje: str
    tipo_fallo: Optional[TipoFallo] = None

    @classmethod
    def ok(cls, mensaje: str) -> "ResultadoOperacion":
        return cls(exito=True, mensaje=mensaje)

    @classmethod
    def fallo(cls, mensaje: str, tipo_fallo: TipoFallo) -> "ResultadoOperacion":
        return cls(exito=False, mensaje=mensaje, tipo_fallo=tipo_fallo)


class VendedorNoEncontradoError(Exception):
    """No existe un vendedor con el id solicitado"""

    def __init__(self, vendedor_id: int):
        self.vendedor_id = vendedor_id
        super().__init__(f"Vendedor no encontrado con ID: {vendedor_id}")


class VendedorService:
    def __init__(self, repository: VendedorStore):
        self.repository = repository

    def crear_vendedor(self, datos: VendedorCreate) -> ResultadoOperacion:
        """Crear vendedor; el id lo asigna el almacenamiento"""
        vendedor = Vendedor(
            sucursal=datos.branch_name,
            meta_mensual=datos.monthly_target
        )
        try:
            guardado = self.repository.save(vendedor)
        except Exception as e:
            logger.error(f"Error al crear vendedor: {e}")
            return ResultadoOperacion.fallo(f"{PREFIJO_ERROR_CREAR}{e}", TipoFallo.ERROR_ALMACEN)

        logger.info(f"Vendedor creado con id {getattr(guardado, 'id', None)}")
        return ResultadoOperacion.ok(MENSAJE_CREADO)

    def buscar_vendedor_por_id(self, vendedor_id: int) -> Vendedor:
        """
        Buscar vendedor por id

        Raises:
            VendedorNoEncontradoError: Si no existe
        """
        vendedor = self.repository.find_by_id(vendedor_id)
        if vendedor is None:
            raise VendedorNoEncontradoError(vendedor_id)
        return vendedor

    def eliminar_vendedor_por_id(self, vendedor_id: int) -> ResultadoOperacion:
        """Eliminar vendedor verificando antes que exista"""
        if not self.repository.exists_by_id(vendedor_id):
            logger.warning(f"Eliminación solicitada para vendedor inexistente: {vendedor_id}")
            return ResultadoOperacion.fallo(MENSAJE_NO_EXISTE, TipoFallo.NO_ENCONTRADO)

        try:
            self.repository.delete_by_id(vendedor_id)
        except Exception as e:
            logger.error(f"Error al eliminar vendedor {vendedor_id}: {e}")
            return ResultadoOperacion.fallo(f"{PREFIJO_ERROR_ELIMINAR}{e}", TipoFallo.ERROR_ALMACEN)

        logger.info(f"Vendedor {vendedor_id} eliminado")
        return ResultadoOperacion.ok(MENSAJE_ELIMINADO)
