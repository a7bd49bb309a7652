"""
Router de Vendedores

Cada respuesta incluye en _links las operaciones disponibles a continuación.
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session
import logging

from ..config import settings
from ..models import get_db
from ..repositories import VendedorRepository
from ..schemas import (
    VendedorCreate, VendedorResponse, VendedorRoot,
    MensajeResponse, EliminacionResponse, ErrorResponse
)
from ..services import VendedorService, TipoFallo
from ..utils import links

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_SOLICITUD = "Solicitud inválida"
ERROR_INTERNO = "Error interno del servidor"
ERROR_NO_ENCONTRADO = "Recurso no encontrado"


def get_vendedor_service(db: Session = Depends(get_db)) -> VendedorService:
    """Construye el servicio con su repositorio para la petición actual"""
    return VendedorService(VendedorRepository(db))


def _respuesta(status_code: int, cuerpo: BaseModel) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=cuerpo.model_dump(by_alias=True, exclude_none=True)
    )


def _error(status_code: int, error: str, message: str, enlaces=None) -> JSONResponse:
    return _respuesta(status_code, ErrorResponse(
        error=error,
        message=message,
        timestamp=links.timestamp_ms(),
        links=enlaces
    ))


@router.get("/", response_model=VendedorRoot, name=links.ROOT)
async def root_vendedor(request: Request):
    """Endpoint raíz: enlaces a todas las operaciones disponibles"""
    root = VendedorRoot(
        message=settings.ROOT_MESSAGE,
        version=settings.ROOT_VERSION,
        links=links.links_root(request)
    )
    return _respuesta(status.HTTP_200_OK, root)


@router.post(
    "/crear",
    response_model=MensajeResponse,
    status_code=status.HTTP_201_CREATED,
    name=links.CREAR,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def crear_vendedor(
    request: Request,
    vendedor: VendedorCreate,
    service: VendedorService = Depends(get_vendedor_service)
):
    """Crear un nuevo vendedor"""
    try:
        resultado = service.crear_vendedor(vendedor)

        if not resultado.exito:
            return _error(
                status.HTTP_400_BAD_REQUEST,
                ERROR_SOLICITUD,
                resultado.mensaje,
                links.links_error_crear(request)
            )

        return _respuesta(status.HTTP_201_CREATED, MensajeResponse(
            message=resultado.mensaje,
            timestamp=links.timestamp_ms(),
            links=links.links_crear(request)
        ))

    except Exception as e:
        logger.exception("Error inesperado al crear vendedor")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_INTERNO, str(e))


@router.get(
    "/buscarVendedor/{vendedor_id}",
    response_model=VendedorResponse,
    name=links.BUSCAR,
    responses={404: {"model": ErrorResponse}}
)
async def buscar_vendedor(
    request: Request,
    vendedor_id: int,
    service: VendedorService = Depends(get_vendedor_service)
):
    """Buscar vendedor por ID"""
    try:
        vendedor = service.buscar_vendedor_por_id(vendedor_id)
        cuerpo = VendedorResponse.from_model(vendedor, links.links_vendedor(request, vendedor_id))
        return _respuesta(status.HTTP_200_OK, cuerpo)

    except Exception as e:
        logger.warning(f"No se pudo obtener el vendedor {vendedor_id}: {e}")
        return _error(
            status.HTTP_404_NOT_FOUND,
            ERROR_NO_ENCONTRADO,
            f"No se encontró el vendedor con ID: {vendedor_id}"
        )


@router.delete(
    "/eliminarVendedorPorId/{vendedor_id}",
    response_model=EliminacionResponse,
    name=links.ELIMINAR,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def eliminar_vendedor(
    request: Request,
    vendedor_id: int,
    service: VendedorService = Depends(get_vendedor_service)
):
    """Eliminar vendedor por ID"""
    try:
        resultado = service.eliminar_vendedor_por_id(vendedor_id)

        if resultado.tipo_fallo == TipoFallo.NO_ENCONTRADO:
            return _error(status.HTTP_404_NOT_FOUND, ERROR_NO_ENCONTRADO, resultado.mensaje)

        # Un error del almacenamiento también se responde con 200, como texto en message
        return _respuesta(status.HTTP_200_OK, EliminacionResponse(
            message=resultado.mensaje,
            id_vendedor=vendedor_id,
            timestamp=links.timestamp_ms(),
            links=links.links_eliminar(request)
        ))

    except Exception as e:
        logger.exception(f"Error inesperado al eliminar vendedor {vendedor_id}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_INTERNO, str(e))
