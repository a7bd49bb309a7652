"""
Tests del servicio de Vendedores con un repositorio simulado
"""
from unittest.mock import MagicMock

import pytest

from vendedores.models import Vendedor
from vendedores.schemas import VendedorCreate
from vendedores.services import (
    VendedorService,
    VendedorNoEncontradoError,
    TipoFallo
)


@pytest.fixture
def repository():
    return MagicMock()


@pytest.fixture
def service(repository):
    return VendedorService(repository)


@pytest.fixture
def vendedor_data():
    return VendedorCreate(branchName="Sucursal Central", monthlyTarget=1000000.0)


@pytest.fixture
def vendedor_entity():
    return Vendedor(id=1, sucursal="Sucursal Central", meta_mensual=1000000.0)


# ============================================================================
# CREAR
# ============================================================================

def test_crear_vendedor_exitoso(service, repository, vendedor_data, vendedor_entity):
    """Crear vendedor guarda una sola vez y reporta éxito"""
    repository.save.return_value = vendedor_entity

    resultado = service.crear_vendedor(vendedor_data)

    assert resultado.exito is True
    assert resultado.mensaje == "Vendedor creado con éxito"
    repository.save.assert_called_once()


def test_crear_vendedor_sin_id(service, repository, vendedor_data, vendedor_entity):
    """El registro enviado al repositorio no lleva id"""
    repository.save.return_value = vendedor_entity

    service.crear_vendedor(vendedor_data)

    guardado = repository.save.call_args.args[0]
    assert isinstance(guardado, Vendedor)
    assert guardado.id is None
    assert guardado.sucursal == "Sucursal Central"
    assert guardado.meta_mensual == 1000000.0


def test_crear_vendedor_con_error(service, repository, vendedor_data):
    """Un fallo del repositorio se reporta en el mensaje, no se lanza"""
    repository.save.side_effect = RuntimeError("Error de base de datos")

    resultado = service.crear_vendedor(vendedor_data)

    assert resultado.mensaje == "Error al crear Vendedor: Error de base de datos"
    assert resultado.mensaje.startswith("Error")
    assert resultado.exito is False
    assert resultado.tipo_fallo == TipoFallo.ERROR_ALMACEN


# ============================================================================
# BUSCAR
# ============================================================================

def test_buscar_vendedor_por_id_exitoso(service, repository, vendedor_entity):
    """Devuelve el registro tal como lo entrega el repositorio"""
    repository.find_by_id.return_value = vendedor_entity

    resultado = service.buscar_vendedor_por_id(1)

    assert resultado is vendedor_entity
    assert resultado.id == 1
    assert resultado.sucursal == "Sucursal Central"
    assert resultado.meta_mensual == 1000000.0
    repository.find_by_id.assert_called_once_with(1)


def test_buscar_vendedor_inexistente(service, repository):
    repository.find_by_id.return_value = None

    with pytest.raises(VendedorNoEncontradoError) as exc_info:
        service.buscar_vendedor_por_id(42)

    assert exc_info.value.vendedor_id == 42


# ============================================================================
# ELIMINAR
# ============================================================================

def test_eliminar_vendedor_exitoso(service, repository):
    repository.exists_by_id.return_value = True

    resultado = service.eliminar_vendedor_por_id(1)

    assert resultado.exito is True
    assert resultado.mensaje == "Cliente eliminado correctamente"
    repository.delete_by_id.assert_called_once_with(1)


def test_eliminar_vendedor_no_existe(service, repository):
    """Si no existe, no se invoca la eliminación"""
    repository.exists_by_id.return_value = False

    resultado = service.eliminar_vendedor_por_id(1)

    assert resultado.mensaje == "No existe un cliente con el Id proporcionado"
    assert resultado.tipo_fallo == TipoFallo.NO_ENCONTRADO
    repository.delete_by_id.assert_not_called()


def test_eliminar_vendedor_con_error(service, repository):
    repository.exists_by_id.return_value = True
    repository.delete_by_id.side_effect = RuntimeError("Error de base de datos")

    resultado = service.eliminar_vendedor_por_id(1)

    assert resultado.mensaje == "Error al eliminar cliente: Error de base de datos"
    assert resultado.exito is False
    assert resultado.tipo_fallo == TipoFallo.ERROR_ALMACEN
