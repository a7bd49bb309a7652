"""
Tests del repositorio de Vendedores sobre SQLite en memoria
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from vendedores.models import Base, Vendedor
from vendedores.repositories import VendedorRepository


@pytest.fixture
def db():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repository(db):
    return VendedorRepository(db)


def test_save_asigna_id(repository):
    """Insertar sin id: la base de datos asigna uno"""
    vendedor = repository.save(Vendedor(sucursal="Sucursal Central", meta_mensual=1000000.0))

    assert vendedor.id is not None
    assert repository.exists_by_id(vendedor.id)


def test_save_ids_unicos(repository):
    primero = repository.save(Vendedor(sucursal="Norte", meta_mensual=10.0))
    segundo = repository.save(Vendedor(sucursal="Sur", meta_mensual=20.0))

    assert primero.id != segundo.id


def test_save_sobrescribe_con_id(repository):
    vendedor = repository.save(Vendedor(sucursal="Norte", meta_mensual=10.0))

    repository.save(Vendedor(id=vendedor.id, sucursal="Norte", meta_mensual=99.0))

    assert repository.find_by_id(vendedor.id).meta_mensual == 99.0


def test_save_campo_nulo_falla_y_revierte(repository):
    """La base de datos rechaza campos nulos y la sesión queda utilizable"""
    with pytest.raises(IntegrityError):
        repository.save(Vendedor(sucursal=None, meta_mensual=10.0))

    vendedor = repository.save(Vendedor(sucursal="Centro", meta_mensual=10.0))
    assert vendedor.id is not None


def test_find_by_id_inexistente(repository):
    assert repository.find_by_id(999) is None
    assert repository.exists_by_id(999) is False


def test_delete_by_id(repository):
    vendedor = repository.save(Vendedor(sucursal="Centro", meta_mensual=10.0))

    repository.delete_by_id(vendedor.id)

    assert repository.exists_by_id(vendedor.id) is False


def test_delete_by_id_inexistente_no_falla(repository):
    repository.delete_by_id(999)
