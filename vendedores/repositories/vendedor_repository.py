"""
Acceso a datos de Vendedores
"""
from typing import Optional, Protocol
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Vendedor

logger = logging.getLogger(__name__)


class VendedorStore(Protocol):
    """Operaciones primitivas que el servicio necesita del almacenamiento"""

    def save(self, vendedor: Vendedor) -> Vendedor: ...

    def find_by_id(self, vendedor_id: int) -> Optional[Vendedor]: ...

    def exists_by_id(self, vendedor_id: int) -> bool: ...

    def delete_by_id(self, vendedor_id: int) -> None: ...


class VendedorRepository:
    """Implementación de VendedorStore sobre una sesión de SQLAlchemy"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, vendedor: Vendedor) -> Vendedor:
        """Insertar si no tiene id, sobrescribir si ya lo tiene"""
        try:
            if vendedor.id is None:
                self.db.add(vendedor)
            else:
                vendedor = self.db.merge(vendedor)
            self.db.commit()
            self.db.refresh(vendedor)
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.debug(f"Vendedor guardado: {vendedor}")
        return vendedor

    def find_by_id(self, vendedor_id: int) -> Optional[Vendedor]:
        return self.db.get(Vendedor, vendedor_id)

    def exists_by_id(self, vendedor_id: int) -> bool:
        return self.db.query(Vendedor.id).filter(Vendedor.id == vendedor_id).first() is not None

    def delete_by_id(self, vendedor_id: int) -> None:
        """Eliminar vendedor; si no existe no hace nada"""
        vendedor = self.db.get(Vendedor, vendedor_id)
        if vendedor is None:
            return
        try:
            self.db.delete(vendedor)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
