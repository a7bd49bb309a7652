"""
Modelo de Vendedor
"""
from sqlalchemy import Column, Integer, String, Float
from .database import Base


class Vendedor(Base):
    """Modelo de Vendedor - Sucursal con su meta mensual de ventas"""

    __tablename__ = "vendedores"

    # El id lo asigna la base de datos al insertar
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    sucursal = Column(String(255), nullable=False)
    meta_mensual = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Vendedor(id={self.id}, sucursal={self.sucursal}, meta_mensual={self.meta_mensual})>"
