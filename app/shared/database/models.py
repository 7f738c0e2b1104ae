# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Numeric, ForeignKey,
    CheckConstraint, func
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# CATÁLOGO
# =====================================================

class Product(Base, TimestampMixin):
    """Modelo de Producto"""
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)
    
    __table_args__ = (
        CheckConstraint('price >= 0', name='products_price_non_negative'),
        CheckConstraint('stock >= 0', name='products_stock_non_negative'),
    )
    
    # Relationships
    sale_items = relationship("SaleItem", back_populates="product", passive_deletes="all")


class Customer(Base, TimestampMixin):
    """Modelo de Cliente"""
    __tablename__ = "customers"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    
    # Relationships
    sales = relationship("Sale", back_populates="customer", passive_deletes="all")


# =====================================================
# VENTAS
# =====================================================

class Sale(Base):
    """Modelo de Venta (agregado: venta + items)"""
    __tablename__ = "sales"
    
    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    # Derivado: siempre la suma de los subtotales de los items
    total = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp(), onupdate=func.current_timestamp())
    
    # Relationships
    customer = relationship("Customer", back_populates="sales")
    # Los items solo se escriben por SalesRepository (borrado masivo + reinserción)
    items = relationship("SaleItem", back_populates="sale", order_by="SaleItem.position")


class SaleItem(Base):
    """Modelo de Item de Venta"""
    __tablename__ = "sale_items"
    
    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    
    # Relationships
    sale = relationship("Sale", back_populates="items")
    product = relationship("Product", back_populates="sale_items")
