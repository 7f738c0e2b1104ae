# app/modules/products/repository.py
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import store_errors, transaction
from app.shared.database.models import Product

class ProductsRepository:
    def __init__(self, db: Session):
        self.db = db
    
    def list_products(self) -> List[Product]:
        with store_errors(self.db, "listando productos"):
            return self.db.query(Product).order_by(Product.id).all()
    
    def get_product(self, product_id: int) -> Optional[Product]:
        with store_errors(self.db, "consultando producto"):
            return self.db.get(Product, product_id)
    
    def create_product(self, product_data: Dict[str, Any]) -> Product:
        """Crear nuevo producto"""
        with store_errors(self.db, "creando producto"):
            with transaction(self.db):
                product = Product(
                    name=product_data['name'],
                    price=product_data['price'],
                    stock=product_data['stock']
                )
                self.db.add(product)
            self.db.refresh(product)
            return product
    
    def update_product(self, product: Product, changes: Dict[str, Any]) -> Product:
        """Reemplazar los campos recibidos"""
        with store_errors(self.db, "actualizando producto"):
            with transaction(self.db):
                for field, value in changes.items():
                    setattr(product, field, value)
            self.db.refresh(product)
            return product
    
    def delete_product(self, product: Product) -> None:
        # Falla por llave foránea si el producto aparece en alguna venta
        with store_errors(self.db, "eliminando producto"):
            with transaction(self.db):
                self.db.delete(product)
