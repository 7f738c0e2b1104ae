# app/modules/products/service.py
from sqlalchemy.orm import Session
import logging

from app.core.exceptions import ProductNotFound
from app.shared.database.models import Product
from .repository import ProductsRepository
from .schemas import (
    ProductCreateRequest, ProductUpdateRequest,
    ProductOut, ProductResponse, ProductListResponse
)

logger = logging.getLogger(__name__)

class ProductsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductsRepository(db)
    
    def list_products(self) -> ProductListResponse:
        products = self.repository.list_products()
        return ProductListResponse(
            success=True,
            message="Productos disponibles",
            data=[ProductOut.model_validate(p) for p in products],
            count=len(products)
        )
    
    def get_product(self, product_id: int) -> ProductResponse:
        product = self._get_existing(product_id)
        return ProductResponse(success=True, data=ProductOut.model_validate(product))
    
    def create_product(self, product_data: ProductCreateRequest) -> ProductResponse:
        product = self.repository.create_product(product_data.model_dump())
        logger.info(f"Producto #{product.id} creado")
        return ProductResponse(
            success=True,
            message="Producto creado exitosamente",
            data=ProductOut.model_validate(product)
        )
    
    def update_product(self, product_id: int, product_data: ProductUpdateRequest) -> ProductResponse:
        product = self._get_existing(product_id)
        changes = product_data.model_dump(exclude_unset=True, exclude_none=True)
        product = self.repository.update_product(product, changes)
        logger.info(f"Producto #{product_id} actualizado: {sorted(changes)}")
        return ProductResponse(
            success=True,
            message="Producto actualizado exitosamente",
            data=ProductOut.model_validate(product)
        )
    
    def delete_product(self, product_id: int) -> None:
        product = self._get_existing(product_id)
        self.repository.delete_product(product)
        logger.info(f"Producto #{product_id} eliminado")
    
    def _get_existing(self, product_id: int) -> Product:
        product = self.repository.get_product(product_id)
        if not product:
            raise ProductNotFound(product_id)
        return product
