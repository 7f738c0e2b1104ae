# app/modules/sales/service.py
from sqlalchemy.orm import Session
import logging

from app.core.exceptions import SaleNotFound
from app.shared.database.models import Sale
from .repository import SalesRepository
from .schemas import SaleWriteRequest, SaleOut, SaleResponse, SaleListResponse

logger = logging.getLogger(__name__)

class SalesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)
    
    def create_sale(self, sale_data: SaleWriteRequest) -> SaleResponse:
        """
        Crear venta completa.
        
        Responsabilidades:
        - Delegar validación y transacción al repository
        - Construir respuesta
        """
        logger.info(f"Iniciando venta - Cliente: {sale_data.customer_id}")
        sale = self.repository.create_sale_atomic(sale_data.customer_id, sale_data.items)
        return self._build_response(sale, "Venta registrada exitosamente")
    
    def replace_sale(self, sale_id: int, sale_data: SaleWriteRequest) -> SaleResponse:
        """Reemplazar cliente e items de una venta (recalcula el total)"""
        logger.info(f"Reemplazando venta #{sale_id} - Cliente: {sale_data.customer_id}")
        sale = self.repository.replace_sale_atomic(sale_id, sale_data.customer_id, sale_data.items)
        return self._build_response(sale, "Venta actualizada exitosamente")
    
    def delete_sale(self, sale_id: int) -> None:
        self.repository.delete_sale_atomic(sale_id)
    
    def get_sale(self, sale_id: int) -> SaleResponse:
        sale = self.repository.get_sale(sale_id)
        if not sale:
            raise SaleNotFound(sale_id)
        return self._build_response(sale, f"Venta #{sale_id}")
    
    def list_sales(self) -> SaleListResponse:
        sales = self.repository.list_sales()
        return SaleListResponse(
            success=True,
            message="Ventas registradas",
            data=[SaleOut.model_validate(sale) for sale in sales],
            count=len(sales)
        )
    
    def _build_response(self, sale: Sale, message: str) -> SaleResponse:
        """Construir respuesta estandarizada"""
        return SaleResponse(
            success=True,
            message=message,
            data=SaleOut.model_validate(sale)
        )
