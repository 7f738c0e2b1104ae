# app/modules/sales/repository.py
from typing import Any, List, Optional, Sequence
import logging

from sqlalchemy.orm import Session, joinedload, selectinload

from app.config.database import store_errors, transaction
from app.core.exceptions import CustomerNotFound, EmptySale, SaleNotFound
from app.shared.database.models import Customer, Sale, SaleItem
from .line_items import LineItem, build_line_items

logger = logging.getLogger(__name__)

class SalesRepository:
    """
    Único punto de escritura del agregado venta + items.

    Cada escritura valida primero (sin tocar la base de datos), luego
    abre una transacción y aplica el cambio completo o nada.
    """
    def __init__(self, db: Session):
        self.db = db

    # ==================== LECTURAS ====================

    def _aggregate_query(self):
        return self.db.query(Sale).options(
            joinedload(Sale.customer),
            selectinload(Sale.items).joinedload(SaleItem.product)
        )

    def get_sale(self, sale_id: int) -> Optional[Sale]:
        """Venta con cliente, items y productos cargados"""
        with store_errors(self.db, "consultando venta"):
            return self._aggregate_query().filter(
                Sale.id == sale_id
            ).execution_options(populate_existing=True).first()

    def list_sales(self) -> List[Sale]:
        with store_errors(self.db, "listando ventas"):
            return self._aggregate_query().order_by(Sale.id).all()

    def get_sale_items(self, sale_id: int) -> List[SaleItem]:
        """Obtener items de una venta (lista vacía si no hay)"""
        with store_errors(self.db, "consultando items"):
            return self.db.query(SaleItem).filter(
                SaleItem.sale_id == sale_id
            ).order_by(SaleItem.position).all()

    def sale_exists(self, sale_id: int) -> bool:
        with store_errors(self.db, "consultando venta"):
            return self.db.query(Sale.id).filter(Sale.id == sale_id).first() is not None

    def customer_exists(self, customer_id: int) -> bool:
        with store_errors(self.db, "consultando cliente"):
            return self.db.query(Customer.id).filter(Customer.id == customer_id).first() is not None

    # ==================== ESCRITURAS ATÓMICAS ====================

    def create_sale_atomic(self, customer_id: Optional[int], raw_items: Sequence[Any]) -> Sale:
        """
        Crear venta e items en una sola transacción.

        Proceso:
        1. Validar cliente presente e items (sin tocar la BD)
        2. Verificar que el cliente existe
        3. Insertar Sale con el total calculado
        4. Insertar todos los SaleItems con el id de la venta
        5. Commit único

        Returns:
            Sale: Venta creada con cliente e items cargados

        Raises:
            EmptySale, InvalidItem: datos inválidos, cero escrituras
            CustomerNotFound: el cliente no existe
            StoreError: falla de BD, transacción revertida
        """
        if not customer_id:
            raise EmptySale()
        items, total = build_line_items(raw_items)

        if not self.customer_exists(customer_id):
            raise CustomerNotFound(customer_id)

        with store_errors(self.db, "creando venta"):
            with transaction(self.db):
                sale = Sale(customer_id=customer_id, total=total)
                self.db.add(sale)
                self.db.flush()  # Obtener sale.id
                sale_id = sale.id

                logger.info(f"Venta creada con ID: {sale_id}")
                self._insert_items(sale_id, items)

        logger.info(f"Transacción completada - Venta #{sale_id} ({len(items)} items, total {total})")
        return self._read_back(sale_id)

    def replace_sale_atomic(self, sale_id: int, customer_id: Optional[int], raw_items: Sequence[Any]) -> Sale:
        """
        Reemplazar cliente, total e items de una venta.

        Semántica de reemplazo total: se borran todos los items existentes
        y se insertan exactamente los recibidos. No hay merge.

        Raises:
            SaleNotFound: la venta no existe (antes de abrir la escritura)
            EmptySale, InvalidItem: datos inválidos, cero escrituras
            CustomerNotFound: el cliente no existe
            StoreError: falla de BD, transacción revertida
        """
        if not self.sale_exists(sale_id):
            raise SaleNotFound(sale_id)

        if not customer_id:
            raise EmptySale()
        items, total = build_line_items(raw_items)

        if not self.customer_exists(customer_id):
            raise CustomerNotFound(customer_id)

        with store_errors(self.db, "actualizando venta"):
            with transaction(self.db):
                removed = self.db.query(SaleItem).filter(
                    SaleItem.sale_id == sale_id
                ).delete()

                updated = self.db.query(Sale).filter(Sale.id == sale_id).update(
                    {Sale.customer_id: customer_id, Sale.total: total}
                )
                if not updated:
                    # Eliminada por otra transacción después de la verificación
                    raise SaleNotFound(sale_id)

                self._insert_items(sale_id, items)

        logger.info(f"Venta #{sale_id} reemplazada: {removed} items eliminados, {len(items)} insertados")
        return self._read_back(sale_id)

    def delete_sale_atomic(self, sale_id: int) -> None:
        """
        Eliminar items y venta en una sola transacción.

        Los items se borran antes que la venta, dentro de la misma
        transacción, así nunca queda un item sin venta visible.
        """
        if not self.sale_exists(sale_id):
            raise SaleNotFound(sale_id)

        with store_errors(self.db, "eliminando venta"):
            with transaction(self.db):
                removed = self.db.query(SaleItem).filter(
                    SaleItem.sale_id == sale_id
                ).delete()

                deleted = self.db.query(Sale).filter(Sale.id == sale_id).delete()
                if not deleted:
                    raise SaleNotFound(sale_id)

        logger.info(f"Venta #{sale_id} eliminada junto con {removed} items")

    # ==================== HELPERS ====================

    def _insert_items(self, sale_id: int, items: List[LineItem]) -> None:
        self.db.add_all([SaleItem(**item.to_row(sale_id)) for item in items])
        self.db.flush()
        logger.info(f"{len(items)} items agregados a la venta #{sale_id}")

    def _read_back(self, sale_id: int) -> Sale:
        sale = self.get_sale(sale_id)
        if sale is None:
            # Eliminada por otra transacción justo después del commit
            raise SaleNotFound(sale_id)
        return sale
