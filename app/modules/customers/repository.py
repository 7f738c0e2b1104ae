# app/modules/customers/repository.py
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import store_errors, transaction
from app.shared.database.models import Customer

class CustomersRepository:
    def __init__(self, db: Session):
        self.db = db
    
    def list_customers(self) -> List[Customer]:
        with store_errors(self.db, "listando clientes"):
            return self.db.query(Customer).order_by(Customer.id).all()
    
    def get_customer(self, customer_id: int) -> Optional[Customer]:
        with store_errors(self.db, "consultando cliente"):
            return self.db.get(Customer, customer_id)
    
    def create_customer(self, customer_data: Dict[str, Any]) -> Customer:
        """Crear nuevo cliente"""
        with store_errors(self.db, "creando cliente"):
            with transaction(self.db):
                customer = Customer(
                    name=customer_data['name'],
                    email=customer_data['email']
                )
                self.db.add(customer)
            self.db.refresh(customer)
            return customer
    
    def update_customer(self, customer: Customer, changes: Dict[str, Any]) -> Customer:
        with store_errors(self.db, "actualizando cliente"):
            with transaction(self.db):
                for field, value in changes.items():
                    setattr(customer, field, value)
            self.db.refresh(customer)
            return customer
    
    def delete_customer(self, customer: Customer) -> None:
        # Un cliente con ventas no se puede eliminar (llave foránea)
        with store_errors(self.db, "eliminando cliente"):
            with transaction(self.db):
                self.db.delete(customer)
