# app/modules/customers/service.py
from sqlalchemy.orm import Session
import logging

from app.core.exceptions import CustomerNotFound
from app.shared.database.models import Customer
from .repository import CustomersRepository
from .schemas import (
    CustomerCreateRequest, CustomerUpdateRequest,
    CustomerOut, CustomerResponse, CustomerListResponse
)

logger = logging.getLogger(__name__)

class CustomersService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = CustomersRepository(db)
    
    def list_customers(self) -> CustomerListResponse:
        customers = self.repository.list_customers()
        return CustomerListResponse(
            success=True,
            message="Clientes registrados",
            data=[CustomerOut.model_validate(c) for c in customers],
            count=len(customers)
        )
    
    def get_customer(self, customer_id: int) -> CustomerResponse:
        customer = self._get_existing(customer_id)
        return CustomerResponse(success=True, data=CustomerOut.model_validate(customer))
    
    def create_customer(self, customer_data: CustomerCreateRequest) -> CustomerResponse:
        customer = self.repository.create_customer(customer_data.model_dump())
        logger.info(f"Cliente #{customer.id} creado")
        return CustomerResponse(
            success=True,
            message="Cliente creado exitosamente",
            data=CustomerOut.model_validate(customer)
        )
    
    def update_customer(self, customer_id: int, customer_data: CustomerUpdateRequest) -> CustomerResponse:
        customer = self._get_existing(customer_id)
        changes = customer_data.model_dump(exclude_unset=True, exclude_none=True)
        customer = self.repository.update_customer(customer, changes)
        return CustomerResponse(
            success=True,
            message="Cliente actualizado exitosamente",
            data=CustomerOut.model_validate(customer)
        )
    
    def delete_customer(self, customer_id: int) -> None:
        customer = self._get_existing(customer_id)
        self.repository.delete_customer(customer)
        logger.info(f"Cliente #{customer_id} eliminado")
    
    def _get_existing(self, customer_id: int) -> Customer:
        customer = self.repository.get_customer(customer_id)
        if not customer:
            raise CustomerNotFound(customer_id)
        return customer
