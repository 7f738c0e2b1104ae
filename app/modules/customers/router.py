# app/modules/customers/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from .service import CustomersService
from .schemas import (
    CustomerCreateRequest, CustomerUpdateRequest,
    CustomerResponse, CustomerListResponse
)

router = APIRouter()

@router.get("", response_model=CustomerListResponse)
def list_customers(db: Session = Depends(get_db)):
    """Listar todos los clientes"""
    return CustomersService(db).list_customers()

@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    """Buscar cliente por id"""
    return CustomersService(db).get_customer(customer_id)

@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(customer_data: CustomerCreateRequest, db: Session = Depends(get_db)):
    """Crear cliente (nombre y email obligatorios)"""
    return CustomersService(db).create_customer(customer_data)

@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(customer_id: int, customer_data: CustomerUpdateRequest, db: Session = Depends(get_db)):
    return CustomersService(db).update_customer(customer_id, customer_data)

@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    """Eliminar cliente"""
    CustomersService(db).delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
