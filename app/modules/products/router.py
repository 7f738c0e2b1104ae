# app/modules/products/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from .service import ProductsService
from .schemas import (
    ProductCreateRequest, ProductUpdateRequest,
    ProductResponse, ProductListResponse
)

router = APIRouter()

@router.get("", response_model=ProductListResponse)
def list_products(db: Session = Depends(get_db)):
    """Listar todos los productos"""
    return ProductsService(db).list_products()

@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, db: Session = Depends(get_db)):
    """Buscar producto por id"""
    return ProductsService(db).get_product(product_id)

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(product_data: ProductCreateRequest, db: Session = Depends(get_db)):
    """Crear producto (nombre, precio y stock obligatorios)"""
    return ProductsService(db).create_product(product_data)

@router.put("/{product_id}", response_model=ProductResponse)
def update_product(product_id: int, product_data: ProductUpdateRequest, db: Session = Depends(get_db)):
    """Actualizar producto"""
    return ProductsService(db).update_product(product_id, product_data)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Eliminar producto"""
    ProductsService(db).delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
