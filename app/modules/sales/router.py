# app/modules/sales/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from .service import SalesService
from .schemas import SaleWriteRequest, SaleResponse, SaleListResponse

router = APIRouter()

@router.get("", response_model=SaleListResponse)
def list_sales(db: Session = Depends(get_db)):
    """Listar ventas con cliente, items y productos"""
    return SalesService(db).list_sales()

@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(sale_id: int, db: Session = Depends(get_db)):
    """Buscar venta por id"""
    return SalesService(db).get_sale(sale_id)

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(sale_data: SaleWriteRequest, db: Session = Depends(get_db)):
    """
    Crear venta e items en una transacción
    
    **Incluye:**
    - Validación de cada item antes de escribir
    - Total calculado como suma de subtotales
    - Venta e items creados juntos o ninguno
    """
    return SalesService(db).create_sale(sale_data)

@router.put("/{sale_id}", response_model=SaleResponse)
def replace_sale(sale_id: int, sale_data: SaleWriteRequest, db: Session = Depends(get_db)):
    """
    Actualizar venta: reemplaza cliente y todos los items
    
    Los items que no vengan en la petición se eliminan.
    """
    return SalesService(db).replace_sale(sale_id, sale_data)

@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(sale_id: int, db: Session = Depends(get_db)):
    """Eliminar venta junto con sus items"""
    SalesService(db).delete_sale(sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
