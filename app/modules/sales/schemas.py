# app/modules/sales/schemas.py
from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime
from app.shared.schemas.common import BaseResponse

class SaleItemIn(BaseModel):
    # Sin conversión: las reglas de valor del núcleo reciben el valor tal cual
    product_id: Optional[Any] = Field(None, description="ID del producto")
    quantity: Optional[Any] = Field(None, description="Cantidad")
    subtotal: Optional[Any] = Field(None, description="Subtotal del item")

class SaleWriteRequest(BaseModel):
    customer_id: Optional[int] = Field(None, description="ID del cliente")
    items: Optional[List[SaleItemIn]] = Field(None, description="Items de la venta")
    # El total siempre se recalcula; cualquier valor enviado se ignora

class ProductSummary(BaseModel):
    id: int
    name: str
    price: float
    
    class Config:
        from_attributes = True

class CustomerSummary(BaseModel):
    id: int
    name: str
    email: str
    
    class Config:
        from_attributes = True

class SaleItemOut(BaseModel):
    id: int
    product_id: int
    quantity: int
    subtotal: float
    product: Optional[ProductSummary] = None
    
    class Config:
        from_attributes = True

class SaleOut(BaseModel):
    id: int
    customer_id: int
    total: float
    created_at: Optional[datetime] = None
    customer: Optional[CustomerSummary] = None
    items: List[SaleItemOut] = []
    
    class Config:
        from_attributes = True

class SaleResponse(BaseResponse):
    data: SaleOut

class SaleListResponse(BaseResponse):
    data: List[SaleOut]
    count: int
