# app/modules/products/schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from decimal import Decimal
from app.shared.schemas.common import BaseResponse

class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    price: Decimal = Field(..., ge=0, description="Precio unitario")
    stock: int = Field(..., ge=0, description="Unidades en existencia")
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('El nombre no puede estar vacío')
        return v.strip()

class ProductUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError('El nombre no puede estar vacío')
        return v.strip() if v is not None else v

class ProductOut(BaseModel):
    id: int
    name: str
    price: float
    stock: int
    
    class Config:
        from_attributes = True

class ProductResponse(BaseResponse):
    data: ProductOut

class ProductListResponse(BaseResponse):
    data: List[ProductOut]
    count: int
