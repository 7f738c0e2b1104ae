# app/modules/customers/schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from app.shared.schemas.common import BaseResponse

class CustomerCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del cliente")
    email: str = Field(..., min_length=1, max_length=255, description="Correo del cliente")
    
    @field_validator('name', 'email')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError('El campo no puede estar vacío')
        return v.strip()

class CustomerUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, min_length=1, max_length=255)
    
    @field_validator('name', 'email')
    @classmethod
    def validate_not_blank(cls, v):
        if v is not None and not v.strip():
            raise ValueError('El campo no puede estar vacío')
        return v.strip() if v is not None else v

class CustomerOut(BaseModel):
    id: int
    name: str
    email: str
    
    class Config:
        from_attributes = True

class CustomerResponse(BaseResponse):
    data: CustomerOut

class CustomerListResponse(BaseResponse):
    data: List[CustomerOut]
    count: int
