# app/modules/products/__init__.py
"""
Módulo de Productos - Catálogo

Arquitectura:
- router.py: Endpoints CRUD de productos
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import ProductsService
from .repository import ProductsRepository

__all__ = [
    "router",
    "ProductsService",
    "ProductsRepository"
]
