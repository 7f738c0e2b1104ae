# app/modules/sales/__init__.py
"""
Módulo de Ventas - Agregado venta + items

Este módulo maneja el ciclo completo de una venta:
- Creación de venta con items en una transacción
- Reemplazo total de items (borrar todo y reinsertar)
- Eliminación de venta e items
- Consulta de ventas con cliente y productos

Arquitectura:
- router.py: Endpoints de ventas
- service.py: Orquestación y respuestas
- repository.py: Escrituras atómicas y lecturas
- line_items.py: Conjunto de items y total
- rules.py: Reglas de valor por item
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "router",
    "SalesService",
    "SalesRepository"
]
