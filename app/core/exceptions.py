# app/core/exceptions.py
"""
Errores de dominio.

Los lanzan los servicios y repositorios cuando se viola una regla de negocio
o falla la persistencia. La capa HTTP los traduce a respuestas con
``register_exception_handlers``.
"""
from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.shared.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base de todos los errores esperados del núcleo"""
    error_code = "DOMAIN_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidItem(DomainError):
    """Un item de venta no tiene un campo requerido o su subtotal no es numérico"""
    error_code = "INVALID_ITEM"

    def __init__(self, position: int, field: str, reason: str):
        super().__init__(
            f"Item {position}: {reason}",
            details={"position": position, "field": field}
        )
        self.position = position
        self.field = field


class EmptySale(DomainError):
    """Venta sin items (o sin cliente)"""
    error_code = "EMPTY_SALE"

    def __init__(self, message: str = "Datos de la venta inválidos: se requiere cliente y al menos un item"):
        super().__init__(message)


class NotFoundError(DomainError):
    error_code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    message_template = "Registro {id} no encontrado"

    def __init__(self, entity_id: Any):
        super().__init__(
            self.message_template.format(id=entity_id),
            details={"id": entity_id}
        )
        self.entity_id = entity_id


class SaleNotFound(NotFoundError):
    error_code = "SALE_NOT_FOUND"
    message_template = "Venta {id} no encontrada"


class CustomerNotFound(NotFoundError):
    error_code = "CUSTOMER_NOT_FOUND"
    message_template = "Cliente {id} no encontrado"


class ProductNotFound(NotFoundError):
    error_code = "PRODUCT_NOT_FOUND"
    message_template = "Producto {id} no encontrado"


class StoreError(DomainError):
    """Falla de la capa de persistencia; la transacción ya fue revertida"""
    error_code = "STORE_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(exc: DomainError) -> JSONResponse:
    body = ErrorResponse(
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details or None
    )
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(body))


def register_exception_handlers(app: FastAPI):
    """Traducir errores de dominio a respuestas JSON"""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        if isinstance(exc, StoreError):
            logger.error(f"{request.method} {request.url.path} - {exc.message}")
        return _error_response(exc)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Error no controlado en {request.method} {request.url.path}")
        body = ErrorResponse(message="Error interno en el servidor", error_code="INTERNAL_ERROR")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=jsonable_encoder(body)
        )
