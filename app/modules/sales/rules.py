# app/modules/sales/rules.py
"""
Reglas de valor para items de venta.

Funciones puras: validan y normalizan los campos primitivos de un item
antes de que entren al cálculo del total. No tocan la base de datos.
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Tuple

from app.core.exceptions import InvalidItem

REQUIRED_FIELDS = ("product_id", "quantity", "subtotal")

# Escala de las columnas de dinero (Numeric(12, 2))
MONEY_SCALE = Decimal("0.01")


def _read_field(raw: Any, field: str) -> Any:
    """Leer un campo desde un dict o desde un objeto (p.ej. modelo pydantic)"""
    if isinstance(raw, dict):
        return raw.get(field)
    return getattr(raw, field, None)


def _is_integer(value: Any) -> bool:
    # bool es subclase de int y no es un valor válido aquí
    return isinstance(value, int) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    return False


def to_decimal(value: Any) -> Decimal:
    """Convertir a Decimal sin arrastrar el error binario de los float"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def normalize_item(raw: Any, position: int) -> Tuple[int, int, Decimal]:
    """
    Validar un item crudo y devolver (product_id, quantity, subtotal).
    
    Raises:
        InvalidItem: si falta un campo requerido, si product_id o quantity
            no son enteros, o si subtotal no es un número finito
            con a lo sumo dos decimales
    """
    if raw is None:
        raise InvalidItem(position, "item", "item vacío")
    
    values = {}
    for field in REQUIRED_FIELDS:
        value = _read_field(raw, field)
        if value is None:
            raise InvalidItem(position, field, f"campo obligatorio '{field}' ausente")
        values[field] = value
    
    if not _is_integer(values["product_id"]):
        raise InvalidItem(position, "product_id", "product_id debe ser un entero")
    
    if not _is_integer(values["quantity"]):
        raise InvalidItem(position, "quantity", "quantity debe ser un entero")
    
    if not _is_finite_number(values["subtotal"]):
        raise InvalidItem(position, "subtotal", "subtotal debe ser un número finito")
    
    subtotal = to_decimal(values["subtotal"])
    try:
        fits_scale = subtotal == subtotal.quantize(MONEY_SCALE)
    except InvalidOperation:
        fits_scale = False
    if not fits_scale:
        raise InvalidItem(position, "subtotal", "subtotal admite a lo sumo dos decimales")
    
    return values["product_id"], values["quantity"], subtotal
