# app/modules/sales/line_items.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Sequence, Tuple

from app.core.exceptions import EmptySale
from .rules import normalize_item


@dataclass(frozen=True)
class LineItem:
    """Item de venta ya validado"""
    product_id: int
    quantity: int
    subtotal: Decimal
    position: int

    def to_row(self, sale_id: int) -> Dict[str, Any]:
        """Argumentos para construir el SaleItem de esta venta"""
        return {
            "sale_id": sale_id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "subtotal": self.subtotal,
            "position": self.position
        }


def build_line_items(raw_items: Sequence[Any]) -> Tuple[List[LineItem], Decimal]:
    """
    Validar todos los items y calcular el total de la venta.
    
    - Falla en el primer item inválido (no hay aceptación parcial)
    - Conserva el orden enviado por el cliente
    - El total es la suma aritmética de los subtotales
    
    Raises:
        EmptySale: si no hay items o no vienen en una secuencia
        InvalidItem: si algún item no pasa las reglas de valor
    """
    if not isinstance(raw_items, Sequence) or isinstance(raw_items, (str, bytes)) or not raw_items:
        raise EmptySale()
    
    items = []
    for position, raw in enumerate(raw_items):
        product_id, quantity, subtotal = normalize_item(raw, position)
        items.append(LineItem(product_id, quantity, subtotal, position))

    total = sum((item.subtotal for item in items), Decimal("0"))
    
    return items, total
