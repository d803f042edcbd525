"""
Schemas de la capa de pagos.
Exporta todos los schemas para fácil acceso.
"""

from payment_system.schemas.common import BaseSchema
from payment_system.schemas.payment import (
    AddPaymentMethodInput,
    InlinePaymentMethod,
    PaymentRequest,
)

__all__ = [
    "BaseSchema",
    "AddPaymentMethodInput",
    "InlinePaymentMethod",
    "PaymentRequest",
]
