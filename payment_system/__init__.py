"""
Payment System
Capa de orquestación sobre un proveedor de pagos inyectable.
"""

from payment_system.services import PaymentService, PaymentServiceOptions

__version__ = "1.0.0"

__all__ = [
    "PaymentService",
    "PaymentServiceOptions",
]
