"""
Servicios de negocio de la capa de pagos.
"""

from payment_system.services.payment_service import PaymentService, PaymentServiceOptions

__all__ = [
    "PaymentService",
    "PaymentServiceOptions",
]
