"""
Adapters para proveedores de pago.
Implementación del patrón Adapter para abstraer diferentes proveedores.
"""

from payment_system.adapters.base import PaymentMethod, PaymentProvider, PaymentResult
from payment_system.adapters.mock_adapter import MockAdapter
from payment_system.adapters.factory import get_payment_provider, get_provider_by_name

__all__ = [
    "PaymentMethod",
    "PaymentProvider",
    "PaymentResult",
    "MockAdapter",
    "get_payment_provider",
    "get_provider_by_name",
]
