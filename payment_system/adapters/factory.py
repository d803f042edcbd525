"""
Factory para obtener el proveedor de pago correcto.
Implementa el patrón Factory para instanciar adapters.
"""

from functools import lru_cache
from typing import Callable

import structlog

from payment_system.adapters.base import PaymentProvider
from payment_system.adapters.mock_adapter import MockAdapter
from payment_system.config import settings
from payment_system.utils.encryption import get_field_encryptor


logger = structlog.get_logger(__name__)


def _build_mock_provider() -> PaymentProvider:
    return MockAdapter(
        success_rate=settings.MOCK_SUCCESS_RATE,
        encryptor=get_field_encryptor(),
    )


# Registro de proveedores disponibles
PROVIDERS: dict[str, Callable[[], PaymentProvider]] = {
    "mock": _build_mock_provider,
}


def _build_provider(name: str) -> PaymentProvider:
    if name not in PROVIDERS:
        raise ValueError(
            f"Payment provider '{name}' not supported. "
            f"Available: {list(PROVIDERS.keys())}"
        )

    return PROVIDERS[name]()


@lru_cache()
def get_payment_provider() -> PaymentProvider:
    """
    Factory que retorna el proveedor de pago configurado.

    Lee la configuración PAYMENT_PROVIDER y retorna la instancia
    correspondiente. La instancia es cacheada para reutilización.

    Raises:
        ValueError: Si el proveedor no está soportado
    """
    provider_name = settings.PAYMENT_PROVIDER.lower()
    provider = _build_provider(provider_name)

    logger.info(
        "Payment provider initialized",
        provider=provider_name,
    )

    return provider


def get_provider_by_name(name: str) -> PaymentProvider:
    """
    Obtiene un proveedor específico por nombre.

    Args:
        name: Nombre del proveedor ("mock")

    Raises:
        ValueError: Si el proveedor no está soportado
    """
    return _build_provider(name.lower())
