"""
Configuración de tests y fixtures compartidos.
"""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from payment_system.adapters.base import PaymentProvider, PaymentResult
from payment_system.adapters.mock_adapter import MockAdapter
from payment_system.services import PaymentService
from payment_system.utils.encryption import FieldEncryptor, generate_encryption_key


class RecordingLogger:
    """Logger de prueba que guarda cada evento emitido."""

    def __init__(self):
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.events.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._record("error", event, **kw)

    def find(self, level: str, event: str) -> list[dict[str, Any]]:
        return [kw for lvl, evt, kw in self.events if lvl == level and evt == event]


@pytest.fixture
def encryptor() -> FieldEncryptor:
    """Cifrador con una clave nueva para cada test."""
    return FieldEncryptor(generate_encryption_key())


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def provider_mock() -> AsyncMock:
    """Proveedor doble que retorna un pago exitoso."""
    provider = AsyncMock(spec=PaymentProvider)
    provider.create_payment.return_value = PaymentResult(
        success=True,
        transaction_id="txn_123",
    )
    return provider


@pytest.fixture
def service(provider_mock, recording_logger, encryptor) -> PaymentService:
    """Servicio con todos los colaboradores inyectados."""
    return PaymentService(
        provider=provider_mock,
        logger=recording_logger,
        encryptor=encryptor,
    )


@pytest.fixture
def mock_adapter(encryptor) -> MockAdapter:
    """Adapter mock con 100% de éxito que comparte la clave del servicio."""
    return MockAdapter(success_rate=1.0, encryptor=encryptor, record_requests=True)


@pytest.fixture
def sample_payment_data() -> dict[str, Any]:
    """Datos de ejemplo para procesar un pago con tarjeta inline."""
    return {
        "amount": 100,
        "currency": "USD",
        "paymentMethod": {
            "type": "card",
            "details": {"cardNumber": "4111111111111111"},
        },
    }
