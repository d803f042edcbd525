"""
Mock Adapter para desarrollo y testing.
Simula el comportamiento de un proveedor de pagos.
"""

import random
from dataclasses import replace
from uuid import uuid4

import structlog

from payment_system.adapters.base import PaymentMethod, PaymentProvider, PaymentResult
from payment_system.schemas.payment import AddPaymentMethodInput, PaymentRequest
from payment_system.utils.encryption import FieldEncryptor
from payment_system.utils.exceptions import ProviderError


logger = structlog.get_logger(__name__)


class MockAdapter(PaymentProvider):
    """
    Adapter mock para desarrollo y testing.

    Guarda los métodos de pago en memoria por instancia. Si recibe un
    FieldEncryptor descifra los detalles al guardarlos, como haría un
    proveedor real que comparte la clave.
    """

    def __init__(
        self,
        success_rate: float = 1.0,
        encryptor: FieldEncryptor | None = None,
        record_requests: bool = False,
    ):
        """
        Inicializa el adapter mock.

        Args:
            success_rate: Probabilidad de éxito de un pago (0.0 a 1.0)
            encryptor: Cifrador para leer los detalles recibidos
            record_requests: Guarda los requests recibidos (solo para testing)
        """
        self._success_rate = success_rate
        self._encryptor = encryptor
        self._record_requests = record_requests
        self._methods: dict[str, PaymentMethod] = {}
        self._requests: list[PaymentRequest] = []
        logger.info("MockAdapter initialized", success_rate=success_rate)

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def received_requests(self) -> list[PaymentRequest]:
        """Requests recibidos, tal como llegaron. Vacío si record_requests es False."""
        return list(self._requests)

    def _generate_mock_id(self, prefix: str = "mock") -> str:
        """Genera un ID mock similar al formato de Stripe."""
        return f"{prefix}_{uuid4().hex[:24]}"

    def _should_succeed(self) -> bool:
        """Determina si el pago debe ser exitoso basado en success_rate."""
        return random.random() < self._success_rate

    async def create_payment(self, request: PaymentRequest) -> PaymentResult:
        """Procesa un pago mock."""
        if self._record_requests:
            self._requests.append(request)

        if not request.has_inline_method and request.payment_method not in self._methods:
            return PaymentResult(
                success=False,
                error=f"Payment method not found: {request.payment_method}",
            )

        if not self._should_succeed():
            logger.info("Mock payment declined", amount=str(request.amount))
            return PaymentResult(success=False, error="Card declined (simulated)")

        transaction_id = self._generate_mock_id("txn")

        logger.info(
            "Mock payment created",
            transaction_id=transaction_id,
            amount=str(request.amount),
            currency=request.currency,
        )

        return PaymentResult(
            success=True,
            transaction_id=transaction_id,
            metadata={"provider": self.provider_name},
        )

    async def get_payment_methods(self, customer_id: str) -> list[PaymentMethod]:
        """Lista los métodos mock de un cliente."""
        return [
            replace(method, details=dict(method.details))
            for method in self._methods.values()
            if method.customer_id == customer_id
        ]

    async def add_payment_method(
        self,
        customer_id: str,
        method: AddPaymentMethodInput,
    ) -> PaymentMethod:
        """Guarda un método mock."""
        details = dict(method.details)
        if self._encryptor is not None:
            details = self._encryptor.decrypt_details(details)

        payment_method = PaymentMethod(
            id=self._generate_mock_id("pm"),
            type=method.type,
            details=details,
            customer_id=customer_id,
        )
        self._methods[payment_method.id] = payment_method

        logger.info(
            "Mock payment method added",
            method_id=payment_method.id,
            customer_id=customer_id,
        )

        return replace(payment_method, details=dict(details))

    async def remove_payment_method(self, method_id: str) -> None:
        """Elimina un método mock."""
        if method_id not in self._methods:
            raise ProviderError(self.provider_name, f"Payment method not found: {method_id}")

        del self._methods[method_id]

    def clear(self) -> None:
        """Limpia todos los datos mock (para testing)."""
        self._methods.clear()
        self._requests.clear()
        logger.info("Mock data cleared")
