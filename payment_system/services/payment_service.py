"""
Servicio principal de pagos.
Valida, cifra y enmascara los datos alrededor de cada llamada al proveedor.
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping

from payment_system.adapters.base import PaymentMethod, PaymentProvider, PaymentResult
from payment_system.adapters.factory import get_payment_provider
from payment_system.config import LogLevel, settings
from payment_system.schemas.payment import AddPaymentMethodInput, PaymentRequest
from payment_system.utils.encryption import FieldEncryptor, get_field_encryptor
from payment_system.utils.logger import PaymentLogger, get_payment_logger
from payment_system.utils.masking import mask_sensitive_data
from payment_system.utils.validation import (
    validate_add_payment_method_input,
    validate_payment_input,
)


@dataclass(frozen=True)
class PaymentServiceOptions:
    """Opciones del servicio de pagos."""

    log_level: LogLevel = "info"


class PaymentService:
    """
    Servicio para gestión de pagos.

    No guarda estado entre llamadas: cada error se registra y se relanza
    sin modificar, sin reintentos.
    """

    def __init__(
        self,
        provider: PaymentProvider | None = None,
        options: PaymentServiceOptions | None = None,
        logger: PaymentLogger | None = None,
        encryptor: FieldEncryptor | None = None,
    ):
        self._options = options or PaymentServiceOptions(log_level=settings.LOG_LEVEL)
        self._provider = provider or get_payment_provider()
        self._logger = logger or get_payment_logger(self._options.log_level)
        self._encryptor = encryptor or get_field_encryptor()

    @property
    def provider(self) -> PaymentProvider:
        return self._provider

    @property
    def options(self) -> PaymentServiceOptions:
        return self._options

    async def process_payment(
        self,
        request: PaymentRequest | Mapping[str, Any],
    ) -> PaymentResult:
        """
        Procesa un pago.

        1. Valida la estructura del request
        2. Cifra los detalles del método de pago inline
        3. Llama al proveedor y registra el resultado

        El resultado del proveedor se retorna sin modificar.

        Raises:
            ValidationError: Si el request es inválido (antes de llamar al proveedor)
            EncryptionError: Si falla el cifrado
        """
        try:
            payment = validate_payment_input(request)
            encrypted = self._encrypt_sensitive_data(payment)

            self._logger.info(
                "Processing payment",
                amount=str(payment.amount),
                currency=payment.currency,
            )
            result = await self.provider.create_payment(encrypted)

            if result.success:
                self._logger.info("Payment successful", transaction_id=result.transaction_id)
            else:
                self._logger.error("Payment failed", error=result.error)

            return result

        except Exception as e:
            self._logger.error(
                "Payment processing error",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    async def get_payment_methods(self, customer_id: str) -> list[PaymentMethod]:
        """
        Lista los métodos de pago de un cliente con los datos enmascarados.
        """
        try:
            methods = await self.provider.get_payment_methods(customer_id)
            return [self._mask_method(method) for method in methods]

        except Exception as e:
            self._logger.error(
                "Error fetching payment methods",
                customer_id=customer_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    async def add_payment_method(
        self,
        customer_id: str,
        method: AddPaymentMethodInput | Mapping[str, Any],
    ) -> PaymentMethod:
        """
        Guarda un método de pago.

        Los detalles se cifran antes de enviarlos al proveedor y el método
        creado se retorna enmascarado.
        """
        try:
            new_method = validate_add_payment_method_input(method)
            encrypted_details = self._encryptor.encrypt_details(new_method.details)

            created = await self.provider.add_payment_method(
                customer_id,
                new_method.model_copy(update={"details": encrypted_details}),
            )

            self._logger.info(
                "Payment method added",
                customer_id=customer_id,
                method_id=created.id,
                type=created.type,
            )

            return self._mask_method(created)

        except Exception as e:
            self._logger.error(
                "Error adding payment method",
                customer_id=customer_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    async def remove_payment_method(self, method_id: str) -> None:
        """Elimina un método de pago."""
        try:
            await self.provider.remove_payment_method(method_id)
            self._logger.info("Payment method removed", method_id=method_id)

        except Exception as e:
            self._logger.error(
                "Error removing payment method",
                method_id=method_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    def _encrypt_sensitive_data(self, payment: PaymentRequest) -> PaymentRequest:
        """Cifra los detalles de un método inline; una referencia pasa sin cambios."""
        if not payment.has_inline_method:
            return payment

        inline = payment.payment_method
        return payment.model_copy(
            update={
                "payment_method": inline.model_copy(
                    update={"details": self._encryptor.encrypt_details(inline.details)}
                )
            }
        )

    def _mask_method(self, method: PaymentMethod) -> PaymentMethod:
        return replace(method, details=mask_sensitive_data(method.details))
