"""
Interfaz base abstracta para proveedores de pago.
Define el contrato que todos los adapters deben implementar.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from payment_system.schemas.payment import AddPaymentMethodInput, PaymentRequest


@dataclass
class PaymentResult:
    """
    Resultado de una operación de pago.

    `transaction_id` está presente solo si `success`; `error` solo si no.
    """

    success: bool
    transaction_id: str | None = None
    error: str | None = None

    # Información adicional del proveedor
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.success and (not self.transaction_id or self.error is not None):
            raise ValueError("Successful result requires transaction_id and no error")
        if not self.success and (self.transaction_id is not None or not self.error):
            raise ValueError("Failed result requires error and no transaction_id")


@dataclass
class PaymentMethod:
    """Método de pago guardado en el proveedor."""

    id: str
    type: str
    details: dict[str, Any] = field(default_factory=dict)

    customer_id: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


class PaymentProvider(ABC):
    """
    Interfaz abstracta para proveedores de pago.

    El servicio de pagos recibe una implementación por inyección; los
    datos sensibles llegan aquí ya cifrados.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nombre del proveedor (ej: 'mock')."""
        pass

    @abstractmethod
    async def create_payment(self, request: PaymentRequest) -> PaymentResult:
        """
        Ejecuta un pago.

        Args:
            request: Request validado, con `payment_method.details` cifrado
                si el método es inline

        Returns:
            PaymentResult con transaction_id o error
        """
        pass

    @abstractmethod
    async def get_payment_methods(self, customer_id: str) -> list[PaymentMethod]:
        """
        Lista los métodos de pago de un cliente.

        Args:
            customer_id: ID del cliente en el proveedor

        Returns:
            Lista de PaymentMethod (sin enmascarar)
        """
        pass

    @abstractmethod
    async def add_payment_method(
        self,
        customer_id: str,
        method: AddPaymentMethodInput,
    ) -> PaymentMethod:
        """
        Guarda un nuevo método de pago.

        Args:
            customer_id: ID del cliente
            method: Tipo y detalles ya cifrados

        Returns:
            PaymentMethod creado
        """
        pass

    @abstractmethod
    async def remove_payment_method(self, method_id: str) -> None:
        """
        Elimina un método de pago.

        Raises:
            ProviderError: Si el proveedor no puede eliminarlo
        """
        pass
