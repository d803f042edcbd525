"""
Schemas de entrada para pagos y métodos de pago.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import Field, field_validator

from payment_system.schemas.common import BaseSchema


# ID de referencia a un método de pago ya guardado en el proveedor
PaymentMethodReference = Annotated[str, Field(min_length=1)]


class InlinePaymentMethod(BaseSchema):
    """Método de pago enviado junto al pago, con detalles sensibles."""

    type: str = Field(..., min_length=1, description="Tipo de método (card, bank_account, ...)")
    details: dict[str, Any] = Field(..., description="Datos sensibles, se cifran antes del proveedor")


class PaymentRequest(BaseSchema):
    """Request para procesar un pago."""

    amount: Decimal = Field(..., gt=0, description="Monto del pago")
    currency: str = Field(..., pattern=r"^[A-Za-z]{3}$", description="Código de moneda ISO 4217")
    payment_method: PaymentMethodReference | InlinePaymentMethod = Field(
        ...,
        alias="paymentMethod",
        description="ID de un método guardado o un método inline",
    )

    # Datos opcionales
    customer_id: str | None = Field(None, alias="customerId")
    description: str | None = Field(None, max_length=500)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount(cls, v):
        """Convierte a Decimal si es necesario; solo acepta tipos numéricos."""
        if isinstance(v, (bool, str)):
            raise ValueError("amount must be a number")
        if isinstance(v, (int, float)):
            return Decimal(str(v))
        return v

    @property
    def has_inline_method(self) -> bool:
        return isinstance(self.payment_method, InlinePaymentMethod)


class AddPaymentMethodInput(BaseSchema):
    """Request para guardar un nuevo método de pago de un cliente."""

    type: str = Field(..., min_length=1)
    details: dict[str, Any] = Field(..., description="Datos sensibles en texto plano")
