"""
Validación estructural de los requests de pago.
"""

from typing import Any, Mapping

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from payment_system.schemas.payment import AddPaymentMethodInput, PaymentRequest
from payment_system.utils.exceptions import ValidationError


def _format_errors(exc: PydanticValidationError) -> list[str]:
    """Convierte los errores de pydantic a mensajes "campo: mensaje"."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "input"
        messages.append(f"{location}: {error['msg']}")
    return messages


def _validate(model: type[BaseModel], data: Mapping[str, Any] | BaseModel) -> Any:
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)

    if not isinstance(data, Mapping):
        raise ValidationError([f"input: expected an object, got {type(data).__name__}"])

    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(_format_errors(e))


def validate_payment_input(data: Mapping[str, Any] | PaymentRequest) -> PaymentRequest:
    """
    Valida la estructura de un request de pago.

    Args:
        data: Diccionario (camelCase o snake_case) o PaymentRequest

    Returns:
        PaymentRequest validado

    Raises:
        ValidationError: Si falta un campo o algún valor es inválido
    """
    return _validate(PaymentRequest, data)


def validate_add_payment_method_input(
    data: Mapping[str, Any] | AddPaymentMethodInput,
) -> AddPaymentMethodInput:
    """Valida la estructura de un nuevo método de pago."""
    return _validate(AddPaymentMethodInput, data)
