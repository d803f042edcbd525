"""
Enmascarado de datos sensibles antes de devolverlos al cliente.
"""

from typing import Any, Mapping


# Caracteres visibles al final de un número enmascarado
VISIBLE_DIGITS = 4
MASK_PREFIX = "****"


def mask_card_number(card_number: str) -> str:
    """Enmascara un número de tarjeta dejando visibles los últimos 4 caracteres."""
    return f"{MASK_PREFIX}{str(card_number)[-VISIBLE_DIGITS:]}"


def mask_sensitive_data(details: Mapping[str, Any]) -> dict[str, Any]:
    """
    Retorna una copia de `details` con los campos sensibles enmascarados.

    Sin `cardNumber` la copia es igual a la entrada. Nunca modifica
    el diccionario original.
    """
    masked = dict(details)

    if masked.get("cardNumber"):
        masked["cardNumber"] = mask_card_number(masked["cardNumber"])

    return masked
