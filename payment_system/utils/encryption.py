"""
Cifrado de datos sensibles de métodos de pago.

Cada campo de un diccionario de `details` se serializa a JSON y se cifra
por separado con Fernet, así el proveedor recibe los mismos nombres de
campo pero con tokens opacos como valores.
"""

import json
from functools import lru_cache
from typing import Any, Iterable, Mapping

import structlog
from cryptography.fernet import Fernet, InvalidToken, MultiFernet

from payment_system.config import settings
from payment_system.utils.exceptions import EncryptionError


logger = structlog.get_logger(__name__)


def generate_encryption_key() -> str:
    """Genera una nueva clave Fernet (base64 url-safe)."""
    return Fernet.generate_key().decode("utf-8")


class FieldEncryptor:
    """
    Cifra y descifra valores de campos sensibles.

    La primera clave se usa para cifrar; las siguientes solo para descifrar,
    lo que permite rotar claves sin invalidar tokens emitidos.
    """

    def __init__(self, key: str, previous_keys: Iterable[str] = ()):
        try:
            fernets = [Fernet(k) for k in (key, *previous_keys)]
        except (ValueError, TypeError) as e:
            raise EncryptionError(f"Invalid encryption key: {e}")

        self._cipher = MultiFernet(fernets)

    def encrypt_value(self, value: Any) -> str:
        """Cifra un valor serializable a JSON y retorna el token."""
        try:
            data = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise EncryptionError(f"Value is not serializable: {e}")

        return self._cipher.encrypt(data.encode("utf-8")).decode("utf-8")

    def decrypt_value(self, token: str) -> Any:
        """Descifra un token y retorna el valor original."""
        try:
            data = self._cipher.decrypt(token.encode("utf-8"))
        except (InvalidToken, AttributeError, TypeError):
            raise EncryptionError("Invalid or corrupted token")

        return json.loads(data)

    def encrypt_details(self, details: Mapping[str, Any]) -> dict[str, str]:
        """
        Cifra todos los campos de un diccionario de detalles.

        Args:
            details: Campos en texto plano (ej: {"cardNumber": "4111..."})

        Returns:
            Diccionario con los mismos campos y valores cifrados
        """
        return {field: self.encrypt_value(value) for field, value in details.items()}

    def decrypt_details(self, details: Mapping[str, str]) -> dict[str, Any]:
        """Descifra todos los campos de un diccionario cifrado."""
        return {field: self.decrypt_value(token) for field, token in details.items()}

    def rotate(self, token: str) -> str:
        """Re-cifra un token con la clave actual."""
        try:
            return self._cipher.rotate(token.encode("utf-8")).decode("utf-8")
        except InvalidToken:
            raise EncryptionError("Invalid or corrupted token")


@lru_cache()
def get_field_encryptor() -> FieldEncryptor:
    """
    Retorna el cifrador configurado.

    Sin ENCRYPTION_KEY se genera una clave efímera: los tokens no
    sobreviven al proceso. NO USAR EN PRODUCCIÓN.
    """
    key = settings.ENCRYPTION_KEY

    if not key:
        logger.warning(
            "No encryption key configured, using ephemeral key",
            environment=settings.ENVIRONMENT,
        )
        key = generate_encryption_key()

    return FieldEncryptor(key, settings.ENCRYPTION_PREVIOUS_KEYS)
