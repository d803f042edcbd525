"""
Utilidades de la capa de pagos.
"""

from payment_system.utils.encryption import (
    FieldEncryptor,
    generate_encryption_key,
    get_field_encryptor,
)
from payment_system.utils.exceptions import (
    EncryptionError,
    PaymentServiceError,
    ProviderError,
    ValidationError,
)
from payment_system.utils.logger import PaymentLogger, configure_logging, get_payment_logger
from payment_system.utils.masking import mask_card_number, mask_sensitive_data
from payment_system.utils.validation import (
    validate_add_payment_method_input,
    validate_payment_input,
)

__all__ = [
    # Encryption
    "FieldEncryptor",
    "generate_encryption_key",
    "get_field_encryptor",
    # Errors
    "EncryptionError",
    "PaymentServiceError",
    "ProviderError",
    "ValidationError",
    # Logging
    "PaymentLogger",
    "configure_logging",
    "get_payment_logger",
    # Masking
    "mask_card_number",
    "mask_sensitive_data",
    # Validation
    "validate_add_payment_method_input",
    "validate_payment_input",
]
