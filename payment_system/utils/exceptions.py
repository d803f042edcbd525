"""
Excepciones personalizadas de la capa de pagos.
"""


class PaymentServiceError(Exception):
    """Error base de la capa de pagos."""

    def __init__(self, message: str, code: str = "PAYMENT_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(PaymentServiceError):
    """El request de pago tiene una estructura inválida."""

    def __init__(self, errors: list[str]):
        super().__init__(
            message=f"Invalid payment input: {'; '.join(errors)}",
            code="VALIDATION_ERROR",
        )
        self.errors = errors


class ProviderError(PaymentServiceError):
    """Error del proveedor de pago externo."""

    def __init__(self, provider: str, message: str):
        super().__init__(
            message=f"Payment provider error ({provider}): {message}",
            code="PROVIDER_ERROR",
        )
        self.provider = provider


class EncryptionError(PaymentServiceError):
    """Error al cifrar o descifrar datos sensibles."""

    def __init__(self, message: str):
        super().__init__(
            message=f"Encryption failed: {message}",
            code="ENCRYPTION_ERROR",
        )
