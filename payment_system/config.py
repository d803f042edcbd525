"""
Configuración de la capa de pagos.
Carga variables de entorno y define settings globales.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal


LogLevel = Literal["debug", "info", "warn", "error"]


class Settings(BaseSettings):
    """Configuración principal del servicio."""

    # Aplicación
    APP_NAME: str = "Payment System"
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Verbosidad del logger de pagos
    LOG_LEVEL: LogLevel = "info"

    # Proveedor de pago activo
    PAYMENT_PROVIDER: Literal["mock"] = "mock"
    MOCK_SUCCESS_RATE: float = 1.0

    # Clave Fernet para cifrar datos sensibles (vacía = clave efímera de desarrollo)
    ENCRYPTION_KEY: str = ""

    # Claves anteriores, solo para descifrar durante la rotación
    ENCRYPTION_PREVIOUS_KEYS: list[str] = []

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """Retorna instancia cacheada de settings."""
    return Settings()


settings = get_settings()
