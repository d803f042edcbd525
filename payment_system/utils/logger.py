"""
Logging estructurado para la capa de pagos.

Usa structlog sobre el logging de la stdlib. El servicio de pagos recibe
el logger por inyección, así que cualquier objeto con los métodos
debug/info/warning/error sirve (útil para dobles de test).
"""

import logging
from typing import Any, Protocol

import structlog

from payment_system.config import LogLevel, Settings


# Nombre raíz de los loggers del paquete
PAYMENT_LOGGER_NAME = "payment_system"

# Niveles soportados por la configuración ("warn" es alias de WARNING)
LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class PaymentLogger(Protocol):
    """Capacidad de logging que necesita el servicio de pagos."""

    def debug(self, event: str, **kw: Any) -> Any: ...

    def info(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...

    def error(self, event: str, **kw: Any) -> Any: ...


def configure_logging(settings: Settings) -> None:
    """
    Configura structlog para todo el proceso.

    En producción renderiza JSON; en otros entornos usa el renderer de consola.
    """
    logging.basicConfig(format="%(message)s", level=LOG_LEVELS[settings.LOG_LEVEL])

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.ENVIRONMENT == "production"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_payment_logger(log_level: LogLevel = "info") -> PaymentLogger:
    """
    Retorna el logger del servicio de pagos con el nivel indicado.

    Args:
        log_level: Uno de "debug", "info", "warn", "error"

    Returns:
        Logger de structlog que descarta los eventos por debajo del nivel.
        El filtro vive en el propio logger: dos servicios con niveles
        distintos no se afectan entre sí.

    Raises:
        ValueError: Si el nivel no está soportado
    """
    level = LOG_LEVELS.get(log_level)

    if level is None:
        raise ValueError(
            f"Log level '{log_level}' not supported. "
            f"Available: {list(LOG_LEVELS.keys())}"
        )

    return structlog.wrap_logger(
        None,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory_args=(PAYMENT_LOGGER_NAME,),
    )
