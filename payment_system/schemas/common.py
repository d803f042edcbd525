"""
Schemas comunes y base para reutilización.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Schema base con configuración común."""

    model_config = ConfigDict(
        populate_by_name=True,  # Acepta nombre del campo o su alias camelCase
        str_strip_whitespace=True,
    )
