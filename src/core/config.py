"""Configuración del Core.

Por qué aquí:
- Centraliza los ajustes del transporte (pydantic-settings) sin contaminar la CLI.
- El chequeo en sí no tiene configuración: estos valores solo afinan httpx y
  por defecto reproducen el comportamiento habitual de un cliente HTTP.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__version__ = "0.1.0"


class AppSettings(BaseSettings):
    """Ajustes del transporte HTTP.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="REDIRECT_CHECK_",
        extra="ignore",
        case_sensitive=False,
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None: sin límite, se espera al transporte.",
    )
    max_redirects: int = Field(
        default=9,
        ge=1,
        le=100,
        description="Redirecciones seguidas como máximo; la siguiente falla con NetworkError.",
    )
    user_agent: str = Field(
        default=f"redirect-check/{__version__}",
        min_length=1,
        description="User-Agent de la petición inicial y de cada salto.",
    )
