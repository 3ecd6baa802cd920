"""Errores del Core.

Por qué una jerarquía propia:
- La CLI decide el código de salida en un único sitio a partir de `outcome`.
- Los adaptadores traducen excepciones de httpx a `NetworkError` para que el
  Core no dependa de la librería HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.domain.outcome import CheckOutcome

if TYPE_CHECKING:
    from core.domain.models import CheckResult


class RedirectCheckError(Exception):
    """Base de todos los fallos terminales de un chequeo."""

    outcome: CheckOutcome = CheckOutcome.NETWORK_ERROR


class UsageError(RedirectCheckError):
    """Faltan argumentos posicionales (target y expected)."""

    outcome = CheckOutcome.USAGE_ERROR

    def __init__(self, message: str = "Expects 'target url' and 'expected url' as first arguments") -> None:
        super().__init__(message)


class NetworkError(RedirectCheckError):
    """Fallo de transporte: DNS, conexión, TLS, timeout o demasiadas redirecciones.

    El mensaje es el texto del error subyacente, sin reescribir.
    """

    outcome = CheckOutcome.NETWORK_ERROR


class MismatchError(RedirectCheckError):
    """La petición terminó bien pero en una URL distinta de la esperada."""

    outcome = CheckOutcome.MISMATCH

    def __init__(self, result: CheckResult) -> None:
        self.result = result
        super().__init__(
            f"Target url: {result.target_url} . "
            f"Expected url: {result.expected_url} . "
            f"Returns url {result.resolved_url} !"
        )


class ConfigError(RedirectCheckError):
    """Variables `REDIRECT_CHECK_*` con valores inválidos."""

    outcome = CheckOutcome.USAGE_ERROR
