"""Caso de uso: comprobar que una URL redirige a donde se espera.

El servicio no termina el proceso ni imprime nada: devuelve un `CheckResult`
(o deja pasar `NetworkError`) y la CLI decide el código de salida.
"""

from __future__ import annotations

import logging

from core.domain.models import CheckRequest, CheckResult
from core.interfaces.resolver import RedirectResolver

logger = logging.getLogger(__name__)


def check_redirect(request: CheckRequest, *, resolver: RedirectResolver) -> CheckResult:
    """Resuelve `request.target_url` y lo compara con `request.expected_url`.

    La comparación es byte a byte: `http://example.com/` y `http://example.com`
    no coinciden.
    """

    resolution = resolver.resolve(request.target_url, request.host_override)
    result = CheckResult.from_resolution(request, resolution)
    logger.debug(
        "Checked %s: resolved=%s expected=%s matched=%s",
        request.target_url,
        result.resolved_url,
        result.expected_url,
        result.matched,
    )
    return result
