"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout, headers y límite de redirecciones en un único sitio.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` que sigue redirecciones.

    Por qué un builder:
    - La política de redirecciones (seguir, con límite) es la del cliente, no
      nuestra: aquí solo se fijan sus parámetros.
    - Sin reintentos: un chequeo es una foto puntual, no un cliente resiliente.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        max_redirects=settings.max_redirects,
        headers=headers,
        transport=transport,
    )
