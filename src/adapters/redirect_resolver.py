"""Resolver de redirecciones sobre httpx.

Implementa `core.interfaces.resolver.RedirectResolver`:
- Una sola petición GET en streaming; httpx sigue la cadena 3xx + Location
  y el body de la respuesta final nunca se descarga.
- La URL resuelta es la de la última petición enviada (`response.request.url`).
- Cualquier error de transporte sale como `NetworkError` con el texto original.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import RedirectHop, ResolvedRedirect
from core.errors import NetworkError
from core.interfaces.resolver import RedirectResolver

logger = logging.getLogger(__name__)


class HttpxRedirectResolver(RedirectResolver):
    """Sigue redirecciones con `httpx.Client` y devuelve el destino final."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def resolve(self, target_url: str, host_override: str | None = None) -> ResolvedRedirect:
        headers: dict[str, str] = {}
        if host_override:
            # Solo la petición inicial: httpx reescribe Host en saltos a otro origen.
            headers["Host"] = host_override

        try:
            with build_client(self._settings, transport=self._transport) as client:
                # Sin leer el body final: solo interesan la URL, el status y la cadena.
                with client.stream("GET", target_url, headers=headers) as response:
                    resolved_url = str(response.request.url)
                    status_code = response.status_code
                    history = list(response.history)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # UnicodeEncodeError: httpx codifica las cabeceras en ASCII (Host no ASCII).
            logger.debug("Request to %s failed: %r", target_url, exc)
            raise NetworkError(str(exc)) from exc

        hops = [
            RedirectHop(
                url=str(hop.request.url),
                status_code=hop.status_code,
                location=hop.headers.get("location"),
            )
            for hop in history
        ]
        for hop in hops:
            logger.debug("%s %s -> %s", hop.status_code, hop.url, hop.location)

        logger.debug("Resolved %s to %s (HTTP %s)", target_url, resolved_url, status_code)
        return ResolvedRedirect(
            resolved_url=resolved_url,
            status_code=status_code,
            hops=hops,
        )
