"""Contrato del resolver de redirecciones.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el transporte real por uno falso en tests sin acoplar el
  Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ResolvedRedirect


@runtime_checkable
class RedirectResolver(Protocol):
    """Contrato mínimo para resolver una URL hasta su destino final.

    Reglas de diseño:
    - `resolve` es síncrono: una sola petición, bloqueante, sin reintentos.
    - Cualquier fallo de transporte se lanza como `core.errors.NetworkError`.
    """

    def resolve(self, target_url: str, host_override: str | None = None) -> ResolvedRedirect:
        """Sigue las redirecciones de `target_url` y devuelve la URL final."""

        ...
