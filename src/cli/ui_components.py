"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la lógica del comando con detalles visuales.
- Las tablas van a stderr; stdout queda para la línea OK/WARNING o el JSON.
"""

from __future__ import annotations

from rich.table import Table

from core.domain.models import CheckResult


def build_chain_table(result: CheckResult) -> Table:
    """Tabla con cada salto de la cadena y la URL final."""

    table = Table(title="Redirect chain")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Status", style="cyan", no_wrap=True)
    table.add_column("URL", style="white")
    table.add_column("Location", style="magenta")

    for index, hop in enumerate(result.hops, start=1):
        table.add_row(str(index), str(hop.status_code), hop.url, hop.location or "")

    final_status = str(result.status_code) if result.status_code is not None else "-"
    style = "green" if result.matched else "yellow"
    table.add_row(str(len(result.hops) + 1), final_status, result.resolved_url, "", style=style)
    return table
