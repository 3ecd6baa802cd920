"""Exportación JSON del resultado.

Por qué JSON:
- Interoperabilidad con monitorización y pipelines de despliegue.
- Formato estable (claves ordenadas) para poder comparar salidas.
"""

from __future__ import annotations

import json

from core.domain.models import CheckResult


def render_result_json(result: CheckResult) -> str:
    """Serializa `CheckResult` a JSON UTF-8 con formato estable."""

    payload = result.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
