"""Arranque local de redirect-check desde el checkout.

Uso:
- `python -m main <target_url> <expected_url> [host]`

Añade `src/` al path (los paquetes `cli`, `core` y `adapters` viven ahí) y
delega en `cli.main.run`, igual que el script `redirect-check` instalado.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
