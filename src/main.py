"""`python -m main` desde `src/`: misma CLI que el script `redirect-check`."""

from __future__ import annotations

import sys

# URLs with non-ASCII characters break cp1252 consoles on Windows.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
