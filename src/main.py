"""Script de ejecución de la CLI `smartling` desde `src/`."""

from __future__ import annotations

import sys

# Ficheros traducidos y mensajes de la API llegan en UTF-8; consolas cp1252 fallan al pintarlos.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
