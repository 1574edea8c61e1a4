"""Entry point de desarrollo (sin `pip install -e .`).

Permite ejecutar la CLI con `python -m main list --limit 10`: el código vive
en `src/`, así que se añade al path antes de importar `cli`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
