"""Entry point de desarrollo (sin instalar el paquete).

Uso desde la raíz del repo:
- `python -m main list`
- `python main.py start "code" "review"`

Añade `src/` al path y delega en la app Typer; instalado, el mismo
comando es `timeular`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC) not in sys.path:
        sys.path.insert(0, str(SRC))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
