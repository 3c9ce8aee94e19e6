"""Errores del cliente.

Todas las excepciones heredan de `TimeularError`; la CLI es el único punto
que las captura, las imprime y las traduce a código de salida.
"""

from __future__ import annotations


class TimeularError(Exception):
    """Base de todos los errores que abortan una invocación."""

    kind = "error"


class ConfigError(TimeularError):
    kind = "config"


class NetworkError(TimeularError):
    """Fallo de transporte (DNS, conexión, TLS, timeout)."""

    kind = "network"


class AuthRejected(TimeularError):
    """El endpoint de sign-in respondió con un status no-2xx."""

    kind = "auth rejected"

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"sign-in failed with HTTP {status_code}")


class DecodeError(TimeularError):
    """La respuesta no es JSON o no tiene la forma esperada."""

    kind = "decode"


class InvalidPatternError(TimeularError):
    kind = "invalid pattern"


class NotFoundError(TimeularError):
    kind = "not found"


class ApiRejected(TimeularError):
    """Status no-2xx fuera del sign-in. Solo se lanza con `strict_status`."""

    kind = "api rejected"

    def __init__(self, status_code: int, path: str, body: str = "") -> None:
        self.status_code = status_code
        self.path = path
        self.body = body
        detail = f": {body}" if body else ""
        super().__init__(f"{path} returned HTTP {status_code}{detail}")
