"""Contratos de la API de Timeular.

`CommandRunner` depende de estos Protocols y no de los adaptadores httpx;
los tests pueden sustituirlos por dobles que registran las llamadas.

Reglas de diseño:
- Todos los métodos son asíncronos porque hacen I/O (HTTP).
- El token se pasa explícitamente en cada llamada autenticada.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Catalog, CommandTimestamp, Credentials, Token


@runtime_checkable
class Authenticator(Protocol):
    async def authenticate(self, credentials: Credentials) -> Token:
        """Intercambia key/secret por un bearer token."""

        ...


@runtime_checkable
class ActivitySource(Protocol):
    async def fetch(self, token: Token) -> Catalog:
        """Devuelve el catálogo en el orden del servidor."""

        ...


@runtime_checkable
class Tracker(Protocol):
    async def start(
        self,
        token: Token,
        activity_id: str,
        note: str,
        timestamp: CommandTimestamp,
    ) -> None:
        ...

    async def stop(self, token: Token, timestamp: CommandTimestamp) -> None:
        ...
