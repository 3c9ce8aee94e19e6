"""Modelos del dominio (Pydantic v2).

Estructuras de datos puras e inmutables: credenciales, token, actividades,
catálogo y la marca de tiempo de la invocación. El dominio no conoce HTTP ni
la CLI.

Nota:
- Los payloads `*Payload` describen exactamente lo que devuelve la API y se
  usan solo para decodificar respuestas.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


class Credentials(BaseModel):
    """Par key/secret de larga duración. No se valida localmente."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., description="API key (apiKey en el wire).")
    api_secret: str = Field(..., description="API secret (apiSecret en el wire).")

    def to_sign_in_body(self) -> dict[str, str]:
        return {"apiKey": self.api_key, "apiSecret": self.api_secret}


class Token(BaseModel):
    """Bearer token de la sesión. Vive solo durante el proceso."""

    model_config = ConfigDict(frozen=True)

    value: str

    def __repr__(self) -> str:
        return "Token(value='***')"

    __str__ = __repr__


class Activity(BaseModel):
    """Actividad definida en el servidor; `id` es opaco."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: str


Catalog = tuple[Activity, ...]


class CommandTimestamp(BaseModel):
    """Instante UTC capturado una vez por invocación, con milisegundos."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}$")

    @classmethod
    def capture(cls, now: datetime | None = None) -> "CommandTimestamp":
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        millis = now.microsecond // 1000
        return cls(value=f"{now.strftime(TIMESTAMP_FORMAT)}.{millis:03d}")


class SignInPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    token: str


class ActivitiesPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    activities: list[Activity]
