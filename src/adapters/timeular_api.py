"""Adaptadores HTTP de la API de Timeular (v3).

Implementan los contratos de `core.interfaces.timeular` sobre un
`httpx.AsyncClient` ya configurado con la base URL (ver `http_client`).

Endpoints:
- POST /developer/sign-in            -> token
- GET  /activities                   -> catálogo
- POST /tracking/{activityId}/start  -> inicia tracking
- POST /tracking/stop                -> detiene tracking
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import bearer
from core.domain.models import (
    ActivitiesPayload,
    Catalog,
    CommandTimestamp,
    Credentials,
    SignInPayload,
    Token,
)
from core.errors import ApiRejected, AuthRejected, DecodeError, NetworkError

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "/developer/sign-in"
ACTIVITIES_PATH = "/activities"
STOP_PATH = "/tracking/stop"


def start_path(activity_id: str) -> str:
    return f"/tracking/{activity_id}/start"


async def _send(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    token: Token | None = None,
    body: dict[str, Any] | None = None,
) -> httpx.Response:
    headers = bearer(token.value) if token is not None else None
    try:
        response = await client.request(method, path, json=body, headers=headers)
    except httpx.HTTPError as exc:
        logger.debug("%s %s failed: %s", method, path, exc)
        raise NetworkError(f"{method} {path}: {exc}") from exc
    logger.debug("%s %s -> HTTP %s", method, path, response.status_code)
    return response


def _decode(response: httpx.Response, model: type, what: str) -> Any:
    try:
        return model.model_validate(response.json())
    except (json.JSONDecodeError, ValueError, ValidationError) as exc:
        raise DecodeError(f"could not decode {what} (HTTP {response.status_code})") from exc


class SessionAuthenticator:
    """Intercambia API key/secret por un bearer token. Un solo intento."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def authenticate(self, credentials: Credentials) -> Token:
        response = await _send(
            self._client, "POST", SIGN_IN_PATH, body=credentials.to_sign_in_body()
        )
        if not response.is_success:
            raise AuthRejected(response.status_code)
        payload = _decode(response, SignInPayload, "token")
        return Token(value=payload.token)


class ActivityCatalog:
    """Descarga las actividades del usuario, en el orden del servidor."""

    def __init__(self, client: httpx.AsyncClient, *, strict_status: bool = False) -> None:
        self._client = client
        self._strict_status = strict_status

    async def fetch(self, token: Token) -> Catalog:
        response = await _send(self._client, "GET", ACTIVITIES_PATH, token=token)
        if self._strict_status and not response.is_success:
            raise ApiRejected(response.status_code, ACTIVITIES_PATH, response.text)
        payload = _decode(response, ActivitiesPayload, "activities")
        return tuple(payload.activities)


class TrackingController:
    """Emite start/stop. El servidor es la única autoridad sobre el estado.

    Por defecto cualquier respuesta HTTP recibida cuenta como entregada y un
    status no-2xx solo se registra como warning. Con `strict_status=True` se
    lanza `ApiRejected`.
    """

    def __init__(self, client: httpx.AsyncClient, *, strict_status: bool = False) -> None:
        self._client = client
        self._strict_status = strict_status

    async def start(
        self,
        token: Token,
        activity_id: str,
        note: str,
        timestamp: CommandTimestamp,
    ) -> None:
        path = start_path(activity_id)
        body = {"startedAt": timestamp.value, "note": {"text": note or ""}}
        response = await _send(self._client, "POST", path, token=token, body=body)
        self._check(response, path)

    async def stop(self, token: Token, timestamp: CommandTimestamp) -> None:
        body = {"stoppedAt": timestamp.value}
        response = await _send(self._client, "POST", STOP_PATH, token=token, body=body)
        self._check(response, STOP_PATH)

    def _check(self, response: httpx.Response, path: str) -> None:
        if response.is_success:
            return
        if self._strict_status:
            raise ApiRejected(response.status_code, path, response.text)
        logger.warning("%s returned HTTP %s; the server may have ignored the request", path, response.status_code)
