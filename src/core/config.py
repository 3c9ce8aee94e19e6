"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI:
credenciales de la API, URL base, timeouts y nivel de logging.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import Credentials
from core.errors import ConfigError

DEFAULT_BASE_URL = "https://api.timeular.com/api/v3"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "timeular-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "timeular-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "timeular-cli"
    return Path.home() / ".config" / "timeular-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# timeular-cli user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Las credenciales se leen de `TIMEULAR_KEY` / `TIMEULAR_SECRET`. Un string
    vacío se respeta tal cual: validarlo es responsabilidad del servidor.
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMEULAR_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    key: str | None = Field(
        default=None,
        description="API key de Timeular (TIMEULAR_KEY).",
    )
    secret: str | None = Field(
        default=None,
        description="API secret de Timeular (TIMEULAR_SECRET).",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Raíz de la API (sin barra final).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="timeular-cli/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel del logger raíz.",
    )
    strict_status: bool = Field(
        default=False,
        description="Convertir respuestas no-2xx de /activities y /tracking en ApiRejected.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def credentials(self) -> Credentials:
        """Devuelve las credenciales o lanza `ConfigError` si falta alguna."""

        missing = [
            name
            for name, value in (("TIMEULAR_KEY", self.key), ("TIMEULAR_SECRET", self.secret))
            if value is None
        ]
        if missing:
            raise ConfigError(f"missing environment variable(s): {', '.join(missing)}")
        return Credentials(api_key=self.key, api_secret=self.secret)


def load_settings(**overrides: object) -> AppSettings:
    """Construye `AppSettings`; valores inválidos se reportan como `ConfigError`."""

    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
