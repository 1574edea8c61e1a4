"""Configuración del SDK.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El adaptador HTTP y la CLI leen credenciales/proxy del mismo contrato.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import ProxyConfiguration

DEFAULT_BASE_URL = "https://api.smartling.com/v1"
SANDBOX_BASE_URL = "https://sandbox-api.smartling.com/v1"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "smartling-sdk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "smartling-sdk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "smartling-sdk"
    return Path.home() / ".config" / "smartling-sdk"


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


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Los valores `None` se ignoran; el resto sobrescribe lo existente.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# smartling-sdk user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del SDK y de la CLI."""

    model_config = SettingsConfigDict(
        env_prefix="SMARTLING_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="API key del proyecto (parámetro `apiKey`).",
    )
    project_id: str | None = Field(
        default=None,
        description="Identificador del proyecto (parámetro `projectId`).",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL de la API de ficheros (producción).",
    )
    sandbox_base_url: str = Field(
        default=SANDBOX_BASE_URL,
        min_length=8,
        description="Base URL del entorno sandbox.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="smartling-sdk-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )

    proxy_host: str | None = Field(
        default=None,
        description="Host del proxy HTTP (opcional).",
    )
    proxy_port: int = Field(
        default=0,
        ge=0,
        le=65535,
        description="Puerto del proxy; 0 desactiva el proxy.",
    )
    proxy_username: str | None = Field(
        default=None,
        description="Usuario para autenticación básica contra el proxy.",
    )
    proxy_password: str | None = Field(
        default=None,
        description="Password para autenticación básica contra el proxy.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs en JSON en lugar de consola coloreada.",
    )

    def proxy_configuration(self) -> ProxyConfiguration:
        return ProxyConfiguration(
            host=self.proxy_host,
            port=self.proxy_port,
            username=self.proxy_username,
            password=self.proxy_password,
        )

    def resolve_base_url(self, sandbox: bool = False) -> str:
        return self.sandbox_base_url if sandbox else self.base_url
