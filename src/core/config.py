"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El cliente HTTP y los comandos leen el mismo contrato de configuración.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVER_URL = "https://cli.btp.cloud.sap"

_APP_DIR_NAME = "btp-cli-client"
_ENV_FILE_HEADER = "# btp-cli-client user config (.env)"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario.

    Windows usa `%APPDATA%`, macOS `Application Support` y el resto
    `$XDG_CONFIG_HOME` (o `~/.config`).
    """

    home = Path.home()
    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / _APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _read_env_file(path: Path) -> dict[str, str]:
    """Lee `KEY=valor` ignorando comentarios y comillas envolventes."""

    entries: dict[str, str] = {}
    if not path.exists():
        return entries

    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        entries[key] = value.strip().strip("\"'")
    return entries


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Los valores `None` se ignoran: no borran lo que ya estaba guardado.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = _read_env_file(env_path)
    merged.update({key: value for key, value in values.items() if value is not None})

    body = "\n".join(f"{key}={merged[key]}" for key in sorted(merged))
    env_path.write_text(f"{_ENV_FILE_HEADER}\n{body}\n", encoding="utf-8")
    return env_path


class BtpSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y adaptadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="BTP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    server_url: str = Field(
        default=DEFAULT_SERVER_URL,
        min_length=8,
        description="URL base del backend de la BTP CLI.",
    )
    user_agent: str = Field(
        default="btp-cli-client/0.1.0",
        min_length=1,
        description="User-Agent reenviado tal cual al backend.",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    max_redirects: int = Field(
        default=10,
        ge=0,
        le=50,
        description="Redirecciones máximas que sigue el transporte.",
    )

    globalaccount: str = Field(
        default="",
        description="Subdominio de la global account.",
    )
    username: str | None = Field(
        default=None,
        description="Usuario para el login con credenciales.",
    )
    password: str | None = Field(
        default=None,
        description="Password para el login con credenciales.",
    )
    idtoken: str | None = Field(
        default=None,
        description="ID token para el login sin password.",
    )
    idp: str = Field(
        default="",
        description="Identity provider propio (vacío = SAP ID service).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING, ERROR).",
    )
