"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y servicios lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "psn-trophies"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "psn-trophies"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "psn-trophies"
    return Path.home() / ".config" / "psn-trophies"


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

    lines = ["# psn-trophies user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PSN_TROPHIES_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="psn-trophies/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones a la API de trofeos.",
    )
    api_base_url: str = Field(
        default="https://us-tpy.np.community.playstation.net/trophy/v1",
        min_length=8,
        description="Base URL del servicio de trofeos.",
    )
    access_token: str | None = Field(
        default=None,
        description="Bearer token ya obtenido (la autenticación queda fuera de este paquete).",
    )

    page_size: int = Field(
        default=128,
        ge=1,
        le=128,
        description="Títulos por página (`limit`); la API acepta como máximo 128.",
    )
    default_language: Language = Field(
        default=Language.ENGLISH,
        description=(
            "Idioma por defecto de la CLI (`--language`). El builder de la librería usa "
            "`Language.default()` salvo que se llame a `with_language()`."
        ),
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel base de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON en lugar de texto.",
    )
