"""Errores del dominio de consultas de trofeos.

Por qué códigos de error:
- Un único tipo base con `ErrorCode` permite a la CLI (y a otros callers)
  distinguir "configuración incompleta" de "no hay resultados" sin depender
  del texto del mensaje.
- Los errores de transporte (`httpx.HTTPError`) y de decodificación
  (`pydantic.ValidationError`) NO se envuelven aquí: se propagan tal cual.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Códigos estándar de error.

    Attributes:
        CONFIG_*: Errores de configuración de la consulta (1xxx)
        RESULT_*: Resultados vacíos o inesperados (2xxx)
    """

    CONFIG_ERROR = "CONFIG_001"
    CONFIG_MISSING = "CONFIG_002"

    NO_RESULTS = "RESULT_001"


class TrophyQueryError(Exception):
    """Base de todos los errores propios de psn-trophies.

    Attributes:
        message: Mensaje legible.
        error_code: Código de `ErrorCode`.
        details: Datos adicionales (p.ej. online_id, filtros activos).
    """

    default_code: ErrorCode = ErrorCode.CONFIG_ERROR

    def __init__(
        self,
        message: str,
        error_code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convierte la excepción a dict para serializar (JSON/CLI)."""

        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


class MissingPlatformError(TrophyQueryError):
    """La consulta no tiene plataformas configuradas.

    Se lanza al pedir la secuencia, antes de cualquier I/O.
    """

    default_code = ErrorCode.CONFIG_MISSING


class NoTrophiesError(TrophyQueryError):
    """La secuencia (ya filtrada) no produjo ningún título.

    Es un resultado esperado, no un fallo de transporte.
    """

    default_code = ErrorCode.NO_RESULTS
