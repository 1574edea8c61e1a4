"""Excepciones del SDK.

Jerarquía:
- `SmartlingError`: base común.
- `ApiError`: la API respondió con un código distinto de SUCCESS.
- `ApiValidationError`: la API rechazó los parámetros (VALIDATION_ERROR).

Los fallos de transporte (httpx) y de cuerpo malformado no se envuelven.
"""

from __future__ import annotations

from typing import Any, Sequence


class SmartlingError(Exception):
    """Excepción base de todos los errores del SDK."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ApiError(SmartlingError):
    """Respuesta de la API con código de error (no SUCCESS)."""

    def __init__(self, code: str, messages: Sequence[str] | None = None):
        self.messages = list(messages or [])
        message = "; ".join(self.messages) or f"API call failed with code {code}"
        super().__init__(message, code=code, details={"messages": self.messages})


class ApiValidationError(ApiError):
    """La API rechazó los parámetros de la petición."""
