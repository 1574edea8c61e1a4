"""Modelos del dominio (Pydantic v2).

- Configuración de proxy (objeto valor inmutable).
- Sobre de respuesta `{"response": {"code", "data", "messages"}}` modelado
  como resultado etiquetado: `ApiResponse[T]` (éxito) o `ApiFailure`.
- DTOs de la API de ficheros con alias camelCase tal como llegan en el JSON.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.params import parse_date

T = TypeVar("T")


class ProxyConfiguration(BaseModel):
    """Proxy HTTP opcional.

    Solo se considera activo con `host` definido y `port` distinto de 0.
    """

    model_config = ConfigDict(frozen=True)

    host: str | None = Field(default=None, description="Host del proxy.")
    port: int = Field(default=0, ge=0, le=65535, description="Puerto del proxy (0 = inactivo).")
    username: str | None = Field(default=None, description="Usuario para el proxy.")
    password: str | None = Field(default=None, description="Password para el proxy.")

    @property
    def is_active(self) -> bool:
        return self.host is not None and self.port != 0

    @property
    def has_credentials(self) -> bool:
        return self.username is not None and self.password is not None


class ResponseCode(str, Enum):
    """Códigos conocidos del sobre de respuesta."""

    SUCCESS = "SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
    RESOURCE_LOCKED = "RESOURCE_LOCKED"
    MAINTENANCE_MODE_ERROR = "MAINTENANCE_MODE_ERROR"
    GENERAL_ERROR = "GENERAL_ERROR"


class ApiResponse(BaseModel, Generic[T]):
    """Variante de éxito del sobre: código SUCCESS y `data` tipado."""

    model_config = ConfigDict(extra="ignore")

    code: str = Field(default=ResponseCode.SUCCESS.value, description="Código del sobre.")
    data: T | None = Field(default=None, description="Payload específico de la operación.")
    messages: list[str] = Field(default_factory=list, description="Mensajes del servidor.")


class ApiFailure(BaseModel):
    """Variante de error del sobre: código distinto de SUCCESS y mensajes."""

    model_config = ConfigDict(extra="ignore")

    code: str
    messages: list[str] = Field(default_factory=list)

    @property
    def is_validation_error(self) -> bool:
        return self.code == ResponseCode.VALIDATION_ERROR.value


class EmptyResponse(BaseModel):
    """`data` vacío (rename/delete)."""


class StringResponse(BaseModel):
    """Cuerpo crudo de una respuesta HTTP."""

    contents: str = Field(default="", description="Cuerpo decodificado.")
    content: bytes = Field(default=b"", description="Cuerpo crudo (ficheros binarios: docx, xlsx, idml...).")
    success: bool = Field(default=True, description="True si el status HTTP fue 2xx.")
    status_code: int | None = Field(default=None, description="Status HTTP.")


class FileStatus(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    file_uri: str = Field(..., alias="fileUri", description="URI del fichero en el proyecto.")
    string_count: int = Field(default=0, alias="stringCount", description="Número de strings.")
    word_count: int = Field(default=0, alias="wordCount", description="Número de palabras.")
    approved_string_count: int = Field(
        default=0,
        alias="approvedStringCount",
        description="Strings aprobados para traducción.",
    )
    completed_string_count: int = Field(
        default=0,
        alias="completedStringCount",
        description="Strings con traducción completada.",
    )
    last_uploaded: str | None = Field(
        default=None,
        alias="lastUploaded",
        description="Momento de la última subida (texto tal cual lo envía la API).",
    )
    file_type: str | None = Field(default=None, alias="fileType", description="Tipo de fichero.")
    callback_url: str | None = Field(default=None, alias="callbackUrl", description="URL de callback.")


class FileList(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    file_count: int = Field(default=0, alias="fileCount", description="Total de ficheros que cumplen el filtro.")
    file_list: list[FileStatus] = Field(default_factory=list, alias="fileList", description="Página actual.")


class FileLocaleLastModified(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    locale: str = Field(..., description="Locale al que aplica la fecha.")
    last_modified: datetime = Field(..., alias="lastModified", description="Última modificación (UTC).")

    @field_validator("last_modified", mode="before")
    @classmethod
    def _parse_last_modified(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_date(value)
        return value


class FileLastModified(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    items: list[FileLocaleLastModified] = Field(default_factory=list)
    count: int | None = Field(default=None, description="Número de items (si la API lo envía).")


class UploadFileData(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    string_count: int = Field(default=0, alias="stringCount", description="Strings detectados.")
    word_count: int = Field(default=0, alias="wordCount", description="Palabras detectadas.")
    over_written: bool = Field(
        default=False,
        alias="overWritten",
        description="True si la subida sobrescribió un fichero existente.",
    )
