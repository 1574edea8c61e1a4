"""Tipos de fichero y modos de recuperación soportados por la API."""

from __future__ import annotations

from enum import Enum


class FileType(str, Enum):
    """Tipo de fichero.

    - `name` es el valor usado en filtros de listado (`fileTypes=JAVA_PROPERTIES`).
    - `value` es el identificador usado al subir (`fileType=javaProperties`).
    """

    ANDROID = "android"
    IOS = "ios"
    GETTEXT = "gettext"
    HTML = "html"
    JAVA_PROPERTIES = "javaProperties"
    YAML = "yaml"
    XLIFF = "xliff"
    XML = "xml"
    JSON = "json"
    DOCX = "docx"
    PPTX = "pptx"
    XLSX = "xlsx"
    IDML = "idml"
    RESX = "resx"
    PLAIN_TEXT = "plainText"
    CSV = "csv"
    STRINGSDICT = "stringsdict"

    @property
    def identifier(self) -> str:
        return self.value

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES.get(self, "text/plain")

    @classmethod
    def lookup(cls, text: str) -> "FileType":
        """Acepta tanto el nombre (`JAVA_PROPERTIES`) como el identificador (`javaProperties`)."""

        candidate = text.strip()
        for member in cls:
            if candidate.upper() == member.name or candidate.lower() == member.value.lower():
                return member
        raise ValueError(f"Unknown file type: {text!r}")


_MIME_TYPES: dict[FileType, str] = {
    FileType.ANDROID: "text/xml",
    FileType.IOS: "text/plain",
    FileType.GETTEXT: "text/plain",
    FileType.HTML: "text/html",
    FileType.JAVA_PROPERTIES: "text/plain",
    FileType.YAML: "text/plain",
    FileType.XLIFF: "text/xml",
    FileType.XML: "text/xml",
    FileType.JSON: "application/json",
    FileType.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    FileType.PPTX: "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    FileType.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    FileType.IDML: "application/octet-stream",
    FileType.RESX: "text/xml",
    FileType.PLAIN_TEXT: "text/plain",
    FileType.CSV: "text/csv",
    FileType.STRINGSDICT: "text/xml",
}


class RetrievalType(str, Enum):
    """Qué traducciones incluir al descargar un fichero."""

    PENDING = "pending"
    PUBLISHED = "published"
    PSEUDO = "pseudo"
