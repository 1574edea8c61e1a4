"""Parámetros de petición de la API de ficheros.

Nombres de parámetros fijos, formato de fecha único y los objetos que el
llamador rellena antes de aplanarlos a pares nombre/valor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.domain.file_types import FileType

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

QueryParams = list[tuple[str, str]]


class FileApiParams:
    API_KEY = "apiKey"
    PROJECT_ID = "projectId"
    FILE_URI = "fileUri"
    NEW_FILE_URI = "newFileUri"
    LOCALE = "locale"
    RETRIEVAL_TYPE = "retrievalType"
    FILE_TYPE = "fileType"
    FILE_TYPES = "fileTypes"
    LIMIT = "limit"
    OFFSET = "offset"
    URI_MASK = "uriMask"
    LAST_UPLOADED_AFTER = "lastUploadedAfter"
    LAST_UPLOADED_BEFORE = "lastUploadedBefore"
    CONDITIONS = "conditions"
    ORDERBY = "orderBy"
    APPROVED = "approved"
    CALLBACK_URL = "callbackUrl"
    LOCALES_TO_APPROVE = "localesToApprove"
    OVERWRITE_APPROVED_LOCALES = "overwriteApprovedLocales"
    LAST_MODIFIED_AFTER = "lastModifiedAfter"
    FILE = "file"


def format_date(value: datetime) -> str:
    """Formatea en UTC con `DATE_FORMAT`. Las fechas naive se toman como UTC."""

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DATE_FORMAT)


def parse_date(text: str) -> datetime:
    return datetime.strptime(text, DATE_FORMAT).replace(tzinfo=timezone.utc)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class FileListSearchParams:
    """Filtros opcionales para `file/list`.

    Los campos a `None` (o listas vacías) no se envían.
    """

    locale: str | None = None
    uri_mask: str | None = None
    file_types: list[str] = field(default_factory=list)
    last_uploaded_after: datetime | None = None
    last_uploaded_before: datetime | None = None
    offset: int | None = None
    limit: int | None = None
    conditions: list[str] = field(default_factory=list)
    order_by: list[str] = field(default_factory=list)

    def to_params(self) -> QueryParams:
        params: QueryParams = []
        if self.locale is not None:
            params.append((FileApiParams.LOCALE, self.locale))
        if self.uri_mask is not None:
            params.append((FileApiParams.URI_MASK, self.uri_mask))
        for file_type in self.file_types:
            params.append((FileApiParams.FILE_TYPES, _file_type_name(file_type)))
        if self.last_uploaded_after is not None:
            params.append((FileApiParams.LAST_UPLOADED_AFTER, format_date(self.last_uploaded_after)))
        if self.last_uploaded_before is not None:
            params.append((FileApiParams.LAST_UPLOADED_BEFORE, format_date(self.last_uploaded_before)))
        if self.offset is not None:
            params.append((FileApiParams.OFFSET, str(self.offset)))
        if self.limit is not None:
            params.append((FileApiParams.LIMIT, str(self.limit)))
        for condition in self.conditions:
            params.append((FileApiParams.CONDITIONS, condition))
        for order in self.order_by:
            params.append((FileApiParams.ORDERBY, order))
        return params


def _file_type_name(file_type: str | FileType) -> str:
    if isinstance(file_type, FileType):
        return file_type.name
    return file_type


class FileUploadParameterBuilder:
    """Builder fluido para las opciones de `file/upload`.

    Cada setter devuelve `self`; lo que no se fija no se envía.
    """

    def __init__(self) -> None:
        self._file_uri: str | None = None
        self._file_type: FileType | None = None
        self._approved: bool | None = None
        self._callback_url: str | None = None
        self._locales_to_approve: list[str] = []
        self._overwrite_approved_locales: bool | None = None

    def file_uri(self, file_uri: str) -> "FileUploadParameterBuilder":
        self._file_uri = file_uri
        return self

    def file_type(self, file_type: FileType) -> "FileUploadParameterBuilder":
        self._file_type = file_type
        return self

    def approve_content(self, approved: bool) -> "FileUploadParameterBuilder":
        self._approved = approved
        return self

    def callback_url(self, callback_url: str) -> "FileUploadParameterBuilder":
        self._callback_url = callback_url
        return self

    def locales_to_approve(self, locales: list[str]) -> "FileUploadParameterBuilder":
        self._locales_to_approve = list(locales)
        return self

    def overwrite_approved_locales(self, overwrite: bool) -> "FileUploadParameterBuilder":
        self._overwrite_approved_locales = overwrite
        return self

    @property
    def uri(self) -> str | None:
        return self._file_uri

    @property
    def type(self) -> FileType | None:
        return self._file_type

    def to_params(self) -> QueryParams:
        params: QueryParams = []
        if self._file_uri is not None:
            params.append((FileApiParams.FILE_URI, self._file_uri))
        if self._file_type is not None:
            params.append((FileApiParams.FILE_TYPE, self._file_type.identifier))
        if self._approved is not None:
            params.append((FileApiParams.APPROVED, format_bool(self._approved)))
        if self._callback_url is not None:
            params.append((FileApiParams.CALLBACK_URL, self._callback_url))
        # La API espera `localesToApprove[0]`, `localesToApprove[1]`, ...
        for index, locale in enumerate(self._locales_to_approve):
            params.append((f"{FileApiParams.LOCALES_TO_APPROVE}[{index}]", locale))
        if self._overwrite_approved_locales is not None:
            params.append(
                (FileApiParams.OVERWRITE_APPROVED_LOCALES, format_bool(self._overwrite_approved_locales))
            )
        return params
