"""Adaptador HTTP de la API de ficheros.

Traduce llamadas tipadas a peticiones (`apiKey`/`projectId` siempre incluidos),
las ejecuta con `HttpUtils` y convierte el sobre JSON en resultado tipado o
excepción.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

from adapters.envelope import error_for, parse_envelope, unwrap_envelope
from adapters.http_client import HttpUtils, build_request
from core.config import DEFAULT_BASE_URL, AppSettings
from core.domain.file_types import RetrievalType
from core.domain.models import (
    ApiFailure,
    ApiResponse,
    EmptyResponse,
    FileLastModified,
    FileList,
    FileStatus,
    ProxyConfiguration,
    StringResponse,
    UploadFileData,
)
from core.domain.params import (
    FileApiParams,
    FileListSearchParams,
    FileUploadParameterBuilder,
    QueryParams,
    format_date,
)
from core.exceptions import ApiError
from core.logging import get_logger

T = TypeVar("T", bound=BaseModel)

logger = get_logger(__name__)

GET_FILE = "file/get"
LIST_FILES = "file/list"
FILE_STATUS = "file/status"
LAST_MODIFIED = "file/last_modified"
RENAME_FILE = "file/rename"
DELETE_FILE = "file/delete"
UPLOAD_FILE = "file/upload"


def _require(value: Any, name: str) -> Any:
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


class FileApiClientAdapter:
    """Cliente de la API de ficheros (una petición HTTP por método)."""

    def __init__(
        self,
        api_key: str,
        project_id: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        proxy_configuration: ProxyConfiguration | None = None,
        settings: AppSettings | None = None,
        http_utils: HttpUtils | None = None,
    ) -> None:
        self._api_key = _require(api_key, "api_key")
        self._project_id = _require(project_id, "project_id")
        self._base_url = _require(base_url, "base_url").rstrip("/")
        self._proxy_configuration = proxy_configuration
        self._settings = settings or AppSettings()
        self.http_utils = http_utils or HttpUtils(self._settings)

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None, *, sandbox: bool = False) -> "FileApiClientAdapter":
        settings = settings or AppSettings()
        return cls(
            settings.api_key,  # type: ignore[arg-type]
            settings.project_id,  # type: ignore[arg-type]
            base_url=settings.resolve_base_url(sandbox),
            proxy_configuration=settings.proxy_configuration(),
            settings=settings,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_file(
        self,
        file_uri: str,
        locale: str,
        retrieval_type: RetrievalType | None = None,
    ) -> StringResponse:
        """Descarga el fichero traducido; devuelve el cuerpo crudo."""

        params = [
            (FileApiParams.FILE_URI, file_uri),
            (FileApiParams.LOCALE, locale),
        ]
        if retrieval_type is not None:
            params.append((FileApiParams.RETRIEVAL_TYPE, retrieval_type.value))

        response = self._execute("GET", GET_FILE, params)
        if not response.success:
            self._raise_for_error_body(response)
        return response

    def get_files_list(self, search_params: FileListSearchParams) -> ApiResponse[FileList]:
        return self._call("GET", LIST_FILES, search_params.to_params(), FileList)

    def get_file_status(self, file_uri: str, locale: str) -> ApiResponse[FileStatus]:
        params = [
            (FileApiParams.FILE_URI, file_uri),
            (FileApiParams.LOCALE, locale),
        ]
        return self._call("GET", FILE_STATUS, params, FileStatus)

    def get_last_modified(
        self,
        file_uri: str,
        last_modified_after: datetime | None = None,
        locale: str | None = None,
    ) -> ApiResponse[FileLastModified]:
        params = [(FileApiParams.FILE_URI, file_uri)]
        if last_modified_after is not None:
            params.append((FileApiParams.LAST_MODIFIED_AFTER, format_date(last_modified_after)))
        if locale is not None:
            params.append((FileApiParams.LOCALE, locale))
        return self._call("GET", LAST_MODIFIED, params, FileLastModified)

    def rename_file(self, file_uri: str, new_file_uri: str) -> ApiResponse[EmptyResponse]:
        params = [
            (FileApiParams.FILE_URI, file_uri),
            (FileApiParams.NEW_FILE_URI, new_file_uri),
        ]
        return self._call("POST", RENAME_FILE, params, EmptyResponse)

    def delete_file(self, file_uri: str) -> ApiResponse[EmptyResponse]:
        return self._call("POST", DELETE_FILE, [(FileApiParams.FILE_URI, file_uri)], EmptyResponse)

    def upload_file(
        self,
        path: Path,
        charset: str,
        builder: FileUploadParameterBuilder,
    ) -> ApiResponse[UploadFileData]:
        """Sube `path` como multipart; las opciones del builder van en la query."""

        path = Path(path)
        file_type = builder.type
        if file_type is None:
            raise ValueError("file_type is required to upload a file")

        params = builder.to_params()
        if builder.uri is None:
            params.insert(0, (FileApiParams.FILE_URI, path.name))

        with path.open("rb") as handle:
            content = handle.read()
        files = {FileApiParams.FILE: (path.name, content, f"{file_type.mime_type}; charset={charset}")}

        return self._call("POST", UPLOAD_FILE, params, UploadFileData, files=files)

    def _identity_params(self) -> QueryParams:
        return [
            (FileApiParams.API_KEY, self._api_key),
            (FileApiParams.PROJECT_ID, self._project_id),
        ]

    def _execute(
        self,
        method: str,
        path: str,
        params: QueryParams,
        files: dict[str, Any] | None = None,
    ) -> StringResponse:
        request = build_request(
            method,
            f"{self._base_url}/{path}",
            params=self._identity_params() + params,
            files=files,
            settings=self._settings,
        )
        logger.debug("smartling_request", method=method, path=path, project_id=self._project_id)
        return self.http_utils.execute_http_call(request, self._proxy_configuration)

    def _call(
        self,
        method: str,
        path: str,
        params: QueryParams,
        data_model: type[T],
        files: dict[str, Any] | None = None,
    ) -> ApiResponse[T]:
        response = self._execute(method, path, params, files)
        try:
            return unwrap_envelope(response.contents, data_model)
        except ApiError as exc:
            logger.warning("smartling_api_error", path=path, code=exc.code, messages=exc.messages)
            raise

    def _raise_for_error_body(self, response: StringResponse) -> None:
        outcome = parse_envelope(response.contents, EmptyResponse)
        if isinstance(outcome, ApiFailure):
            logger.warning("smartling_api_error", code=outcome.code, messages=outcome.messages)
            raise error_for(outcome)
        # Status HTTP de error pero sobre con SUCCESS.
        raise ApiError(str(outcome.code), [f"HTTP {response.status_code}"])
