"""Contrato de cliente de la API de ficheros.

Protocol estructural: cualquier objeto con estos métodos sirve (el adaptador
HTTP real o un doble en tests).
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.file_types import RetrievalType
from core.domain.models import (
    ApiResponse,
    EmptyResponse,
    FileLastModified,
    FileList,
    FileStatus,
    StringResponse,
    UploadFileData,
)
from core.domain.params import FileListSearchParams, FileUploadParameterBuilder


@runtime_checkable
class FileApiClient(Protocol):
    """Operaciones de la API de ficheros; cada llamada es una única petición HTTP."""

    def get_file(
        self,
        file_uri: str,
        locale: str,
        retrieval_type: RetrievalType | None = None,
    ) -> StringResponse: ...

    def get_files_list(self, search_params: FileListSearchParams) -> ApiResponse[FileList]: ...

    def get_file_status(self, file_uri: str, locale: str) -> ApiResponse[FileStatus]: ...

    def get_last_modified(
        self,
        file_uri: str,
        last_modified_after: datetime | None = None,
        locale: str | None = None,
    ) -> ApiResponse[FileLastModified]: ...

    def rename_file(self, file_uri: str, new_file_uri: str) -> ApiResponse[EmptyResponse]: ...

    def delete_file(self, file_uri: str) -> ApiResponse[EmptyResponse]: ...

    def upload_file(
        self,
        path: Path,
        charset: str,
        builder: FileUploadParameterBuilder,
    ) -> ApiResponse[UploadFileData]: ...
