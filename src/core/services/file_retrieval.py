"""Helpers de línea de comandos para descargar y subir un fichero.

Ambos reciben la lista posicional fija de los comandos `retrieve` y
`upload`; también se pueden usar desde scripts o CI sin pasar por typer.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from adapters.file_api import FileApiClientAdapter
from core.config import AppSettings
from core.domain.file_types import FileType, RetrievalType
from core.domain.models import ApiResponse, UploadFileData
from core.domain.params import FileUploadParameterBuilder
from core.interfaces.file_api import FileApiClient

RETRIEVE_USAGE = "retrieve <sandboxMode> <apiKey> <projectId> <filePath> <locale> <outputDir>"
UPLOAD_USAGE = "upload <sandboxMode> <apiKey> <projectId> <filePath> <fileType> <charset>"


@dataclass(frozen=True)
class Credentials:
    """Identidad y entorno de destino comunes a los dos helpers."""

    sandbox: bool
    api_key: str
    project_id: str


ClientFactory = Callable[[Credentials, AppSettings], FileApiClient]


def _parse_bool(value: str) -> bool:
    # Solo "true" (sin distinguir mayúsculas) es verdadero; cualquier otro valor es falso.
    return value.strip().lower() == "true"


def _default_client_factory(credentials: Credentials, settings: AppSettings) -> FileApiClient:
    return FileApiClientAdapter(
        credentials.api_key,
        credentials.project_id,
        base_url=settings.resolve_base_url(credentials.sandbox),
        proxy_configuration=settings.proxy_configuration(),
        settings=settings,
    )


def sanitize_for_filename(value: str) -> str:
    """Fragmento seguro para nombres de fichero (`zh-Hant-TW` queda legible)."""

    out: list[str] = []
    for ch in value.strip():
        if ch.isalnum() or ch in ("-", "_", "."):
            out.append(ch)
        else:
            out.append("-")
    cleaned = "".join(out).strip("-_")
    return cleaned or "locale"


def translated_file_path(file_path: Path, locale: str, output_dir: Path) -> Path:
    return output_dir / f"{file_path.stem}_{sanitize_for_filename(locale)}{file_path.suffix}"


def retrieve(
    args: Sequence[str],
    *,
    settings: AppSettings | None = None,
    client_factory: ClientFactory | None = None,
    retrieval_type: RetrievalType | None = None,
) -> Path:
    """Descarga la traducción de un fichero y la guarda en `outputDir`.

    `args` debe ser exactamente `(sandboxMode, apiKey, projectId, filePath,
    locale, outputDir)`. El URI del fichero es su nombre; los bytes recibidos
    se escriben tal cual en `<outputDir>/<stem>_<locale><suffix>` (así los
    formatos binarios como docx o xlsx no se corrompen) y se devuelve esa ruta.
    """

    if len(args) != 6:
        raise ValueError(f"Expected 6 arguments, got {len(args)}. Usage: {RETRIEVE_USAGE}")

    sandbox_mode, api_key, project_id, file_path, locale, output_dir = args
    settings = settings or AppSettings()
    factory = client_factory or _default_client_factory

    source = Path(file_path)
    client = factory(Credentials(_parse_bool(sandbox_mode), api_key, project_id), settings)
    response = client.get_file(source.name, locale, retrieval_type)

    target = translated_file_path(source, locale, Path(output_dir))
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(response.content)
    return target


def upload(
    args: Sequence[str],
    *,
    settings: AppSettings | None = None,
    client_factory: ClientFactory | None = None,
    builder: FileUploadParameterBuilder | None = None,
) -> ApiResponse[UploadFileData]:
    """Sube un fichero para traducir.

    `args` debe ser exactamente `(sandboxMode, apiKey, projectId, filePath,
    fileType, charset)`. El URI por defecto es el nombre del fichero. El
    `builder` recibido no se modifica: se trabaja sobre una copia.
    """

    if len(args) != 6:
        raise ValueError(f"Expected 6 arguments, got {len(args)}. Usage: {UPLOAD_USAGE}")

    sandbox_mode, api_key, project_id, file_path, file_type, charset = args
    settings = settings or AppSettings()
    factory = client_factory or _default_client_factory

    source = Path(file_path)
    options = copy.deepcopy(builder) if builder is not None else FileUploadParameterBuilder()
    options.file_type(FileType.lookup(file_type))
    if options.uri is None:
        options.file_uri(source.name)

    client = factory(Credentials(_parse_bool(sandbox_mode), api_key, project_id), settings)
    return client.upload_file(source, charset, options)
