"""CLI principal (Typer + Rich).

Los comandos solo leen opciones, llaman al adaptador/servicios y pintan el
resultado. Las credenciales salen de `AppSettings` salvo en `retrieve` y
`upload`, que reciben la lista posicional fija.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console

from adapters.file_api import FileApiClientAdapter
from adapters.json_exporter import export_model_json
from cli import doctor
from cli.ui_components import (
    build_error_panel,
    build_file_list_table,
    build_file_status_panel,
    build_last_modified_table,
    build_upload_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.file_types import RetrievalType
from core.domain.params import FileListSearchParams
from core.exceptions import ApiError
from core.logging import configure_logging
from core.services import file_retrieval

app = typer.Typer(no_args_is_help=True, help="Smartling Files API command-line client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    banner: bool = typer.Option(False, "--banner", help="Show the banner."),
) -> None:
    settings = AppSettings(log_level="DEBUG") if verbose else AppSettings()
    configure_logging(settings)
    if banner:
        print_banner(_console)


def _adapter(sandbox: bool) -> FileApiClientAdapter:
    settings = AppSettings()
    if not settings.api_key or not settings.project_id:
        raise typer.BadParameter("SMARTLING_API_KEY and SMARTLING_PROJECT_ID must be set (see `doctor setup`).")
    return FileApiClientAdapter.from_settings(settings, sandbox=sandbox)


def _fail(error: ApiError) -> typer.Exit:
    _console.print(build_error_panel(error))
    return typer.Exit(code=1)


@app.command()
def retrieve(
    args: list[str] | None = typer.Argument(
        None,
        help="sandboxMode apiKey projectId filePath locale outputDir",
    ),
    retrieval_type: RetrievalType | None = typer.Option(None, "--retrieval-type", case_sensitive=False),
) -> None:
    """Download the translation of a file into an output directory."""

    try:
        target = file_retrieval.retrieve(args or [], retrieval_type=retrieval_type)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ApiError as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Saved:[/green] {target}")


@app.command()
def upload(
    args: list[str] | None = typer.Argument(
        None,
        help="sandboxMode apiKey projectId filePath fileType charset",
    ),
) -> None:
    """Upload a file for translation."""

    try:
        response = file_retrieval.upload(args or [])
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ApiError as exc:
        raise _fail(exc) from exc
    if response.data is not None:
        _console.print(build_upload_panel(response.data, Path(args[3]).name if args else ""))


@app.command(name="list")
def list_files(
    locale: str | None = typer.Option(None, "--locale"),
    uri_mask: str | None = typer.Option(None, "--uri-mask"),
    file_types: list[str] | None = typer.Option(None, "--file-type", help="e.g. JAVA_PROPERTIES"),
    after: datetime | None = typer.Option(None, "--uploaded-after", formats=_DATE_FORMATS),
    before: datetime | None = typer.Option(None, "--uploaded-before", formats=_DATE_FORMATS),
    offset: int | None = typer.Option(None, "--offset", min=0),
    limit: int | None = typer.Option(None, "--limit", min=1),
    conditions: list[str] | None = typer.Option(None, "--condition"),
    order_by: list[str] | None = typer.Option(None, "--order-by"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the result as JSON."),
    sandbox: bool = typer.Option(False, "--sandbox"),
) -> None:
    """List project files."""

    params = FileListSearchParams(
        locale=locale,
        uri_mask=uri_mask,
        file_types=file_types or [],
        last_uploaded_after=after,
        last_uploaded_before=before,
        offset=offset,
        limit=limit,
        conditions=conditions or [],
        order_by=order_by or [],
    )
    try:
        response = _adapter(sandbox).get_files_list(params)
    except ApiError as exc:
        raise _fail(exc) from exc

    if response.data is not None:
        _console.print(build_file_list_table(response.data))
    if output is not None:
        _console.print(f"[green]JSON:[/green] {export_model_json(model=response, output_path=output)}")


@app.command()
def status(
    file_uri: str = typer.Argument(...),
    locale: str = typer.Argument(...),
    sandbox: bool = typer.Option(False, "--sandbox"),
) -> None:
    """Show translation progress of a file for one locale."""

    try:
        response = _adapter(sandbox).get_file_status(file_uri, locale)
    except ApiError as exc:
        raise _fail(exc) from exc
    if response.data is not None:
        _console.print(build_file_status_panel(response.data, locale))


@app.command(name="last-modified")
def last_modified(
    file_uri: str = typer.Argument(...),
    locale: str | None = typer.Option(None, "--locale"),
    after: datetime | None = typer.Option(None, "--after", formats=_DATE_FORMATS),
    sandbox: bool = typer.Option(False, "--sandbox"),
) -> None:
    """Show when each locale of a file was last modified."""

    try:
        response = _adapter(sandbox).get_last_modified(file_uri, after, locale)
    except ApiError as exc:
        raise _fail(exc) from exc
    if response.data is not None:
        _console.print(build_last_modified_table(response.data))


@app.command()
def rename(
    file_uri: str = typer.Argument(...),
    new_file_uri: str = typer.Argument(...),
    sandbox: bool = typer.Option(False, "--sandbox"),
) -> None:
    """Rename a file."""

    try:
        _adapter(sandbox).rename_file(file_uri, new_file_uri)
    except ApiError as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Renamed:[/green] {file_uri} -> {new_file_uri}")


@app.command()
def delete(
    file_uri: str = typer.Argument(...),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
    sandbox: bool = typer.Option(False, "--sandbox"),
) -> None:
    """Delete a file and its translations."""

    if not yes:
        typer.confirm(f"Delete {file_uri}?", abort=True)
    try:
        _adapter(sandbox).delete_file(file_uri)
    except ApiError as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Deleted:[/green] {file_uri}")


def run() -> None:
    app()
