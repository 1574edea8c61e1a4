"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizables; los comandos solo deciden qué mostrar.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FileLastModified, FileList, FileStatus, UploadFileData
from core.exceptions import ApiError


def print_banner(console: Console) -> None:
    title = Text("Smartling SDK", style="bold cyan")
    subtitle = Text("Files API • upload • retrieve • status", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_file_list_table(file_list: FileList) -> Table:
    table = Table(title=f"Files ({file_list.file_count})")
    table.add_column("File URI", style="cyan", no_wrap=True)
    table.add_column("Type", style="white")
    table.add_column("Strings", justify="right")
    table.add_column("Words", justify="right")
    table.add_column("Approved", justify="right", style="green")
    table.add_column("Completed", justify="right", style="green")
    table.add_column("Last uploaded", style="dim")
    for status in file_list.file_list:
        table.add_row(
            status.file_uri,
            status.file_type or "-",
            str(status.string_count),
            str(status.word_count),
            str(status.approved_string_count),
            str(status.completed_string_count),
            status.last_uploaded or "-",
        )
    return table


def build_file_status_panel(status: FileStatus, locale: str) -> Panel:
    body = Text()
    body.append(f"{status.file_uri}\n", style="bold")
    body.append(f"Locale: {locale}\n")
    body.append(f"Type: {status.file_type or '-'}\n")
    body.append(f"Strings: {status.string_count}  Words: {status.word_count}\n")
    body.append(f"Approved: {status.approved_string_count}  Completed: {status.completed_string_count}\n")
    if status.last_uploaded:
        body.append(f"Last uploaded: {status.last_uploaded}", style="dim")
    return Panel(body, title="File status", border_style="cyan")


def build_last_modified_table(last_modified: FileLastModified) -> Table:
    table = Table(title="Last modified")
    table.add_column("Locale", style="cyan", no_wrap=True)
    table.add_column("Last modified (UTC)", style="white")
    for item in last_modified.items:
        table.add_row(item.locale, item.last_modified.isoformat())
    return table


def build_upload_panel(data: UploadFileData, file_uri: str) -> Panel:
    body = Text()
    body.append(f"{file_uri}\n", style="bold")
    body.append(f"Strings: {data.string_count}  Words: {data.word_count}\n")
    body.append("Overwritten existing file" if data.over_written else "New file", style="dim")
    return Panel(body, title="Upload", border_style="green")


def build_error_panel(error: ApiError) -> Panel:
    body = Text()
    body.append(f"{error.code}\n", style="bold")
    for message in error.messages:
        body.append(f"- {message}\n")
    return Panel(body, title="API error", border_style="red")
