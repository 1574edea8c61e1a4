"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client, has_active_proxy
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    """Reachability only: any HTTP answer (even 4xx) means the route works."""

    try:
        with build_client(settings, settings.proxy_configuration()) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run(
    sandbox: bool = typer.Option(False, "--sandbox", help="Check the sandbox environment."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    proxy = settings.proxy_configuration()

    table = Table(title="Smartling SDK Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API key", "OK" if settings.api_key else "MISSING", "SMARTLING_API_KEY")
    table.add_row("Project ID", "OK" if settings.project_id else "MISSING", settings.project_id or "SMARTLING_PROJECT_ID")

    base_url = settings.resolve_base_url(sandbox)
    table.add_row("Base URL", "OK", base_url)

    if has_active_proxy(proxy):
        auth = "with credentials" if proxy.has_credentials else "no credentials"
        table.add_row("Proxy", "ON", f"{proxy.host}:{proxy.port} ({auth})")
    else:
        table.add_row("Proxy", "OFF", "Direct connection")

    ok_http, detail_http = _check_http(settings, base_url)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.api_key or not settings.project_id:
        _console.print("\n[yellow]Note:[/yellow] run `smartling doctor setup` to store credentials.")


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    api_key = typer.prompt("API key", hide_input=True, confirmation_prompt=False).strip()
    project_id = typer.prompt("Project ID").strip()
    if not api_key or not project_id:
        raise typer.BadParameter("api key and project id are required")

    values: dict[str, str | None] = {
        "SMARTLING_API_KEY": api_key,
        "SMARTLING_PROJECT_ID": project_id,
    }

    if typer.confirm("Route requests through an HTTP proxy?", default=False):
        values["SMARTLING_PROXY_HOST"] = typer.prompt("Proxy host").strip()
        values["SMARTLING_PROXY_PORT"] = str(typer.prompt("Proxy port", type=int))
        username = typer.prompt("Proxy username (empty for none)", default="", show_default=False).strip()
        if username:
            values["SMARTLING_PROXY_USERNAME"] = username
            values["SMARTLING_PROXY_PASSWORD"] = typer.prompt("Proxy password", hide_input=True).strip()

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved config to:[/green] {env_path}")
