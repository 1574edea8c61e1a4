"""Wrapper de httpx.

- Decide si las peticiones salen directas o a través de un proxy.
- Construye clientes síncronos con timeout y User-Agent del SDK.
- `HttpUtils` ejecuta una única petición y libera cliente y respuesta al salir.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.domain.models import ProxyConfiguration, StringResponse


def has_active_proxy(proxy_configuration: ProxyConfiguration | None) -> bool:
    return proxy_configuration is not None and proxy_configuration.is_active


def get_proxy_request_config(proxy_configuration: ProxyConfiguration | None) -> httpx.Proxy | None:
    """Configuración de enrutado para un proxy activo (o `None`).

    Las credenciales, si existen, van en el `httpx.Proxy`: httpx solo las
    envía en el salto al proxy (`host:port`), nunca al servidor de destino.
    """

    if not has_active_proxy(proxy_configuration):
        return None

    assert proxy_configuration is not None
    auth: tuple[str, str] | None = None
    if proxy_configuration.has_credentials:
        auth = (str(proxy_configuration.username), str(proxy_configuration.password))
    return httpx.Proxy(
        f"http://{proxy_configuration.host}:{proxy_configuration.port}",
        auth=auth,
    )


def build_client(
    settings: AppSettings | None = None,
    proxy_configuration: ProxyConfiguration | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono.

    Sin proxy activo: cliente plano, conexión directa (se ignoran los proxies del entorno).
    Con proxy activo: todas las peticiones se enrutan por él.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    # El enrutado sale solo de `ProxyConfiguration`: ni HTTP_PROXY/HTTPS_PROXY ni .netrc.
    kwargs: dict[str, Any] = {
        "timeout": httpx.Timeout(settings.http_timeout_seconds),
        "headers": headers,
        "trust_env": False,
    }
    if transport is not None:
        kwargs["transport"] = transport

    proxy = get_proxy_request_config(proxy_configuration)
    if proxy is not None:
        kwargs["proxy"] = proxy
    return httpx.Client(**kwargs)


def build_request(
    method: str,
    url: str,
    *,
    params: list[tuple[str, str]] | None = None,
    files: dict[str, Any] | None = None,
    settings: AppSettings | None = None,
) -> httpx.Request:
    """Petición lista para `HttpUtils.execute_http_call`.

    Los parámetros van siempre en la query string, también en POST.
    """

    settings = settings or AppSettings()
    return httpx.Request(
        method,
        url,
        params=params,
        files=files,
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        extensions={"timeout": httpx.Timeout(settings.http_timeout_seconds).as_dict()},
    )


class HttpUtils:
    """Ejecuta una petición por llamada con un cliente de vida corta."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def execute_http_call(
        self,
        request: httpx.Request,
        proxy_configuration: ProxyConfiguration | None = None,
    ) -> StringResponse:
        """Envía `request` y devuelve el cuerpo (texto decodificado y bytes crudos).

        Los errores de transporte (`httpx.HTTPError`) se propagan tal cual.
        """

        with build_client(self._settings, proxy_configuration, transport=self._transport) as client:
            response = client.send(request)
            try:
                content = response.content
                contents = response.text
            finally:
                response.close()

        return StringResponse(
            contents=contents,
            content=content,
            success=response.is_success,
            status_code=response.status_code,
        )
