"""Configuración de pytest y fixtures compartidos."""

from __future__ import annotations

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import StringResponse

API_KEY = "apiKeyValue"
PROJECT_ID = "projectIdValue"
HOST = "host"
BASE_URL = f"http://{HOST}"

_PROXY_ENV_VARS = (
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "ALL_PROXY",
    "NO_PROXY",
    "http_proxy",
    "https_proxy",
    "all_proxy",
    "no_proxy",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Aísla los tests de los proxies del host y de las variables SMARTLING_*."""
    for name in _PROXY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in ("API_KEY", "PROJECT_ID", "PROXY_HOST", "PROXY_PORT", "PROXY_USERNAME", "PROXY_PASSWORD"):
        monkeypatch.delenv(f"SMARTLING_{name}", raising=False)


@pytest.fixture
def settings() -> AppSettings:
    """Settings que ignoran cualquier .env de la máquina."""
    return AppSettings(_env_file=None, api_key=API_KEY, project_id=PROJECT_ID, base_url=BASE_URL)


class RecordingHttpUtils:
    """Sustituto de `HttpUtils`: registra cada petición y devuelve un cuerpo fijo."""

    def __init__(self, contents: str = "", success: bool = True, status_code: int = 200):
        self.contents = contents
        self.success = success
        self.status_code = status_code
        self.requests: list[httpx.Request] = []
        self.proxy_configurations: list[object] = []

    def execute_http_call(self, request: httpx.Request, proxy_configuration=None) -> StringResponse:
        self.requests.append(request)
        self.proxy_configurations.append(proxy_configuration)
        return StringResponse(
            contents=self.contents,
            content=self.contents.encode("utf-8"),
            success=self.success,
            status_code=self.status_code,
        )

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def recording_http_utils() -> RecordingHttpUtils:
    return RecordingHttpUtils()

