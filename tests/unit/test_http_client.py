"""Tests de la fábrica de clientes httpx y del enrutado por proxy."""

import base64

import httpx
import pytest
from pydantic import ValidationError

from adapters.http_client import (
    HttpUtils,
    build_client,
    build_request,
    get_proxy_request_config,
    has_active_proxy,
)
from core.domain.models import ProxyConfiguration

API_URL = httpx.URL("https://api.smartling.com/v1/file/get")


class TestHasActiveProxy:
    @pytest.mark.parametrize(
        "configuration",
        [
            None,
            ProxyConfiguration(),
            ProxyConfiguration(host=None, port=8080),
            ProxyConfiguration(host="proxy.local", port=0),
            ProxyConfiguration(host=None, port=0, username="user", password="secret"),
        ],
    )
    def test_inactive(self, configuration):
        assert has_active_proxy(configuration) is False
        assert get_proxy_request_config(configuration) is None

    def test_active(self):
        assert has_active_proxy(ProxyConfiguration(host="proxy.local", port=8080)) is True

    def test_configuration_is_immutable(self):
        configuration = ProxyConfiguration(host="proxy.local", port=8080)
        with pytest.raises(ValidationError):
            configuration.port = 9090


class TestProxyRequestConfig:
    def test_routes_to_host_and_port(self):
        proxy = get_proxy_request_config(ProxyConfiguration(host="proxy.local", port=8080))

        assert isinstance(proxy, httpx.Proxy)
        assert proxy.url.host == "proxy.local"
        assert proxy.url.port == 8080
        assert proxy.auth is None

    def test_credentials_scoped_to_proxy(self):
        proxy = get_proxy_request_config(
            ProxyConfiguration(host="proxy.local", port=8080, username="user", password="secret")
        )

        assert proxy.auth == ("user", "secret")
        assert proxy.url.host == "proxy.local"
        assert proxy.url.port == 8080

    def test_username_without_password_sends_no_credentials(self):
        proxy = get_proxy_request_config(ProxyConfiguration(host="proxy.local", port=8080, username="user"))
        assert proxy.auth is None


class TestBuildClient:
    def test_plain_client(self, settings):
        with build_client(settings) as client:
            assert isinstance(client, httpx.Client)
            assert client.headers["User-Agent"] == settings.user_agent
            assert client.timeout.read == settings.http_timeout_seconds
            assert client._transport_for_url(API_URL) is client._transport

    @pytest.mark.parametrize("configuration", [None, ProxyConfiguration(), ProxyConfiguration(host="proxy.local")])
    def test_environment_proxies_ignored_without_active_configuration(self, settings, monkeypatch, configuration):
        monkeypatch.setenv("HTTPS_PROXY", "http://env-proxy.local:3128")
        monkeypatch.setenv("HTTP_PROXY", "http://env-proxy.local:3128")
        monkeypatch.setenv("ALL_PROXY", "http://env-proxy.local:3128")

        with build_client(settings, configuration) as client:
            assert client._mounts == {}
            assert client._transport_for_url(API_URL) is client._transport
            assert client._transport_for_url(httpx.URL(settings.base_url)) is client._transport

    def test_proxied_client_routes_through_configured_host(self, settings):
        configuration = ProxyConfiguration(host="proxy.local", port=8080)

        with build_client(settings, configuration) as client:
            transport = client._transport_for_url(API_URL)

            assert transport is not client._transport
            assert transport._pool._proxy_url.host == b"proxy.local"
            assert transport._pool._proxy_url.port == 8080
            assert all(name.lower() != b"proxy-authorization" for name, _ in transport._pool._proxy_headers)

    def test_proxied_client_sends_credentials_to_proxy(self, settings):
        configuration = ProxyConfiguration(host="proxy.local", port=8080, username="user", password="secret")

        with build_client(settings, configuration) as client:
            transport = client._transport_for_url(API_URL)

            assert transport._pool._proxy_url.host == b"proxy.local"
            assert transport._pool._proxy_url.port == 8080
            assert (b"Proxy-Authorization", b"Basic " + base64.b64encode(b"user:secret")) in transport._pool._proxy_headers
            assert "Proxy-Authorization" not in client.headers

    def test_configured_proxy_wins_over_environment(self, settings, monkeypatch):
        monkeypatch.setenv("HTTPS_PROXY", "http://env-proxy.local:3128")

        with build_client(settings, ProxyConfiguration(host="proxy.local", port=8080)) as client:
            transport = client._transport_for_url(API_URL)

            assert transport._pool._proxy_url.host == b"proxy.local"
            assert transport._pool._proxy_url.port == 8080

    def test_extra_headers(self, settings):
        with build_client(settings, extra_headers={"X-Trace": "1"}) as client:
            assert client.headers["X-Trace"] == "1"


class TestBuildRequest:
    def test_params_in_query_string_for_post(self, settings):
        request = build_request(
            "POST",
            "http://host/file/rename",
            params=[("fileUri", "a"), ("newFileUri", "b")],
            settings=settings,
        )

        assert request.method == "POST"
        assert request.url.params.multi_items() == [("fileUri", "a"), ("newFileUri", "b")]
        assert request.headers["User-Agent"] == settings.user_agent
        assert request.extensions["timeout"]["read"] == settings.http_timeout_seconds


class TestHttpUtils:
    def test_success(self, settings):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="body"))
        utils = HttpUtils(settings, transport=transport)

        response = utils.execute_http_call(httpx.Request("GET", "http://host/file/get"))

        assert response.success is True
        assert response.contents == "body"
        assert response.status_code == 200

    def test_binary_body_kept_as_bytes(self, settings):
        payload = b"PK\x03\x04\x14\x00\xff\xfe\x80xl/workbook.xml"
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=payload))
        utils = HttpUtils(settings, transport=transport)

        response = utils.execute_http_call(httpx.Request("GET", "http://host/file/get"))

        assert response.content == payload

    def test_error_status(self, settings):
        transport = httpx.MockTransport(lambda request: httpx.Response(401, text='{"response": {}}'))
        utils = HttpUtils(settings, transport=transport)

        response = utils.execute_http_call(httpx.Request("GET", "http://host/file/get"))

        assert response.success is False
        assert response.status_code == 401

    def test_one_request_per_call(self, settings):
        calls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            return httpx.Response(200, text="ok")

        utils = HttpUtils(settings, transport=httpx.MockTransport(handler))
        utils.execute_http_call(httpx.Request("GET", "http://host/file/list"))
        utils.execute_http_call(httpx.Request("GET", "http://host/file/status"))

        assert calls == ["/file/list", "/file/status"]

    def test_transport_error_is_not_wrapped(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        utils = HttpUtils(settings, transport=httpx.MockTransport(handler))

        with pytest.raises(httpx.ConnectError):
            utils.execute_http_call(httpx.Request("GET", "http://host/file/get"))
