# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
"""
Wire format of the Microsoft Translator client, checked against httpx.MockTransport.
"""
import json

import httpx
import pytest

from mdtranslate.client.microsoft_client import (
    DEFAULT_ENDPOINT, MicrosoftTranslatorClient, MicrosoftTranslatorConfig, build_query_params,
)
from mdtranslate.errors import ConfigurationError, TranslationTransportError


def ok_response(text: str) -> httpx.Response:
    return httpx.Response(200, json=[{"translations": [{"text": text, "to": "en"}]}])


def make_client(handler, **config_kwargs) -> tuple[MicrosoftTranslatorClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    config_kwargs.setdefault("api_key", "secret")
    http_client = httpx.Client(transport=httpx.MockTransport(recording_handler))
    return MicrosoftTranslatorClient(MicrosoftTranslatorConfig(**config_kwargs), http_client=http_client), requests


class TestRequest:
    def test_request_shape(self):
        client, requests = make_client(lambda request: ok_response("Hello"))
        assert client.translate("こんにちは", "ja", "en") == "Hello"

        [request] = requests
        assert request.method == "POST"
        assert request.url.path == "/translate"
        assert str(request.url).startswith(DEFAULT_ENDPOINT)
        assert dict(request.url.params) == {"api-version": "3.0", "from": "ja", "to": "en"}
        assert request.headers["Ocp-Apim-Subscription-Key"] == "secret"
        assert "Ocp-Apim-Subscription-Region" not in request.headers
        assert json.loads(request.content) == [{"Text": "こんにちは"}]

    def test_source_language_is_optional(self):
        client, requests = make_client(lambda request: ok_response("Hello"))
        client.translate("こんにちは", None, "en")
        assert "from" not in requests[0].url.params
        assert requests[0].url.params["to"] == "en"

    def test_region_header(self):
        client, requests = make_client(lambda request: ok_response("Hello"), region="japaneast")
        client.translate("こんにちは", "ja", "en")
        assert requests[0].headers["Ocp-Apim-Subscription-Region"] == "japaneast"

    def test_custom_endpoint_trailing_slash(self):
        client, requests = make_client(
            lambda request: ok_response("Hello"), endpoint="https://example.test/translator/"
        )
        client.translate("a", None, "en")
        assert str(requests[0].url).startswith("https://example.test/translator/translate?")


class TestQueryParams:
    def test_order(self):
        assert list(build_query_params("ja", "en")) == ["api-version", "from", "to"]

    def test_blank_source_is_dropped(self):
        assert build_query_params("  ", "en") == {"api-version": "3.0", "to": "en"}

    @pytest.mark.parametrize("to_lang", [None, "", "   "])
    def test_missing_target_is_a_configuration_error(self, to_lang):
        with pytest.raises(ConfigurationError):
            build_query_params("ja", to_lang)


class TestConfiguration:
    @pytest.mark.parametrize("api_key", [None, "", "  "])
    def test_missing_key(self, api_key):
        with pytest.raises(ConfigurationError):
            MicrosoftTranslatorClient(MicrosoftTranslatorConfig(api_key=api_key))

    def test_blank_target_makes_no_request(self):
        client, requests = make_client(lambda request: ok_response("Hello"))
        with pytest.raises(ConfigurationError):
            client.translate("a", "ja", "")
        assert requests == []


class TestFailures:
    def test_http_error_status(self):
        client, _ = make_client(lambda request: httpx.Response(401, text="invalid key"))
        with pytest.raises(TranslationTransportError) as exc_info:
            client.translate("a", "ja", "en")
        assert exc_info.value.status_code == 401
        assert "401" in str(exc_info.value)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(handler)
        with pytest.raises(TranslationTransportError) as exc_info:
            client.translate("a", "ja", "en")
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json={"error": "unexpected"}),
            httpx.Response(200, text="not json"),
            httpx.Response(200, json=[{"translations": []}]),
            httpx.Response(200, json=[{"translations": [{"text": 1}]}]),
        ],
        ids=["object", "not-json", "no-translations", "non-string-text"],
    )
    def test_malformed_body(self, response):
        client, _ = make_client(lambda request: response)
        with pytest.raises(TranslationTransportError):
            client.translate("a", "ja", "en")


class TestClose:
    def test_injected_client_is_not_closed(self):
        http_client = httpx.Client(transport=httpx.MockTransport(lambda request: ok_response("x")))
        client = MicrosoftTranslatorClient(MicrosoftTranslatorConfig(api_key="k"), http_client=http_client)
        client.close()
        assert http_client.is_closed is False

    def test_owned_client_is_closed(self):
        with MicrosoftTranslatorClient(MicrosoftTranslatorConfig(api_key="k")) as client:
            pass
        assert client._client.is_closed is True
