# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass, field

import httpx

from mdtranslate.client.base import TranslationClient, TranslationClientConfig
from mdtranslate.errors import ConfigurationError, TranslationTransportError

DEFAULT_ENDPOINT = "https://api.cognitive.microsofttranslator.com"
API_VERSION = "3.0"


@dataclass(kw_only=True)
class MicrosoftTranslatorConfig(TranslationClientConfig):
    api_key: str | None = field(
        default=None, metadata={"description": "Translator resource key, sent as Ocp-Apim-Subscription-Key"}
    )
    region: str | None = field(
        default=None, metadata={"description": "Only needed for regional (non-global) resources"}
    )
    endpoint: str = DEFAULT_ENDPOINT
    timeout: int = 30  # seconds (httpx read timeout)
    system_proxy_enable: bool = False


def build_query_params(from_lang: str | None, to_lang: str | None) -> dict[str, str]:
    """
    Query string of a /translate request.

    ``from`` is optional (the service detects the language when it is absent);
    ``to`` is required and its absence is a configuration error.
    """
    params = {"api-version": API_VERSION}
    if from_lang and from_lang.strip():
        params["from"] = from_lang.strip()
    if not to_lang or not to_lang.strip():
        raise ConfigurationError(f'The target language is invalid. The value was "{to_lang}".')
    params["to"] = to_lang.strip()
    return params


class MicrosoftTranslatorClient(TranslationClient):
    """Microsoft Translator Text API v3, one text per request."""

    def __init__(self, config: MicrosoftTranslatorConfig, http_client: httpx.Client | None = None):
        super().__init__(config=config)
        if not config.api_key or not config.api_key.strip():
            raise ConfigurationError(
                "A translator key is required. Set TRANSLATOR_KEY or pass --api-key."
            )
        self.key = config.api_key.strip()
        self.region = config.region.strip() if config.region else None
        self.endpoint = config.endpoint.strip().rstrip("/")
        self.timeout = httpx.Timeout(connect=5, read=config.timeout, write=30, pool=10)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(trust_env=config.system_proxy_enable)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json; charset=UTF-8",
            "Ocp-Apim-Subscription-Key": self.key,
        }
        if self.region:
            headers["Ocp-Apim-Subscription-Region"] = self.region
        return headers

    def translate(self, text: str, from_lang: str | None, to_lang: str) -> str:
        params = build_query_params(from_lang, to_lang)
        self.logger.debug(f"Translator request: {len(text)} chars, from={params.get('from', 'auto')}, to={params['to']}")
        try:
            response = self._client.post(
                f"{self.endpoint}/translate",
                params=params,
                json=[{"Text": text}],
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            result = response.json()[0]["translations"][0]["text"]
        except httpx.HTTPStatusError as e:
            self.logger.error(f"Translator HTTP status error: {e.response.status_code} - {e.response.text}")
            raise TranslationTransportError(
                f"Translator returned HTTP {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            self.logger.error(f"Translator connection error: {e!r}")
            raise TranslationTransportError(f"Translator request failed: {e!r}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            self.logger.error(f"Translator response format error: {e!r}")
            raise TranslationTransportError(f"Malformed translator response: {e!r}") from e

        if not isinstance(result, str):
            raise TranslationTransportError(f"Malformed translator response: text is {type(result).__name__}")
        return result

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
