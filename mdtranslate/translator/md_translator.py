# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
import asyncio
from dataclasses import dataclass, field
from typing import Iterator, Self

from mdtranslate.client.base import TranslationClient
from mdtranslate.client.identity_client import IdentityTranslationClient
from mdtranslate.client.microsoft_client import MicrosoftTranslatorClient, MicrosoftTranslatorConfig
from mdtranslate.ir.markdown_document import MarkdownDocument
from mdtranslate.parser.markdown_parser import parse_markdown
from mdtranslate.translator import default_params
from mdtranslate.translator.base import Translator, TranslatorConfig
from mdtranslate.translator.block_translator import BlockTranslator


@dataclass(kw_only=True)
class MDTranslatorConfig(TranslatorConfig):
    from_lang: str | None = default_params["from_lang"]
    to_lang: str = default_params["to_lang"]
    api_key: str | None = field(
        default=None, metadata={"description": "Required when skip_translate is False"}
    )
    region: str | None = None
    endpoint: str | None = None
    timeout: int = default_params["timeout"]
    system_proxy_enable: bool = False
    skip_translate: bool = False  # re-serialize only, no translator calls


class MDTranslator(Translator[MarkdownDocument]):
    def __init__(self, config: MDTranslatorConfig, client: TranslationClient | None = None):
        super().__init__(config=config)
        self.skip_translate = config.skip_translate
        self.client = client or self._create_client(config)
        self.block_translator = BlockTranslator(
            client=self.client,
            to_lang=config.to_lang,
            from_lang=config.from_lang,
            logger=self.logger,
        )

    def _create_client(self, config: MDTranslatorConfig) -> TranslationClient:
        if self.skip_translate:
            return IdentityTranslationClient()
        client_config = MicrosoftTranslatorConfig(
            api_key=config.api_key,
            region=config.region,
            timeout=config.timeout,
            system_proxy_enable=config.system_proxy_enable,
            logger=self.logger,
        )
        if config.endpoint:
            client_config.endpoint = config.endpoint
        return MicrosoftTranslatorClient(client_config)

    def iter_translated_blocks(self, markdown: str) -> Iterator[str]:
        blocks = parse_markdown(markdown)
        self.logger.info(f"Markdown parsed into {len(blocks)} blocks")
        for index, block in enumerate(blocks, start=1):
            rendered = self.block_translator.render(block, 0)
            self.logger.debug(f"Block progress: {index}/{len(blocks)}")
            if rendered:
                yield rendered

    def translate_text(self, markdown: str) -> str:
        parts: list[str] = []
        for rendered in self.iter_translated_blocks(markdown):
            # one blank line between blocks unless the previous one already ends with it
            if parts and not parts[-1].endswith("\n\n"):
                parts.append("\n")
            parts.append(rendered)
        return "".join(parts)

    def translate(self, document: MarkdownDocument) -> Self:
        self.logger.info("Translating markdown")
        self.block_translator.request_count = 0
        content = self.translate_text(document.text)
        document.text = content
        self.logger.info(f"Translation completed ({self.block_translator.request_count} requests)")
        return self

    async def translate_async(self, document: MarkdownDocument) -> Self:
        await asyncio.to_thread(self.translate, document)
        return self

    def close(self) -> None:
        self.client.close()
