# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass
from logging import Logger
from pathlib import Path
from typing import Self

from mdtranslate.client.base import TranslationClient
from mdtranslate.ir.markdown_document import MarkdownDocument
from mdtranslate.logger import global_logger
from mdtranslate.translator.md_translator import MDTranslator, MDTranslatorConfig


@dataclass(kw_only=True)
class MarkdownWorkflowConfig:
    translator_config: MDTranslatorConfig
    logger: Logger | None = None


class MarkdownWorkflow:
    """read -> translate -> export, for a single Markdown file."""

    def __init__(self, config: MarkdownWorkflowConfig, client: TranslationClient | None = None):
        self.config = config
        if config.logger:
            config.translator_config.logger = config.logger
        self.logger = config.logger or global_logger
        self.translator = MDTranslator(config.translator_config, client=client)
        self.document_original: MarkdownDocument | None = None
        self.document_translated: MarkdownDocument | None = None

    def read_path(self, path: Path | str) -> Self:
        self.document_original = MarkdownDocument.from_path(path)
        self.document_translated = None
        self.logger.info(f"Read {path}")
        return self

    def read_bytes(self, content: bytes, stem: str | None = None) -> Self:
        self.document_original = MarkdownDocument.from_bytes(content=content, suffix=".md", stem=stem)
        self.document_translated = None
        return self

    def _pre_translate(self) -> MarkdownDocument:
        if self.document_original is None:
            raise RuntimeError("File has not been read yet. Call read_path or read_bytes first.")
        return self.document_original.copy()

    def translate(self) -> Self:
        document = self._pre_translate()
        self.translator.translate(document)
        # only a fully translated document is kept
        self.document_translated = document
        return self

    async def translate_async(self) -> Self:
        document = self._pre_translate()
        await self.translator.translate_async(document)
        self.document_translated = document
        return self

    def export_to_markdown(self) -> str:
        if self.document_translated is None:
            raise RuntimeError("Document has not been translated yet. Call translate first.")
        return self.document_translated.text

    def save_as_markdown(self, path: Path | str) -> Self:
        content = self.export_to_markdown()
        path = Path(path)
        # "w" truncates an existing destination
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        self.logger.info(f"Saved {path}")
        return self

    def close(self) -> None:
        self.translator.close()
