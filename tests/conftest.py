# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
"""
Shared fixtures: deterministic translation clients so no test touches the network.
"""
import pytest

from mdtranslate.client.base import TranslationClient
from mdtranslate.translator.block_translator import BlockTranslator
from mdtranslate.translator.md_translator import MDTranslator, MDTranslatorConfig


class StubTranslationClient(TranslationClient):
    """Looks texts up in a fixed table; unknown texts come back unchanged."""

    def __init__(self, table: dict[str, str] | None = None):
        super().__init__()
        self.table = table or {}
        self.calls: list[tuple[str, str | None, str]] = []
        self.closed = False

    def translate(self, text, from_lang, to_lang):
        self.calls.append((text, from_lang, to_lang))
        return self.table.get(text, text)

    @property
    def texts(self) -> list[str]:
        return [text for text, _, _ in self.calls]

    def close(self):
        self.closed = True


JA_EN = {
    "こんにちは": "Hello",
    "これはテストです。": "This is a test.",
    "一": "One",
    "二": "Two",
    "三": "Three",
    "親": "Parent",
    "子": "Child",
    "孫": "Grandchild",
    "見出し": "Heading",
    "項目": "Item",
    "本文": "Body",
    "名前": "Name",
    "値": "Value",
    "りんご": "apple",
    "これは重要です": "This is important",
    "詳細はこちらを参照": "See here for details",
}


@pytest.fixture
def stub_client():
    return StubTranslationClient(JA_EN)


@pytest.fixture
def block_translator(stub_client):
    return BlockTranslator(client=stub_client, from_lang="ja", to_lang="en")


@pytest.fixture
def md_translator(stub_client):
    return MDTranslator(MDTranslatorConfig(from_lang="ja", to_lang="en"), client=stub_client)


@pytest.fixture
def identity_translator():
    return MDTranslator(MDTranslatorConfig(skip_translate=True))
