# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from mdtranslate.client.base import TranslationClient


class IdentityTranslationClient(TranslationClient):
    """Returns every text unchanged; used when translation is skipped."""

    def translate(self, text: str, from_lang: str | None, to_lang: str) -> str:
        return text
