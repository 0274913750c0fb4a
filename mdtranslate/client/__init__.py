# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from mdtranslate.client.base import TranslationClient, TranslationClientConfig
from mdtranslate.client.identity_client import IdentityTranslationClient
from mdtranslate.client.microsoft_client import MicrosoftTranslatorClient, MicrosoftTranslatorConfig

__all__ = [
    "TranslationClient",
    "TranslationClientConfig",
    "IdentityTranslationClient",
    "MicrosoftTranslatorClient",
    "MicrosoftTranslatorConfig",
]
