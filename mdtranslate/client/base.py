# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from abc import ABC, abstractmethod
from dataclasses import dataclass
from logging import Logger
from typing import Self

from mdtranslate.logger import global_logger


@dataclass(kw_only=True)
class TranslationClientConfig:
    logger: Logger = global_logger


class TranslationClient(ABC):
    """
    Boundary to a remote text-translation service.

    One ``translate`` call is one request; retrying and batching are left to
    the caller. Failures surface as ``TranslationTransportError``.
    """

    def __init__(self, config: TranslationClientConfig | None = None):
        self.config = config or TranslationClientConfig()
        self.logger = self.config.logger

    @abstractmethod
    def translate(self, text: str, from_lang: str | None, to_lang: str) -> str:
        ...

    def close(self) -> None:
        pass

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
