# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from abc import ABC, abstractmethod
from dataclasses import dataclass
from logging import Logger
from typing import Generic, TypeVar

from mdtranslate.ir.document import Document
from mdtranslate.logger import global_logger


@dataclass(kw_only=True)
class TranslatorConfig:
    logger: Logger = global_logger


T = TypeVar("T", bound=Document)


class Translator(ABC, Generic[T]):
    """
    Translates a document's content in place; no format conversion happens here.
    """

    def __init__(self, config: TranslatorConfig):
        self.config = config
        self.logger = config.logger

    @abstractmethod
    def translate(self, document: T) -> "Translator[T]": ...

    @abstractmethod
    async def translate_async(self, document: T) -> "Translator[T]": ...
