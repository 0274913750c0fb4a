# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from mdtranslate.ir.document import Document


class MarkdownDocument(Document):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.suffix = ".md"

    @property
    def text(self) -> str:
        # utf-8-sig drops a BOM left by editors on Windows
        return self.content.decode("utf-8-sig")

    @text.setter
    def text(self, value: str):
        self.content = value.encode("utf-8")
