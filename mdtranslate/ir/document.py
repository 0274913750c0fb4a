# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from pathlib import Path
from typing import Self


class Document:
    """Raw file content plus the naming needed to write it back out."""

    def __init__(self, content: bytes, stem: str | None = None, suffix: str = "",
                 path: Path | None = None):
        self.content = content
        self.stem = stem
        self.suffix = suffix
        self.path = path

    @property
    def name(self) -> str | None:
        if self.stem is None:
            return None
        return f"{self.stem}{self.suffix}"

    @classmethod
    def from_path(cls, path: Path | str) -> Self:
        path = Path(path)
        return cls(content=path.read_bytes(), stem=path.stem, suffix=path.suffix.lower(), path=path)

    @classmethod
    def from_bytes(cls, content: bytes, suffix: str = "", stem: str | None = None) -> Self:
        return cls(content=content, stem=stem, suffix=suffix)

    def copy(self) -> Self:
        return type(self)(content=self.content, stem=self.stem, suffix=self.suffix, path=self.path)
