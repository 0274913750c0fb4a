# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
"""
Typed Markdown tree consumed by the block translator.

The parser adapter builds these nodes once per document; nothing mutates them
afterwards. Constructs without a renderer are kept as ``UnsupportedBlock`` /
``UnsupportedInline`` so that rendering, not parsing, decides to fail.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---- inline nodes ----

@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Emphasis:
    children: tuple[Inline, ...]
    marker: str = "*"


@dataclass(frozen=True)
class Link:
    url: str
    children: tuple[Inline, ...] = ()
    is_image: bool = False
    title: str | None = None


@dataclass(frozen=True)
class CodeSpan:
    content: str


@dataclass(frozen=True)
class LineBreak:
    hard: bool = False


@dataclass(frozen=True)
class UnsupportedInline:
    kind: str
    content: str = ""


Inline = Union[Literal, Emphasis, Link, CodeSpan, LineBreak, UnsupportedInline]


# ---- block nodes ----

@dataclass(frozen=True)
class Paragraph:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Heading:
    level: int
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class ListItem:
    children: tuple[Block, ...]


@dataclass(frozen=True)
class ListBlock:
    items: tuple[ListItem, ...]
    ordered: bool = False
    bullet: str = "-"
    start: int = 1


@dataclass(frozen=True)
class CodeBlock:
    lines: tuple[str, ...]
    fenced: bool = True
    info: str = ""


@dataclass(frozen=True)
class TableCell:
    children: tuple[Paragraph, ...] = ()


@dataclass(frozen=True)
class TableRow:
    cells: tuple[TableCell, ...]
    is_header: bool = False


@dataclass(frozen=True)
class Table:
    rows: tuple[TableRow, ...]


@dataclass(frozen=True)
class UnsupportedBlock:
    kind: str
    line: int | None = None


Block = Union[Paragraph, Heading, ListBlock, CodeBlock, Table, UnsupportedBlock]
