# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
import re
from logging import Logger
from typing import Sequence

from mdtranslate.client.base import TranslationClient
from mdtranslate.errors import ConfigurationError, UnsupportedConstructError
from mdtranslate.ir.nodes import (
    Block, CodeBlock, Heading, Inline, ListBlock, Paragraph, Table, TableCell, UnsupportedBlock,
)
from mdtranslate.logger import global_logger
from mdtranslate.translator.inline_collector import collect

INDENT_WIDTH = 4
CODE_INDENT = " " * 4
CODE_FENCE = "````"  # wider than ``` so fenced content may itself contain ```
HEADER_SEPARATOR = "--------"

_backtick_run = re.compile(r"^\s*(`{3,})")


def get_indent(nest_level: int) -> str:
    return " " * (INDENT_WIDTH * nest_level)


class BlockTranslator:
    """
    Renders one block (and everything nested in it) back to Markdown, sending
    prose through the translation client on the way.

    Every ``render`` call ends its output with a line break. Nesting is passed
    down explicitly, so each block can be rendered on its own.
    """

    def __init__(self, client: TranslationClient, to_lang: str, from_lang: str | None = None,
                 logger: Logger = global_logger):
        if not to_lang or not to_lang.strip():
            raise ConfigurationError(f'The target language is invalid. The value was "{to_lang}".')
        self.client = client
        self.to_lang = to_lang
        self.from_lang = from_lang
        self.logger = logger
        self.request_count = 0

    def render(self, block: Block, nest_level: int = 0) -> str:
        if isinstance(block, Paragraph):
            return self._render_paragraph(block, nest_level)
        if isinstance(block, Heading):
            return self._render_heading(block, nest_level)
        if isinstance(block, ListBlock):
            return self._render_list(block, nest_level)
        if isinstance(block, CodeBlock):
            return self._render_code(block, nest_level)
        if isinstance(block, Table):
            return self._render_table(block, nest_level)
        if isinstance(block, UnsupportedBlock):
            raise UnsupportedConstructError(block.kind, category="block", line=block.line)
        raise UnsupportedConstructError(type(block).__name__, category="block")

    def translate_inlines(self, inlines: Sequence[Inline]) -> str:
        decision = collect(inlines)
        if not decision.should_translate or not decision.text.strip():
            return decision.text
        self.request_count += 1
        return self.client.translate(decision.text, self.from_lang, self.to_lang)

    def _render_paragraph(self, block: Paragraph, nest_level: int) -> str:
        return f"{get_indent(nest_level)}{self.translate_inlines(block.inlines)}\n"

    def _render_heading(self, block: Heading, nest_level: int) -> str:
        marks = "#" * block.level
        return f"{get_indent(nest_level)}{marks} {self.translate_inlines(block.inlines)}\n"

    def _render_list(self, block: ListBlock, nest_level: int) -> str:
        indent = get_indent(nest_level)
        number = block.start
        parts: list[str] = []

        for item in block.items:
            if not item.children:
                continue
            lead = item.children[0]
            if not isinstance(lead, Paragraph):
                raise UnsupportedConstructError(
                    f"list item starting with {type(lead).__name__}", category="block"
                )
            if block.ordered:
                marker = f"{number}."
                number += 1
            else:
                marker = block.bullet
            parts.append(f"{indent}{marker} {self.translate_inlines(lead.inlines)}\n\n")

            for child in item.children[1:]:
                child_text = self.render(child, nest_level + 1)
                if child_text and not child_text.endswith("\n\n"):
                    child_text += "\n"
                parts.append(child_text)

        return "".join(parts)

    def _render_code(self, block: CodeBlock, nest_level: int) -> str:
        indent = get_indent(nest_level)
        if block.fenced:
            fence = _fence_for(block.lines)
            lines = [fence + block.info, *block.lines, fence]
        else:
            lines = [CODE_INDENT + line if line else line for line in block.lines]
        return "".join(f"{indent}{line}\n" if line else "\n" for line in lines)

    def _render_table(self, block: Table, nest_level: int) -> str:
        indent = get_indent(nest_level)
        if not block.rows:
            return ""
        column_count = len(block.rows[0].cells)
        lines: list[str] = []

        for row in block.rows:
            cells = [self._render_cell(cell) for cell in row.cells[:column_count]]
            cells += [""] * (column_count - len(cells))
            lines.append(f"{indent}| {' | '.join(cells)} |\n")
            if row.is_header:
                lines.append(f"{indent}| {' | '.join([HEADER_SEPARATOR] * column_count)} |\n")

        return "".join(lines)

    def _render_cell(self, cell: TableCell) -> str:
        text = "".join(self.translate_inlines(paragraph.inlines) for paragraph in cell.children)
        # an unescaped pipe would split the cell in two
        return re.sub(r"(?<!\\)\|", r"\\|", text)


def _fence_for(lines: Sequence[str]) -> str:
    longest = 0
    for line in lines:
        match = _backtick_run.match(line)
        if match:
            longest = max(longest, len(match.group(1)))
    if longest >= len(CODE_FENCE):
        return "`" * (longest + 1)
    return CODE_FENCE
