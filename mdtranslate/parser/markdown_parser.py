# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
"""
Adapter from markdown-it-py's token stream to the typed tree in ``mdtranslate.ir.nodes``.

The CommonMark preset is used with the GFM pipe table rule switched on, which
covers headings, nested lists, fenced/indented code, tables, emphasis,
links/images, code spans and line breaks.
"""
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdtranslate.ir.nodes import (
    Block, CodeBlock, CodeSpan, Emphasis, Heading, Inline, LineBreak, Link, ListBlock, ListItem,
    Literal, Paragraph, Table, TableCell, TableRow, UnsupportedBlock, UnsupportedInline,
)


def create_markdown_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark").enable("table")
    # link and image targets stay as written: no percent-encoding, no punycode
    md.normalizeLink = lambda url: url
    return md


_default_parser = create_markdown_parser()


def parse_markdown(markdown: str, md: MarkdownIt | None = None) -> list[Block]:
    """Parse the whole document and return its top-level blocks in order."""
    md = md or _default_parser
    root = SyntaxTreeNode(md.parse(markdown))
    return [_convert_block(node) for node in root.children]


def _line_of(node: SyntaxTreeNode) -> int | None:
    return node.map[0] + 1 if node.map else None


def _split_lines(content: str) -> tuple[str, ...]:
    if not content:
        return ()
    if content.endswith("\n"):
        content = content[:-1]
    return tuple(content.split("\n"))


def _convert_block(node: SyntaxTreeNode) -> Block:
    if node.type == "paragraph":
        return Paragraph(_inline_content(node))
    if node.type == "heading":
        return Heading(level=int(node.tag[1:]), inlines=_inline_content(node))
    if node.type in ("bullet_list", "ordered_list"):
        return _convert_list(node)
    if node.type == "fence":
        return CodeBlock(lines=_split_lines(node.content), fenced=True, info=node.info.strip())
    if node.type == "code_block":
        return CodeBlock(lines=_split_lines(node.content), fenced=False)
    if node.type == "table":
        return _convert_table(node)
    # blockquote, hr, html_block, ...
    return UnsupportedBlock(kind=node.type, line=_line_of(node))


def _convert_list(node: SyntaxTreeNode) -> ListBlock:
    items = tuple(
        ListItem(children=tuple(_convert_block(child) for child in item.children))
        for item in node.children
    )
    if node.type == "ordered_list":
        start = int(node.attrs.get("start", 1))
        return ListBlock(items=items, ordered=True, bullet=node.markup, start=start)
    return ListBlock(items=items, ordered=False, bullet=node.markup)


def _convert_table(node: SyntaxTreeNode) -> Table:
    rows = []
    for section in node.children:
        for tr in section.children:
            cells = tuple(TableCell(children=_cell_paragraphs(cell)) for cell in tr.children)
            rows.append(TableRow(cells=cells, is_header=section.type == "thead"))
    return Table(rows=tuple(rows))


def _cell_paragraphs(cell: SyntaxTreeNode) -> tuple[Paragraph, ...]:
    inlines = _inline_content(cell)
    return (Paragraph(inlines),) if inlines else ()


def _inline_content(node: SyntaxTreeNode) -> tuple[Inline, ...]:
    for child in node.children:
        if child.type == "inline":
            return _convert_inlines(child.children)
    return ()


def _convert_inlines(nodes: list[SyntaxTreeNode]) -> tuple[Inline, ...]:
    result: list[Inline] = []
    for node in nodes:
        inline = _convert_inline(node)
        # markdown-it may leave adjacent text tokens; one run of text is one literal
        if isinstance(inline, Literal) and result and isinstance(result[-1], Literal):
            result[-1] = Literal(result[-1].text + inline.text)
        else:
            result.append(inline)
    return tuple(result)


def _convert_inline(node: SyntaxTreeNode) -> Inline:
    if node.type in ("text", "text_special"):
        return Literal(node.content)
    if node.type == "softbreak":
        return LineBreak(hard=False)
    if node.type == "hardbreak":
        return LineBreak(hard=True)
    if node.type in ("em", "strong"):
        return Emphasis(children=_convert_inlines(node.children), marker=node.markup)
    if node.type == "link":
        return Link(url=str(node.attrs.get("href", "")),
                    children=_convert_inlines(node.children),
                    title=_title_of(node))
    if node.type == "image":
        return Link(url=str(node.attrs.get("src", "")),
                    children=_convert_inlines(node.children),
                    is_image=True,
                    title=_title_of(node))
    if node.type == "code_inline":
        return CodeSpan(node.content)
    return UnsupportedInline(kind=node.type, content=node.content)


def _title_of(node: SyntaxTreeNode) -> str | None:
    title = node.attrs.get("title")
    return str(title) if title else None
