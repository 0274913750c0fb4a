# SPDX-FileCopyrightText: 2025 The mdtranslate Authors
# SPDX-License-Identifier: MPL-2.0
from dataclasses import dataclass
from typing import Sequence

from mdtranslate.errors import UnsupportedConstructError
from mdtranslate.ir.nodes import CodeSpan, Emphasis, Inline, LineBreak, Link, Literal


@dataclass(frozen=True)
class InlineText:
    text: str
    should_translate: bool = True


def collect(inlines: Sequence[Inline]) -> InlineText:
    """
    Flatten one run of inline nodes into the text to send for translation.

    A run made of a single link or a single code span carries no prose of its
    own: the link is rebuilt as Markdown, the code is kept, and the run is
    marked as not to be translated. Emphasis markers are not kept; its children
    are collected as a run of their own, so a link alone inside emphasis keeps
    its Markdown.
    """
    need_original_markdown = len(inlines) == 1
    parts: list[str] = []
    should_translate = True

    for inline in inlines:
        if isinstance(inline, Literal):
            parts.append(inline.text)
        elif isinstance(inline, Emphasis):
            inner = collect(inline.children)
            parts.append(inner.text)
            if need_original_markdown and not inner.should_translate:
                should_translate = False
        elif isinstance(inline, Link):
            if need_original_markdown:
                parts.append(link_markdown(inline))
                should_translate = False
            else:
                parts.append(plain_text(inline.children))
        elif isinstance(inline, CodeSpan):
            parts.append(inline.content)
            if need_original_markdown:
                should_translate = False
        elif isinstance(inline, LineBreak):
            continue
        else:
            raise UnsupportedConstructError(_kind_of(inline), category="inline")

    return InlineText(text="".join(parts), should_translate=should_translate)


def plain_text(inlines: Sequence[Inline]) -> str:
    """Text content of nested inlines (inside emphasis or link text), markup dropped."""
    parts: list[str] = []
    for inline in inlines:
        if isinstance(inline, Literal):
            parts.append(inline.text)
        elif isinstance(inline, (Emphasis, Link)):
            parts.append(plain_text(inline.children))
        elif isinstance(inline, CodeSpan):
            parts.append(inline.content)
        elif isinstance(inline, LineBreak):
            continue
        else:
            raise UnsupportedConstructError(_kind_of(inline), category="inline")
    return "".join(parts)


def link_markdown(link: Link) -> str:
    prefix = "!" if link.is_image else ""
    target = link.url
    if _needs_angle_brackets(target):
        target = f"<{target}>"
    if link.title:
        escaped_title = link.title.replace('"', '\\"')
        target = f'{target} "{escaped_title}"'
    return f"{prefix}[{plain_text(link.children)}]({target})"


def _needs_angle_brackets(url: str) -> bool:
    # a bare destination ends at whitespace and must have balanced parentheses
    return any(ch.isspace() for ch in url) or url.count("(") != url.count(")")


def _kind_of(inline) -> str:
    return getattr(inline, "kind", type(inline).__name__)
