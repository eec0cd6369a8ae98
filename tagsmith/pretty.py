"""Indented rendering for inspection and golden files.

The escaping is the same as :mod:`tagsmith.render`; only whitespace between
nodes differs, so the output is not meant for production responses.
"""

from __future__ import annotations

from typing import Iterator, List

from .dom_model import Comment, Fragment, Node, Raw, StdElement, Text, VoidElement
from .render import DOCTYPE, PREFORMATTED, Mode, open_tag, to_string


def _is_inline(node: StdElement) -> bool:
    if node.tag in PREFORMATTED:
        return True
    return all(isinstance(child, (Text, Raw)) for child in node.children)


def _lines(node: Node, depth: int, indent: int, mode: Mode, doctype: bool) -> Iterator[str]:
    pad = " " * (indent * depth)
    if isinstance(node, Fragment):
        for child in node.children:
            yield from _lines(child, depth, indent, mode, doctype)
    elif isinstance(node, StdElement):
        if node.tag == "html" and doctype and mode == "html":
            yield pad + DOCTYPE
        if _is_inline(node):
            yield pad + to_string(node, mode=mode, doctype=False)
            return
        yield pad + open_tag(node, mode)
        for child in node.children:
            yield from _lines(child, depth + 1, indent, mode, doctype)
        yield f"{pad}</{node.tag}>"
    elif isinstance(node, Text):
        if node.raw:
            yield pad + to_string(node, mode=mode)
    elif isinstance(node, (VoidElement, Raw, Comment)):
        yield pad + to_string(node, mode=mode)
    else:
        raise TypeError(f"Not a node: {node!r}")


def pretty(node: Node, *, indent: int = 2, mode: Mode = "html", doctype: bool = True) -> str:
    lines: List[str] = list(_lines(node, 0, indent, mode, doctype))
    return "\n".join(lines) + "\n"


__all__ = ["pretty"]
