"""Serialize DOM trees to HTML or XML text."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Literal, TextIO

from .dom_model import (
    Attr,
    Attribute,
    BoolAttr,
    Comment,
    Fragment,
    Node,
    NullAttr,
    Raw,
    StdElement,
    Text,
    VoidElement,
)
from .escape import escape_attr, escape_comment, escape_text

if TYPE_CHECKING:
    from .models import RenderConfig

CONTENT_TYPE = "text/html; charset=utf-8"
DOCTYPE = "<!DOCTYPE html>"

Mode = Literal["html", "xml"]

# Parsers drop one newline right after these start tags.
PREFORMATTED = frozenset({"pre", "textarea", "listing"})


def render_attr(attr: Attribute, mode: Mode = "html") -> str:
    """Render one attribute with its leading space, or ``""`` if it renders nothing."""
    if isinstance(attr, Attr):
        return f' {attr.name}="{escape_attr(attr.value)}"'
    if isinstance(attr, BoolAttr):
        if not attr.present:
            return ""
        if mode == "xml":
            return f' {attr.name}="{attr.name}"'
        return f" {attr.name}"
    if isinstance(attr, NullAttr):
        return ""
    raise TypeError(f"Not an attribute: {attr!r}")


def render_attrs(attrs: Iterable[Attribute], mode: Mode = "html") -> str:
    return "".join(render_attr(attr, mode) for attr in attrs)


def open_tag(element: StdElement | VoidElement, mode: Mode = "html") -> str:
    attrs = render_attrs(element.attrs, mode)
    if isinstance(element, VoidElement) and mode == "xml":
        return f"<{element.tag}{attrs}/>"
    return f"<{element.tag}{attrs}>"


def _leading_text(nodes: Iterable[Node]) -> str:
    for node in nodes:
        if isinstance(node, Text):
            if node.raw:
                return node.raw
        elif isinstance(node, Raw):
            if node.content:
                return node.content
        elif isinstance(node, Fragment):
            text = _leading_text(node.children)
            if text:
                return text
        else:
            return ""
    return ""


def newline_guard(element: StdElement) -> str:
    """``"\\n"`` when a preformatted element's content starts with a newline.

    The parser swallows the first newline after ``<pre>``, ``<textarea>`` and
    ``<listing>``, so an extra one keeps the content intact.
    """

    if element.tag in PREFORMATTED and _leading_text(element.children).startswith("\n"):
        return "\n"
    return ""


def write(node: Node, out: TextIO, *, mode: Mode = "html", doctype: bool = True) -> None:
    """Write ``node`` to ``out`` depth-first, escaping every text and attribute value."""
    if isinstance(node, Text):
        out.write(escape_text(node.raw))
    elif isinstance(node, Raw):
        out.write(node.content)
    elif isinstance(node, Comment):
        out.write(f"<!--{escape_comment(node.body)}-->")
    elif isinstance(node, Fragment):
        for child in node.children:
            write(child, out, mode=mode, doctype=doctype)
    elif isinstance(node, VoidElement):
        out.write(open_tag(node, mode))
    elif isinstance(node, StdElement):
        if node.tag == "html" and doctype and mode == "html":
            out.write(DOCTYPE)
        out.write(open_tag(node, mode))
        out.write(newline_guard(node))
        for child in node.children:
            write(child, out, mode=mode, doctype=doctype)
        out.write(f"</{node.tag}>")
    else:
        raise TypeError(f"Not a node: {node!r}")


def to_string(node: Node, *, mode: Mode = "html", doctype: bool = True) -> str:
    buffer = io.StringIO()
    write(node, buffer, mode=mode, doctype=doctype)
    return buffer.getvalue()


def to_bytes(node: Node, *, mode: Mode = "html", doctype: bool = True) -> bytes:
    return to_string(node, mode=mode, doctype=doctype).encode("utf-8")


def to_xml(node: Node) -> str:
    """Serialize with self-closing void tags and valued boolean attributes."""
    return to_string(node, mode="xml")


def render(node: Node, config: "RenderConfig") -> str:
    """Render ``node`` according to a loaded :class:`RenderConfig`."""

    if config.pretty:
        from .pretty import pretty

        return pretty(node, indent=config.indent, mode=config.mode, doctype=config.doctype)
    return to_string(node, mode=config.mode, doctype=config.doctype)


@dataclass(frozen=True)
class Response:
    """Finished payload handed to the web layer."""

    body: bytes
    content_type: str = CONTENT_TYPE
    status: int = 200


def respond(node: Node, status: int = 200) -> Response:
    return Response(body=to_bytes(node), content_type=CONTENT_TYPE, status=status)


__all__ = [
    "CONTENT_TYPE",
    "DOCTYPE",
    "Mode",
    "PREFORMATTED",
    "Response",
    "newline_guard",
    "open_tag",
    "render",
    "render_attr",
    "render_attrs",
    "respond",
    "to_bytes",
    "to_string",
    "to_xml",
    "write",
]
