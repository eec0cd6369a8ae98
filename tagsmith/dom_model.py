"""Immutable DOM model for HTML serialization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True)
class Attr:
    """Name/value attribute. The value is stored unescaped."""

    name: str
    value: str


@dataclass(frozen=True)
class BoolAttr:
    """Boolean attribute rendered as its bare name when present."""

    name: str
    present: bool = True


@dataclass(frozen=True)
class NullAttr:
    """Attribute that renders nothing."""


null_ = NullAttr()

Attribute = Union[Attr, BoolAttr, NullAttr]


@dataclass(frozen=True)
class Text:
    raw: str


@dataclass(frozen=True)
class Raw:
    # Emitted verbatim, so the content must be trusted.
    content: str


@dataclass(frozen=True)
class Comment:
    body: str


@dataclass(frozen=True)
class Fragment:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class StdElement:
    tag: str
    attrs: Tuple[Attribute, ...] = ()
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class VoidElement:
    """Element without children or a closing tag (``<br>``, ``<input>``...)."""

    tag: str
    attrs: Tuple[Attribute, ...] = ()


Node = Union[StdElement, VoidElement, Text, Raw, Comment, Fragment]


def format_value(fmt: str, args: Tuple[object, ...]) -> str:
    """Apply printf-style formatting eagerly; a bare template is taken literally."""
    if not args:
        return fmt
    return fmt % args


def txt(fmt: str, *args: object) -> Text:
    """Build a text node. ``txt("Hello, %s", name)`` formats at construction time."""
    return Text(format_value(fmt, args))


def raw(fmt: str, *args: object) -> Raw:
    """Build a node whose content is written without escaping.

    Only pass markup you trust; nothing in the renderer sanitizes it.
    """

    return Raw(format_value(fmt, args))


def comment(body: str) -> Comment:
    return Comment(body)


def null(children: Iterable[Node]) -> Fragment:
    """Group sibling nodes without a wrapping element."""
    return Fragment(tuple(children))


__all__ = [
    "Attr",
    "Attribute",
    "BoolAttr",
    "Comment",
    "Fragment",
    "Node",
    "NullAttr",
    "Raw",
    "StdElement",
    "Text",
    "VoidElement",
    "comment",
    "format_value",
    "null",
    "null_",
    "raw",
    "txt",
]
