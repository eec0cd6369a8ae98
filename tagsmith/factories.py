"""Constructor factories behind the generated element and attribute catalogs.

Each factory returns a plain function whose call signature is described by a
``Protocol``. The catalog modules annotate every constructor with one of these
protocols, so a type checker rejects, for example, children passed to a void
element or a free string passed to an enumerated attribute.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Protocol, Tuple, TypeVar, get_args

from .dom_model import (
    Attr,
    Attribute,
    BoolAttr,
    Node,
    Raw,
    StdElement,
    Text,
    VoidElement,
    format_value,
)
from .escape import escape_raw_text

V = TypeVar("V", contravariant=True)

_SUFFIX_RE = re.compile(r"[a-z0-9_.:-]+")


class StdTag(Protocol):
    def __call__(self, attrs: Iterable[Attribute], children: Iterable[Node]) -> StdElement: ...


class VoidTag(Protocol):
    def __call__(self, attrs: Iterable[Attribute]) -> VoidElement: ...


class TextTag(Protocol):
    def __call__(self, attrs: Iterable[Attribute], fmt: str, *args: object) -> StdElement: ...


class StringAttr(Protocol):
    def __call__(self, fmt: str, *args: object) -> Attr: ...


class IntAttr(Protocol):
    def __call__(self, value: int) -> Attr: ...


class BoolAttrFactory(Protocol):
    def __call__(self, when: bool = True) -> BoolAttr: ...


class EnumAttr(Protocol[V]):
    def __call__(self, value: V) -> Attr: ...


class PrefixedAttr(Protocol):
    def __call__(self, suffix: str, fmt: str, *args: object) -> Attr: ...


def std_tag(name: str) -> StdTag:
    def build(attrs: Iterable[Attribute], children: Iterable[Node]) -> StdElement:
        return StdElement(name, tuple(attrs), tuple(children))

    build.__name__ = build.__qualname__ = name
    return build


def void_tag(name: str) -> VoidTag:
    def build(attrs: Iterable[Attribute]) -> VoidElement:
        return VoidElement(name, tuple(attrs))

    build.__name__ = build.__qualname__ = name
    return build


def text_tag(name: str) -> TextTag:
    """Element whose only content is escaped text (``<title>``, ``<textarea>``)."""

    def build(attrs: Iterable[Attribute], fmt: str, *args: object) -> StdElement:
        return StdElement(name, tuple(attrs), (Text(format_value(fmt, args)),))

    build.__name__ = build.__qualname__ = name
    return build


def raw_text_tag(name: str) -> TextTag:
    """Element whose content is written verbatim (``<script>``, ``<style>``).

    The content cannot close the element: ``</name`` sequences are neutralized.
    """

    def build(attrs: Iterable[Attribute], fmt: str, *args: object) -> StdElement:
        content = escape_raw_text(format_value(fmt, args), name)
        return StdElement(name, tuple(attrs), (Raw(content),))

    build.__name__ = build.__qualname__ = name
    return build


def string_attr(name: str) -> StringAttr:
    def build(fmt: str, *args: object) -> Attr:
        return Attr(name, format_value(fmt, args))

    return build


def int_attr(name: str) -> IntAttr:
    def build(value: int) -> Attr:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} expects an int, got {type(value).__name__}")
        return Attr(name, str(value))

    return build


def bool_attr(name: str) -> BoolAttrFactory:
    def build(when: bool = True) -> BoolAttr:
        return BoolAttr(name, bool(when))

    return build


def enum_attr(name: str, values: Any) -> EnumAttr[Any]:
    """Attribute restricted to the members of a ``Literal[...]`` type."""

    allowed: Tuple[str, ...] = get_args(values)

    def build(value: Any) -> Attr:
        if value not in allowed:
            expected = ", ".join(repr(item) for item in allowed)
            raise ValueError(f"{value!r} is not a valid {name} value; expected one of {expected}")
        return Attr(name, value)

    return build


def prefixed_attr(prefix: str) -> PrefixedAttr:
    """Attribute family such as ``data-*`` where the caller supplies the suffix."""

    def build(suffix: str, fmt: str, *args: object) -> Attr:
        if not _SUFFIX_RE.fullmatch(suffix):
            raise ValueError(f"Invalid {prefix}* attribute suffix: {suffix!r}")
        return Attr(prefix + suffix, format_value(fmt, args))

    return build


__all__ = [
    "BoolAttrFactory",
    "EnumAttr",
    "IntAttr",
    "PrefixedAttr",
    "StdTag",
    "StringAttr",
    "TextTag",
    "VoidTag",
    "bool_attr",
    "enum_attr",
    "int_attr",
    "prefixed_attr",
    "raw_text_tag",
    "std_tag",
    "string_attr",
    "text_tag",
    "void_tag",
]
