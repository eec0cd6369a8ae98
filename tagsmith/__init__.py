"""Typed HTML builder.

Elements live in :mod:`tagsmith.html`, attributes in :mod:`tagsmith.attrs` and
htmx attributes in :mod:`tagsmith.hx`::

    from tagsmith import html as H, attrs as A, txt, to_string

    to_string(H.p([A.class_("greeting")], [txt("Hello, %s", name)]))
"""

from . import attrs, html, hx
from .csrf import csrf_input, csrf_raw
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
    comment,
    null,
    null_,
    raw,
    txt,
)
from .escape import escape_attr, escape_text
from .pretty import pretty
from .render import CONTENT_TYPE, Response, respond, to_bytes, to_string, to_xml, write

__version__ = "0.1.0"

__all__ = [
    "Attr",
    "Attribute",
    "BoolAttr",
    "CONTENT_TYPE",
    "Comment",
    "Fragment",
    "Node",
    "NullAttr",
    "Raw",
    "Response",
    "StdElement",
    "Text",
    "VoidElement",
    "attrs",
    "comment",
    "csrf_input",
    "csrf_raw",
    "escape_attr",
    "escape_text",
    "html",
    "hx",
    "null",
    "null_",
    "pretty",
    "raw",
    "respond",
    "to_bytes",
    "to_string",
    "to_xml",
    "txt",
    "write",
]
