"""Embedding CSRF tokens supplied by the web layer.

Tokens are never generated or checked here; the caller passes in whatever its
token provider produced.
"""

from __future__ import annotations

from .dom_model import Attr, Raw, VoidElement


def csrf_input(token: str, field_name: str = "csrf_token") -> VoidElement:
    """Hidden ``<input>`` carrying ``token``; both values are escaped on render."""
    return VoidElement(
        "input",
        (Attr("type", "hidden"), Attr("name", field_name), Attr("value", token)),
    )


def csrf_raw(markup: str) -> Raw:
    """Embed a provider's ready-made tag verbatim. ``markup`` must be trusted."""
    return Raw(markup)


__all__ = ["csrf_input", "csrf_raw"]
