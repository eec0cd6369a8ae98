"""Context-aware escaping for text, attribute values, comments and raw text."""

from __future__ import annotations

import re

_TEXT_TABLE = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})
_ATTR_TABLE = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})
_COMMENT_TABLE = str.maketrans({"<": "&lt;", ">": "&gt;"})


def escape_text(value: str) -> str:
    """Escape a string for use as element text content."""
    return value.translate(_TEXT_TABLE)


def escape_attr(value: str) -> str:
    """Escape a string for use inside a double-quoted attribute value."""
    return value.translate(_ATTR_TABLE)


def escape_comment(value: str) -> str:
    """Neutralize comment delimiters so the body cannot close the comment."""
    return value.translate(_COMMENT_TABLE)


def escape_raw_text(value: str, tag: str) -> str:
    """Keep ``value`` from closing a ``<script>``/``<style>`` element early.

    Raw-text elements end at the first ``</tag`` regardless of case, so every
    such sequence is rewritten as ``<\\/tag``. Script content also gets
    ``<!--`` and ``<script`` rewritten (``<\\!--``, ``<\\script``): either one
    can move the tokenizer into a state where ``</script>`` no longer ends the
    element.
    """

    name = re.escape(tag)
    if tag.lower() == "script":
        pattern = re.compile(rf"<(?=/?{name}|!--)", re.IGNORECASE)
    else:
        pattern = re.compile(rf"<(?=/{name})", re.IGNORECASE)
    return pattern.sub(r"<\\", value)


__all__ = ["escape_attr", "escape_comment", "escape_raw_text", "escape_text"]
