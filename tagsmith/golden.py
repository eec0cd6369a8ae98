"""Compare pretty-printed trees against golden files."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Tuple

from .dom_model import Node
from .io_utils import write_text
from .pretty import pretty


def write_golden(path: Path, node: Node, *, indent: int = 2) -> Path:
    return write_text(path, pretty(node, indent=indent))


def check_golden(path: Path, node: Node, *, indent: int = 2) -> Tuple[bool, str]:
    """Return ``(ok, diff)``; a missing golden file counts as a mismatch."""

    actual = pretty(node, indent=indent)
    expected = path.read_text(encoding="utf-8") if path.exists() else ""
    if actual == expected:
        return True, ""
    diff = difflib.unified_diff(
        expected.splitlines(keepends=True),
        actual.splitlines(keepends=True),
        fromfile=f"{path.name} (golden)",
        tofile=f"{path.name} (rendered)",
    )
    return False, "".join(diff)


__all__ = ["check_golden", "write_golden"]
