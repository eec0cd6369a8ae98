"""Generate the typed constructor modules from the YAML catalogs."""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .io_utils import read_yaml, write_text
from .models import Catalog

PACKAGE_DIR = Path(__file__).parent
CATALOG_DIR = PACKAGE_DIR / "catalog"
TEMPLATES_DIR = PACKAGE_DIR / "templates"


@dataclass(frozen=True)
class CatalogTarget:
    """One generated module: which catalog feeds which template."""

    catalog: str
    template: str
    module: str


TARGETS: Tuple[CatalogTarget, ...] = (
    CatalogTarget("html.yaml", "elements.py.jinja", "html.py"),
    CatalogTarget("html.yaml", "attributes.py.jinja", "attrs.py"),
    CatalogTarget("htmx.yaml", "attributes.py.jinja", "hx.py"),
)


def load_catalog(path: Path) -> Catalog:
    """Load and validate a catalog file; raises ``pydantic.ValidationError``."""

    if not path.exists():
        raise FileNotFoundError(f"Catalog not found: {path}")
    data = read_yaml(path) or {}
    return Catalog.model_validate(data)


def jinja_env(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_module(
    catalog: Catalog, template_name: str, source: str, env: Environment | None = None
) -> str:
    env = env or jinja_env()
    return env.get_template(template_name).render(catalog=catalog, source=source)


def render_targets(catalog_dir: Path = CATALOG_DIR) -> Dict[str, str]:
    """Render every target module; returns ``{module filename: source}``."""

    env = jinja_env()
    catalogs: Dict[str, Catalog] = {}
    rendered: Dict[str, str] = {}
    for target in TARGETS:
        if target.catalog not in catalogs:
            catalogs[target.catalog] = load_catalog(catalog_dir / target.catalog)
        rendered[target.module] = render_module(
            catalogs[target.catalog], target.template, target.catalog, env
        )
    return rendered


def generate(catalog_dir: Path = CATALOG_DIR, out_dir: Path = PACKAGE_DIR) -> List[Path]:
    written: List[Path] = []
    for module, source in render_targets(catalog_dir).items():
        written.append(write_text(out_dir / module, source))
    return written


def check(catalog_dir: Path = CATALOG_DIR, out_dir: Path = PACKAGE_DIR) -> Tuple[bool, str]:
    """Compare committed modules with fresh output; returns ``(ok, unified diff)``."""

    diffs: List[str] = []
    for module, expected in render_targets(catalog_dir).items():
        path = out_dir / module
        current = path.read_text(encoding="utf-8") if path.exists() else ""
        if current == expected:
            continue
        diff = difflib.unified_diff(
            current.splitlines(keepends=True),
            expected.splitlines(keepends=True),
            fromfile=f"{out_dir.name}/{module}",
            tofile=f"{out_dir.name}/{module} (generated)",
        )
        diffs.append("".join(diff))
    return (not diffs, "".join(diffs))


__all__ = [
    "CATALOG_DIR",
    "CatalogTarget",
    "TARGETS",
    "check",
    "generate",
    "jinja_env",
    "load_catalog",
    "render_module",
    "render_targets",
]
