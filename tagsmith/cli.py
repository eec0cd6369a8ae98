"""Command-line interface for tagsmith."""

import argparse
import importlib
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from . import catalog_gen
from .dom_model import Comment, Fragment, Raw, StdElement, Text, VoidElement
from .golden import check_golden, write_golden
from .io_utils import read_yaml, warn, write_text
from .models import RenderConfig
from .render import render

_NODE_TYPES = (StdElement, VoidElement, Text, Raw, Comment, Fragment)


def _load_render_config(path: Optional[str]) -> RenderConfig:
    if path is None:
        return RenderConfig()
    config_path = Path(path)
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        data = read_yaml(config_path) or {}
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{config_path} must contain a mapping of render settings.")
    try:
        return RenderConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid render config in {config_path}: {exc}") from exc


def _resolve_target(target: str):
    """Import ``module:attribute`` and return the node it names.

    The attribute may be a node or a zero-argument callable returning one.
    Modules are importable from the working directory, as with ``python -m``.
    """

    module_name, sep, attr_name = target.partition(":")
    if not sep or not module_name or not attr_name:
        raise SystemExit(f"Target must look like 'package.module:attribute', got '{target}'")
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SystemExit(f"Cannot import '{module_name}': {exc}") from exc
    try:
        value = getattr(module, attr_name)
    except AttributeError as exc:
        raise SystemExit(f"'{module_name}' has no attribute '{attr_name}'") from exc
    if callable(value) and not isinstance(value, _NODE_TYPES):
        value = value()
    if not isinstance(value, _NODE_TYPES):
        raise SystemExit(f"'{target}' is not a node (got {type(value).__name__})")
    return value


def _handle_catalog_gen(args: argparse.Namespace) -> None:
    try:
        written = catalog_gen.generate(Path(args.catalog_dir), Path(args.out_dir))
    except (FileNotFoundError, ValidationError) as exc:
        raise SystemExit(f"Invalid catalog in {args.catalog_dir}: {exc}") from exc
    print(f"Wrote {len(written)} module(s) to {args.out_dir}.")


def _handle_catalog_check(args: argparse.Namespace) -> None:
    try:
        ok, diff = catalog_gen.check(Path(args.catalog_dir), Path(args.out_dir))
    except (FileNotFoundError, ValidationError) as exc:
        raise SystemExit(f"Invalid catalog in {args.catalog_dir}: {exc}") from exc
    if not ok:
        sys.stderr.write(diff)
        warn("Generated modules are out of date; run `tagsmith catalog gen`.")
        raise SystemExit(1)
    print("Generated modules are up to date.")


def _handle_render(args: argparse.Namespace) -> None:
    config = _load_render_config(args.config)
    overrides = {}
    if args.pretty:
        overrides["pretty"] = True
    if args.xml:
        overrides["mode"] = "xml"
    if args.indent is not None:
        overrides["indent"] = args.indent
    if overrides:
        try:
            config = RenderConfig.model_validate({**config.model_dump(), **overrides})
        except ValidationError as exc:
            raise SystemExit(f"Invalid render options: {exc}") from exc

    output = render(_resolve_target(args.target), config)
    if args.out:
        write_text(Path(args.out), output)
        print(f"Wrote {args.out}.")
    else:
        sys.stdout.write(output)


def _handle_golden(args: argparse.Namespace) -> None:
    node = _resolve_target(args.target)
    golden_path = Path(args.file)
    if args.update:
        write_golden(golden_path, node, indent=args.indent)
        print(f"Updated {golden_path}.")
        return

    ok, diff = check_golden(golden_path, node, indent=args.indent)
    if not ok:
        sys.stderr.write(diff)
        warn(f"{golden_path} does not match; rerun with --update to accept.")
        raise SystemExit(1)
    print(f"{golden_path} matches.")


def _add_catalog_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--catalog-dir",
        dest="catalog_dir",
        default=str(catalog_gen.CATALOG_DIR),
        help="Directory holding html.yaml and htmx.yaml.",
    )
    parser.add_argument(
        "--out-dir",
        dest="out_dir",
        default=str(catalog_gen.PACKAGE_DIR),
        help="Directory receiving html.py, attrs.py and hx.py.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagsmith",
        description="Typed HTML builder utilities",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="tagsmith 0.1.0",
        help="Show the tagsmith version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    catalog_parser = subparsers.add_parser(
        "catalog",
        help="Element/attribute catalog utilities",
        description="Generate or verify the typed constructor modules.",
    )
    catalog_subparsers = catalog_parser.add_subparsers(dest="catalog_command")

    gen_parser = catalog_subparsers.add_parser(
        "gen",
        help="Regenerate constructor modules from the YAML catalogs.",
        description="Validate the catalogs and rewrite html.py, attrs.py and hx.py.",
    )
    _add_catalog_paths(gen_parser)
    gen_parser.set_defaults(func=_handle_catalog_gen)

    check_parser = catalog_subparsers.add_parser(
        "check",
        help="Fail if the constructor modules are stale.",
        description="Render the catalogs in memory and diff them against the committed modules.",
    )
    _add_catalog_paths(check_parser)
    check_parser.set_defaults(func=_handle_catalog_check)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a node to HTML.",
        description="Import a node (or a function returning one) and render it.",
    )
    render_parser.add_argument("target", help="Node location as package.module:attribute.")
    render_parser.add_argument("--config", help="YAML file with render settings.")
    render_parser.add_argument(
        "--pretty", action="store_true", help="Indent output for inspection."
    )
    render_parser.add_argument(
        "--xml", action="store_true", help="Serialize void tags as self-closing."
    )
    render_parser.add_argument(
        "--indent", type=int, default=None, help="Spaces per level for --pretty."
    )
    render_parser.add_argument("--out", help="Write to this file instead of stdout.")
    render_parser.set_defaults(func=_handle_render)

    golden_parser = subparsers.add_parser(
        "golden",
        help="Check or update a golden file.",
        description="Compare the pretty-printed node with a golden file.",
    )
    golden_parser.add_argument("target", help="Node location as package.module:attribute.")
    golden_parser.add_argument("--file", required=True, help="Path to the golden file.")
    golden_parser.add_argument(
        "--update", action="store_true", help="Rewrite the golden file instead of checking."
    )
    golden_parser.add_argument(
        "--indent", type=int, default=2, help="Spaces per indentation level."
    )
    golden_parser.set_defaults(func=_handle_golden)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
