"""Pydantic models for the element/attribute catalogs and render settings."""

import keyword
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

ElementKind = Literal["std", "void", "text", "raw_text"]
AttributeKind = Literal["string", "int", "bool", "enum", "prefixed"]

_ELEMENT_FACTORIES = {
    "std": ("StdTag", "std_tag"),
    "void": ("VoidTag", "void_tag"),
    "text": ("TextTag", "text_tag"),
    "raw_text": ("TextTag", "raw_text_tag"),
}

_ATTRIBUTE_FACTORIES = {
    "string": ("StringAttr", "string_attr"),
    "int": ("IntAttr", "int_attr"),
    "bool": ("BoolAttrFactory", "bool_attr"),
    "enum": ("EnumAttr", "enum_attr"),
    "prefixed": ("PrefixedAttr", "prefixed_attr"),
}


def py_identifier(name: str) -> str:
    """Map an HTML name to a Python identifier (``accept-charset`` -> ``accept_charset``)."""

    ident = name.replace("-", "_").replace(":", "_")
    if keyword.iskeyword(ident):
        ident += "_"
    return ident


class ElementSpec(BaseModel):
    """One HTML element and the shape of its constructor."""

    name: str = Field(..., description="Tag name as written in markup.")
    kind: ElementKind = Field(
        "std",
        description=(
            "std: attributes and children; void: attributes only; "
            "text: escaped text content; raw_text: verbatim content."
        ),
    )
    py: Optional[str] = Field(
        None, description="Python name override when the default mapping is unsuitable."
    )

    model_config = ConfigDict(extra="forbid")

    @property
    def py_name(self) -> str:
        return self.py or py_identifier(self.name)

    @property
    def protocol(self) -> str:
        return _ELEMENT_FACTORIES[self.kind][0]

    @property
    def factory(self) -> str:
        return _ELEMENT_FACTORIES[self.kind][1]

    @property
    def annotation(self) -> str:
        return self.protocol

    @property
    def factory_call(self) -> str:
        return f'{self.factory}("{self.name}")'


class AttributeSpec(BaseModel):
    """One attribute and the kind of value it accepts."""

    name: str = Field(
        ..., description="Attribute name; for prefixed families, the prefix (e.g. data-)."
    )
    kind: AttributeKind = Field("string", description="Accepted value kind.")
    values: List[str] = Field(
        default_factory=list, description="Closed set of values for enum attributes."
    )
    py: Optional[str] = Field(
        None, description="Python name override when the default mapping is unsuitable."
    )

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_kind(self) -> "AttributeSpec":
        if self.kind == "enum" and not self.values:
            raise ValueError(f"enum attribute '{self.name}' needs at least one value")
        if self.kind != "enum" and self.values:
            raise ValueError(f"only enum attributes take values ('{self.name}' is {self.kind})")
        if self.kind == "prefixed" and not self.name.endswith(("-", ":")):
            raise ValueError(f"prefixed attribute '{self.name}' must end with '-' or ':'")
        return self

    @property
    def py_name(self) -> str:
        return self.py or py_identifier(self.name)

    @property
    def protocol(self) -> str:
        return _ATTRIBUTE_FACTORIES[self.kind][0]

    @property
    def factory(self) -> str:
        return _ATTRIBUTE_FACTORIES[self.kind][1]

    @property
    def literal_alias(self) -> str:
        parts = [part for part in self.py_name.split("_") if part]
        return "".join(part.capitalize() for part in parts) + "Value"

    @property
    def literal_type(self) -> str:
        members = ", ".join(f'"{value}"' for value in self.values)
        return f"Literal[{members}]"

    @property
    def annotation(self) -> str:
        if self.kind == "enum":
            return f"{self.protocol}[{self.literal_alias}]"
        return self.protocol

    @property
    def factory_call(self) -> str:
        if self.kind == "enum":
            return f'{self.factory}("{self.name}", {self.literal_alias})'
        return f'{self.factory}("{self.name}")'


class Catalog(BaseModel):
    """A closed, versioned list of elements and attributes."""

    title: str = Field(..., description="Short name used in generated module docstrings.")
    version: str = Field(..., description="Catalog version, bumped on any change.")
    reference: str = Field(..., description="Public reference the list mirrors.")
    elements: List[ElementSpec] = Field(default_factory=list)
    attributes: List[AttributeSpec] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_unique(self) -> "Catalog":
        for label, entries in (("element", self.elements), ("attribute", self.attributes)):
            seen_names: set[str] = set()
            seen_py: set[str] = set()
            for entry in entries:
                if entry.name in seen_names:
                    raise ValueError(f"duplicate {label} name '{entry.name}'")
                if entry.py_name in seen_py:
                    raise ValueError(f"duplicate {label} Python name '{entry.py_name}'")
                if not entry.py_name.isidentifier():
                    raise ValueError(f"'{entry.py_name}' is not a valid Python name")
                seen_names.add(entry.name)
                seen_py.add(entry.py_name)
        return self

    @property
    def has_enums(self) -> bool:
        return any(attr.kind == "enum" for attr in self.attributes)

    def element_imports(self) -> List[str]:
        names = {e.protocol for e in self.elements} | {e.factory for e in self.elements}
        return sorted(names)

    def attribute_imports(self) -> List[str]:
        names = {a.protocol for a in self.attributes} | {a.factory for a in self.attributes}
        return sorted(names)


class RenderConfig(BaseModel):
    """Settings read from a YAML file by ``tagsmith render``."""

    mode: Literal["html", "xml"] = Field(
        "html", description="html: bare void tags; xml: self-closing void tags."
    )
    pretty: bool = Field(False, description="Indent output for inspection.")
    indent: int = Field(2, ge=0, description="Spaces per level when pretty is set.")
    doctype: bool = Field(True, description="Prefix <html> with <!DOCTYPE html>.")

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "AttributeKind",
    "AttributeSpec",
    "Catalog",
    "ElementKind",
    "ElementSpec",
    "RenderConfig",
    "py_identifier",
]
