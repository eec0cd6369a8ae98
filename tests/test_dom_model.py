import dataclasses
import inspect

import pytest

from tagsmith import attrs as A
from tagsmith import html as H
from tagsmith import hx
from tagsmith.dom_model import (
    Attr,
    BoolAttr,
    Comment,
    Fragment,
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


def test_txt_formats_eagerly() -> None:
    assert txt("%s and %d", "<b>", 3) == Text("<b> and 3")


def test_txt_without_args_is_literal() -> None:
    assert txt("100%") == Text("100%")


def test_format_errors_propagate() -> None:
    with pytest.raises(TypeError):
        txt("%d", "not a number")


def test_raw_and_comment_constructors() -> None:
    assert raw("<b>%s</b>", "x") == Raw("<b>x</b>")
    assert comment("note") == Comment("note")


def test_null_collects_children() -> None:
    fragment = null(node for node in [txt("a"), txt("b")])
    assert fragment == Fragment((Text("a"), Text("b")))


def test_nodes_are_immutable() -> None:
    node = H.div([], [])
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.tag = "span"  # type: ignore[misc]


def test_void_elements_have_no_children() -> None:
    element = H.input([A.name("e")])
    assert isinstance(element, VoidElement)
    assert "children" not in {f.name for f in dataclasses.fields(VoidElement)}
    assert list(inspect.signature(H.input).parameters) == ["attrs"]
    with pytest.raises(TypeError):
        H.br([], [txt("child")])  # type: ignore[call-arg]


def test_std_element_keeps_order() -> None:
    element = H.ul([A.id("x"), A.class_("y")], [H.li([], [txt("1")]), H.li([], [txt("2")])])
    assert isinstance(element, StdElement)
    assert [attr.name for attr in element.attrs] == ["id", "class"]
    assert [child.children[0].raw for child in element.children] == ["1", "2"]


def test_text_element_wraps_formatted_text() -> None:
    element = H.title([], "Page %d", 2)
    assert element.children == (Text("Page 2"),)


def test_raw_text_element_neutralizes_close_tag() -> None:
    element = H.script([], "var s = '%s';", "</script>")
    assert element.children == (Raw("var s = '<\\/script>';"),)


def test_string_attribute_formats() -> None:
    assert A.href("/users/%d", 7) == Attr("href", "/users/7")


def test_int_attribute_rejects_non_ints() -> None:
    assert A.tabindex(0) == Attr("tabindex", "0")
    with pytest.raises(TypeError):
        A.tabindex("0")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        A.colspan(True)


def test_bool_attribute_follows_condition() -> None:
    assert A.disabled() == BoolAttr("disabled", True)
    assert A.checked(False) == BoolAttr("checked", False)


def test_enum_attribute_accepts_only_its_values() -> None:
    assert A.method("post") == Attr("method", "post")
    with pytest.raises(ValueError, match="method"):
        A.method("PUT")  # type: ignore[arg-type]


def test_prefixed_attributes_validate_suffix() -> None:
    assert A.data_("user-id", "%d", 5) == Attr("data-user-id", "5")
    assert hx.hx_on("htmx:after-request", "done()") == Attr("hx-on:htmx:after-request", "done()")
    for bad in ['x" onclick="evil', "a b", "Upper", "x>", "", "x\n"]:
        with pytest.raises(ValueError):
            A.data_(bad, "v")


def test_htmx_attributes() -> None:
    assert hx.hx_get("/items?page=%d", 2) == Attr("hx-get", "/items?page=2")
    assert hx.hx_boost("true") == Attr("hx-boost", "true")
    assert hx.hx_disable() == BoolAttr("hx-disable", True)


def test_keyword_names_get_trailing_underscore() -> None:
    assert A.for_("e").name == "for"
    assert A.as_("script").name == "as"
    assert A.async_().name == "async"
    assert H.del_([], []).tag == "del"


def test_null_attr_is_a_singleton_value() -> None:
    assert null_ == type(null_)()
