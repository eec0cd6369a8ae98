from tagsmith import attrs as A
from tagsmith import html as H
from tagsmith.dom_model import comment, null, raw, txt
from tagsmith.pretty import pretty


def test_inline_children_stay_on_one_line() -> None:
    assert pretty(H.p([A.class_("x")], [txt("a < b")])) == '<p class="x">a &lt; b</p>\n'


def test_block_children_are_indented() -> None:
    node = H.ul([], [H.li([], [txt("1")]), H.li([], [H.b([], [txt("2")])])])
    assert pretty(node) == (
        "<ul>\n"
        "  <li>1</li>\n"
        "  <li>\n"
        "    <b>2</b>\n"
        "  </li>\n"
        "</ul>\n"
    )


def test_fragments_keep_their_depth() -> None:
    node = H.div([], [null([H.br([]), comment("c")]), txt("tail")])
    assert pretty(node, indent=1) == "<div>\n <br>\n <!--c-->\n tail\n</div>\n"


def test_empty_text_is_dropped() -> None:
    node = H.div([], [txt(""), H.hr([])])
    assert pretty(node) == "<div>\n  <hr>\n</div>\n"


def test_escaping_matches_renderer() -> None:
    node = H.div([A.title('"x"')], [H.span([], [txt("&")]), raw("<em>ok</em>")])
    assert pretty(node) == '<div title="&quot;x&quot;">\n  <span>&amp;</span>\n  <em>ok</em>\n</div>\n'


def test_xml_mode_and_doctype() -> None:
    node = H.html([], [H.head([], [H.meta([A.charset("utf-8")])])])
    assert pretty(node, mode="xml") == (
        "<html>\n"
        "  <head>\n"
        '    <meta charset="utf-8"/>\n'
        "  </head>\n"
        "</html>\n"
    )
    assert pretty(node).startswith("<!DOCTYPE html>\n<html>\n")


def test_preformatted_content_is_not_reindented() -> None:
    block = H.pre([], [txt("a\n"), H.b([], [txt("b")]), txt("\n  c")])
    assert pretty(H.div([], [block])) == "<div>\n  <pre>a\n<b>b</b>\n  c</pre>\n</div>\n"


def test_preformatted_leading_newline_is_doubled() -> None:
    assert pretty(H.textarea([], "%s", "\nline")) == "<textarea>\n\nline</textarea>\n"
