"""HTML element constructors.

Generated by ``tagsmith catalog gen`` from html.yaml (version 2025.1).
Reference: https://developer.mozilla.org/en-US/docs/Web/HTML/Reference
"""

from __future__ import annotations

from .factories import (
    StdTag,
    TextTag,
    VoidTag,
    raw_text_tag,
    std_tag,
    text_tag,
    void_tag,
)

a: StdTag = std_tag("a")
abbr: StdTag = std_tag("abbr")
address: StdTag = std_tag("address")
area: VoidTag = void_tag("area")
article: StdTag = std_tag("article")
aside: StdTag = std_tag("aside")
audio: StdTag = std_tag("audio")
b: StdTag = std_tag("b")
base: VoidTag = void_tag("base")
bdi: StdTag = std_tag("bdi")
bdo: StdTag = std_tag("bdo")
blockquote: StdTag = std_tag("blockquote")
body: StdTag = std_tag("body")
br: VoidTag = void_tag("br")
button: StdTag = std_tag("button")
canvas: StdTag = std_tag("canvas")
caption: StdTag = std_tag("caption")
cite: StdTag = std_tag("cite")
code: StdTag = std_tag("code")
col: VoidTag = void_tag("col")
colgroup: StdTag = std_tag("colgroup")
data: StdTag = std_tag("data")
datalist: StdTag = std_tag("datalist")
dd: StdTag = std_tag("dd")
del_: StdTag = std_tag("del")
details: StdTag = std_tag("details")
dfn: StdTag = std_tag("dfn")
dialog: StdTag = std_tag("dialog")
div: StdTag = std_tag("div")
dl: StdTag = std_tag("dl")
dt: StdTag = std_tag("dt")
em: StdTag = std_tag("em")
embed: VoidTag = void_tag("embed")
fieldset: StdTag = std_tag("fieldset")
figcaption: StdTag = std_tag("figcaption")
figure: StdTag = std_tag("figure")
footer: StdTag = std_tag("footer")
form: StdTag = std_tag("form")
h1: StdTag = std_tag("h1")
h2: StdTag = std_tag("h2")
h3: StdTag = std_tag("h3")
h4: StdTag = std_tag("h4")
h5: StdTag = std_tag("h5")
h6: StdTag = std_tag("h6")
head: StdTag = std_tag("head")
header: StdTag = std_tag("header")
hgroup: StdTag = std_tag("hgroup")
hr: VoidTag = void_tag("hr")
html: StdTag = std_tag("html")
i: StdTag = std_tag("i")
iframe: StdTag = std_tag("iframe")
img: VoidTag = void_tag("img")
input: VoidTag = void_tag("input")
ins: StdTag = std_tag("ins")
kbd: StdTag = std_tag("kbd")
label: StdTag = std_tag("label")
legend: StdTag = std_tag("legend")
li: StdTag = std_tag("li")
link: VoidTag = void_tag("link")
main: StdTag = std_tag("main")
map: StdTag = std_tag("map")
mark: StdTag = std_tag("mark")
menu: StdTag = std_tag("menu")
meta: VoidTag = void_tag("meta")
meter: StdTag = std_tag("meter")
nav: StdTag = std_tag("nav")
noscript: StdTag = std_tag("noscript")
object: StdTag = std_tag("object")
ol: StdTag = std_tag("ol")
optgroup: StdTag = std_tag("optgroup")
option: StdTag = std_tag("option")
output: StdTag = std_tag("output")
p: StdTag = std_tag("p")
picture: StdTag = std_tag("picture")
pre: StdTag = std_tag("pre")
progress: StdTag = std_tag("progress")
q: StdTag = std_tag("q")
rp: StdTag = std_tag("rp")
rt: StdTag = std_tag("rt")
ruby: StdTag = std_tag("ruby")
s: StdTag = std_tag("s")
samp: StdTag = std_tag("samp")
script: TextTag = raw_text_tag("script")
search: StdTag = std_tag("search")
section: StdTag = std_tag("section")
select: StdTag = std_tag("select")
slot: StdTag = std_tag("slot")
small: StdTag = std_tag("small")
source: VoidTag = void_tag("source")
span: StdTag = std_tag("span")
strong: StdTag = std_tag("strong")
style: TextTag = raw_text_tag("style")
sub: StdTag = std_tag("sub")
summary: StdTag = std_tag("summary")
sup: StdTag = std_tag("sup")
table: StdTag = std_tag("table")
tbody: StdTag = std_tag("tbody")
td: StdTag = std_tag("td")
template: StdTag = std_tag("template")
textarea: TextTag = text_tag("textarea")
tfoot: StdTag = std_tag("tfoot")
th: StdTag = std_tag("th")
thead: StdTag = std_tag("thead")
time: StdTag = std_tag("time")
title: TextTag = text_tag("title")
tr: StdTag = std_tag("tr")
track: VoidTag = void_tag("track")
u: StdTag = std_tag("u")
ul: StdTag = std_tag("ul")
var: StdTag = std_tag("var")
video: StdTag = std_tag("video")
wbr: VoidTag = void_tag("wbr")

__all__ = [
    "a",
    "abbr",
    "address",
    "area",
    "article",
    "aside",
    "audio",
    "b",
    "base",
    "bdi",
    "bdo",
    "blockquote",
    "body",
    "br",
    "button",
    "canvas",
    "caption",
    "cite",
    "code",
    "col",
    "colgroup",
    "data",
    "datalist",
    "dd",
    "del_",
    "details",
    "dfn",
    "dialog",
    "div",
    "dl",
    "dt",
    "em",
    "embed",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "hr",
    "html",
    "i",
    "iframe",
    "img",
    "input",
    "ins",
    "kbd",
    "label",
    "legend",
    "li",
    "link",
    "main",
    "map",
    "mark",
    "menu",
    "meta",
    "meter",
    "nav",
    "noscript",
    "object",
    "ol",
    "optgroup",
    "option",
    "output",
    "p",
    "picture",
    "pre",
    "progress",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "script",
    "search",
    "section",
    "select",
    "slot",
    "small",
    "source",
    "span",
    "strong",
    "style",
    "sub",
    "summary",
    "sup",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "time",
    "title",
    "tr",
    "track",
    "u",
    "ul",
    "var",
    "video",
    "wbr",
]
