"""HTML attribute constructors.

Generated by ``tagsmith catalog gen`` from html.yaml (version 2025.1).
Reference: https://developer.mozilla.org/en-US/docs/Web/HTML/Reference
"""

from __future__ import annotations

from typing import Literal

from .factories import (
    BoolAttrFactory,
    EnumAttr,
    IntAttr,
    PrefixedAttr,
    StringAttr,
    bool_attr,
    enum_attr,
    int_attr,
    prefixed_attr,
    string_attr,
)

accept: StringAttr = string_attr("accept")
accept_charset: StringAttr = string_attr("accept-charset")
accesskey: StringAttr = string_attr("accesskey")
action: StringAttr = string_attr("action")
allow: StringAttr = string_attr("allow")
alt: StringAttr = string_attr("alt")
as_: StringAttr = string_attr("as")
async_: BoolAttrFactory = bool_attr("async")
AutocapitalizeValue = Literal["off", "none", "on", "sentences", "words", "characters"]
autocapitalize: EnumAttr[AutocapitalizeValue] = enum_attr("autocapitalize", AutocapitalizeValue)
autocomplete: StringAttr = string_attr("autocomplete")
autofocus: BoolAttrFactory = bool_attr("autofocus")
autoplay: BoolAttrFactory = bool_attr("autoplay")
charset: StringAttr = string_attr("charset")
checked: BoolAttrFactory = bool_attr("checked")
cite: StringAttr = string_attr("cite")
class_: StringAttr = string_attr("class")
cols: IntAttr = int_attr("cols")
colspan: IntAttr = int_attr("colspan")
content: StringAttr = string_attr("content")
ContenteditableValue = Literal["true", "false", "plaintext-only"]
contenteditable: EnumAttr[ContenteditableValue] = enum_attr("contenteditable", ContenteditableValue)
controls: BoolAttrFactory = bool_attr("controls")
coords: StringAttr = string_attr("coords")
CrossoriginValue = Literal["anonymous", "use-credentials"]
crossorigin: EnumAttr[CrossoriginValue] = enum_attr("crossorigin", CrossoriginValue)
data: StringAttr = string_attr("data")
data_: PrefixedAttr = prefixed_attr("data-")
datetime: StringAttr = string_attr("datetime")
DecodingValue = Literal["sync", "async", "auto"]
decoding: EnumAttr[DecodingValue] = enum_attr("decoding", DecodingValue)
default: BoolAttrFactory = bool_attr("default")
defer: BoolAttrFactory = bool_attr("defer")
DirValue = Literal["ltr", "rtl", "auto"]
dir: EnumAttr[DirValue] = enum_attr("dir", DirValue)
dirname: StringAttr = string_attr("dirname")
disabled: BoolAttrFactory = bool_attr("disabled")
download: StringAttr = string_attr("download")
DraggableValue = Literal["true", "false"]
draggable: EnumAttr[DraggableValue] = enum_attr("draggable", DraggableValue)
EnctypeValue = Literal["application/x-www-form-urlencoded", "multipart/form-data", "text/plain"]
enctype: EnumAttr[EnctypeValue] = enum_attr("enctype", EnctypeValue)
for_: StringAttr = string_attr("for")
form: StringAttr = string_attr("form")
formaction: StringAttr = string_attr("formaction")
FormmethodValue = Literal["get", "post", "dialog"]
formmethod: EnumAttr[FormmethodValue] = enum_attr("formmethod", FormmethodValue)
formnovalidate: BoolAttrFactory = bool_attr("formnovalidate")
headers: StringAttr = string_attr("headers")
height: IntAttr = int_attr("height")
hidden: BoolAttrFactory = bool_attr("hidden")
high: StringAttr = string_attr("high")
href: StringAttr = string_attr("href")
hreflang: StringAttr = string_attr("hreflang")
http_equiv: StringAttr = string_attr("http-equiv")
id: StringAttr = string_attr("id")
inert: BoolAttrFactory = bool_attr("inert")
InputmodeValue = Literal["none", "text", "decimal", "numeric", "tel", "search", "email", "url"]
inputmode: EnumAttr[InputmodeValue] = enum_attr("inputmode", InputmodeValue)
integrity: StringAttr = string_attr("integrity")
is_: StringAttr = string_attr("is")
ismap: BoolAttrFactory = bool_attr("ismap")
itemprop: StringAttr = string_attr("itemprop")
KindValue = Literal["subtitles", "captions", "descriptions", "chapters", "metadata"]
kind: EnumAttr[KindValue] = enum_attr("kind", KindValue)
label: StringAttr = string_attr("label")
lang: StringAttr = string_attr("lang")
list: StringAttr = string_attr("list")
LoadingValue = Literal["eager", "lazy"]
loading: EnumAttr[LoadingValue] = enum_attr("loading", LoadingValue)
loop: BoolAttrFactory = bool_attr("loop")
low: StringAttr = string_attr("low")
max: StringAttr = string_attr("max")
maxlength: IntAttr = int_attr("maxlength")
media: StringAttr = string_attr("media")
MethodValue = Literal["get", "post", "dialog"]
method: EnumAttr[MethodValue] = enum_attr("method", MethodValue)
min: StringAttr = string_attr("min")
minlength: IntAttr = int_attr("minlength")
multiple: BoolAttrFactory = bool_attr("multiple")
muted: BoolAttrFactory = bool_attr("muted")
name: StringAttr = string_attr("name")
nomodule: BoolAttrFactory = bool_attr("nomodule")
novalidate: BoolAttrFactory = bool_attr("novalidate")
open: BoolAttrFactory = bool_attr("open")
optimum: StringAttr = string_attr("optimum")
pattern: StringAttr = string_attr("pattern")
ping: StringAttr = string_attr("ping")
placeholder: StringAttr = string_attr("placeholder")
PopoverValue = Literal["auto", "manual"]
popover: EnumAttr[PopoverValue] = enum_attr("popover", PopoverValue)
popovertarget: StringAttr = string_attr("popovertarget")
poster: StringAttr = string_attr("poster")
PreloadValue = Literal["none", "metadata", "auto"]
preload: EnumAttr[PreloadValue] = enum_attr("preload", PreloadValue)
readonly: BoolAttrFactory = bool_attr("readonly")
ReferrerpolicyValue = Literal["no-referrer", "no-referrer-when-downgrade", "origin", "origin-when-cross-origin", "same-origin", "strict-origin", "strict-origin-when-cross-origin", "unsafe-url"]
referrerpolicy: EnumAttr[ReferrerpolicyValue] = enum_attr("referrerpolicy", ReferrerpolicyValue)
rel: StringAttr = string_attr("rel")
required: BoolAttrFactory = bool_attr("required")
reversed: BoolAttrFactory = bool_attr("reversed")
role: StringAttr = string_attr("role")
rows: IntAttr = int_attr("rows")
rowspan: IntAttr = int_attr("rowspan")
sandbox: StringAttr = string_attr("sandbox")
ScopeValue = Literal["row", "col", "rowgroup", "colgroup"]
scope: EnumAttr[ScopeValue] = enum_attr("scope", ScopeValue)
selected: BoolAttrFactory = bool_attr("selected")
shape: StringAttr = string_attr("shape")
size: IntAttr = int_attr("size")
sizes: StringAttr = string_attr("sizes")
slot: StringAttr = string_attr("slot")
span: IntAttr = int_attr("span")
SpellcheckValue = Literal["true", "false"]
spellcheck: EnumAttr[SpellcheckValue] = enum_attr("spellcheck", SpellcheckValue)
src: StringAttr = string_attr("src")
srcdoc: StringAttr = string_attr("srcdoc")
srclang: StringAttr = string_attr("srclang")
srcset: StringAttr = string_attr("srcset")
start: IntAttr = int_attr("start")
step: StringAttr = string_attr("step")
style: StringAttr = string_attr("style")
tabindex: IntAttr = int_attr("tabindex")
target: StringAttr = string_attr("target")
title: StringAttr = string_attr("title")
TranslateValue = Literal["yes", "no"]
translate: EnumAttr[TranslateValue] = enum_attr("translate", TranslateValue)
type: StringAttr = string_attr("type")
usemap: StringAttr = string_attr("usemap")
value: StringAttr = string_attr("value")
width: IntAttr = int_attr("width")
WrapValue = Literal["hard", "soft", "off"]
wrap: EnumAttr[WrapValue] = enum_attr("wrap", WrapValue)

__all__ = [
    "accept",
    "accept_charset",
    "accesskey",
    "action",
    "allow",
    "alt",
    "as_",
    "async_",
    "autocapitalize",
    "autocomplete",
    "autofocus",
    "autoplay",
    "charset",
    "checked",
    "cite",
    "class_",
    "cols",
    "colspan",
    "content",
    "contenteditable",
    "controls",
    "coords",
    "crossorigin",
    "data",
    "data_",
    "datetime",
    "decoding",
    "default",
    "defer",
    "dir",
    "dirname",
    "disabled",
    "download",
    "draggable",
    "enctype",
    "for_",
    "form",
    "formaction",
    "formmethod",
    "formnovalidate",
    "headers",
    "height",
    "hidden",
    "high",
    "href",
    "hreflang",
    "http_equiv",
    "id",
    "inert",
    "inputmode",
    "integrity",
    "is_",
    "ismap",
    "itemprop",
    "kind",
    "label",
    "lang",
    "list",
    "loading",
    "loop",
    "low",
    "max",
    "maxlength",
    "media",
    "method",
    "min",
    "minlength",
    "multiple",
    "muted",
    "name",
    "nomodule",
    "novalidate",
    "open",
    "optimum",
    "pattern",
    "ping",
    "placeholder",
    "popover",
    "popovertarget",
    "poster",
    "preload",
    "readonly",
    "referrerpolicy",
    "rel",
    "required",
    "reversed",
    "role",
    "rows",
    "rowspan",
    "sandbox",
    "scope",
    "selected",
    "shape",
    "size",
    "sizes",
    "slot",
    "span",
    "spellcheck",
    "src",
    "srcdoc",
    "srclang",
    "srcset",
    "start",
    "step",
    "style",
    "tabindex",
    "target",
    "title",
    "translate",
    "type",
    "usemap",
    "value",
    "width",
    "wrap",
]
