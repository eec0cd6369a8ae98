"""htmx attribute constructors.

Generated by ``tagsmith catalog gen`` from htmx.yaml (version 2.0).
Reference: https://htmx.org/reference/#attributes
"""

from __future__ import annotations

from typing import Literal

from .factories import (
    BoolAttrFactory,
    EnumAttr,
    PrefixedAttr,
    StringAttr,
    bool_attr,
    enum_attr,
    prefixed_attr,
    string_attr,
)

HxBoostValue = Literal["true", "false"]
hx_boost: EnumAttr[HxBoostValue] = enum_attr("hx-boost", HxBoostValue)
hx_confirm: StringAttr = string_attr("hx-confirm")
hx_delete: StringAttr = string_attr("hx-delete")
hx_disable: BoolAttrFactory = bool_attr("hx-disable")
hx_disabled_elt: StringAttr = string_attr("hx-disabled-elt")
hx_disinherit: StringAttr = string_attr("hx-disinherit")
HxEncodingValue = Literal["multipart/form-data"]
hx_encoding: EnumAttr[HxEncodingValue] = enum_attr("hx-encoding", HxEncodingValue)
hx_ext: StringAttr = string_attr("hx-ext")
hx_get: StringAttr = string_attr("hx-get")
hx_headers: StringAttr = string_attr("hx-headers")
HxHistoryValue = Literal["false"]
hx_history: EnumAttr[HxHistoryValue] = enum_attr("hx-history", HxHistoryValue)
hx_history_elt: BoolAttrFactory = bool_attr("hx-history-elt")
hx_include: StringAttr = string_attr("hx-include")
hx_indicator: StringAttr = string_attr("hx-indicator")
hx_inherit: StringAttr = string_attr("hx-inherit")
hx_on: PrefixedAttr = prefixed_attr("hx-on:")
hx_params: StringAttr = string_attr("hx-params")
hx_patch: StringAttr = string_attr("hx-patch")
hx_post: StringAttr = string_attr("hx-post")
hx_preserve: BoolAttrFactory = bool_attr("hx-preserve")
hx_prompt: StringAttr = string_attr("hx-prompt")
hx_push_url: StringAttr = string_attr("hx-push-url")
hx_put: StringAttr = string_attr("hx-put")
hx_replace_url: StringAttr = string_attr("hx-replace-url")
hx_request: StringAttr = string_attr("hx-request")
hx_select: StringAttr = string_attr("hx-select")
hx_select_oob: StringAttr = string_attr("hx-select-oob")
hx_swap: StringAttr = string_attr("hx-swap")
hx_swap_oob: StringAttr = string_attr("hx-swap-oob")
hx_sync: StringAttr = string_attr("hx-sync")
hx_target: StringAttr = string_attr("hx-target")
hx_trigger: StringAttr = string_attr("hx-trigger")
HxValidateValue = Literal["true"]
hx_validate: EnumAttr[HxValidateValue] = enum_attr("hx-validate", HxValidateValue)
hx_vals: StringAttr = string_attr("hx-vals")

__all__ = [
    "hx_boost",
    "hx_confirm",
    "hx_delete",
    "hx_disable",
    "hx_disabled_elt",
    "hx_disinherit",
    "hx_encoding",
    "hx_ext",
    "hx_get",
    "hx_headers",
    "hx_history",
    "hx_history_elt",
    "hx_include",
    "hx_indicator",
    "hx_inherit",
    "hx_on",
    "hx_params",
    "hx_patch",
    "hx_post",
    "hx_preserve",
    "hx_prompt",
    "hx_push_url",
    "hx_put",
    "hx_replace_url",
    "hx_request",
    "hx_select",
    "hx_select_oob",
    "hx_swap",
    "hx_swap_oob",
    "hx_sync",
    "hx_target",
    "hx_trigger",
    "hx_validate",
    "hx_vals",
]
