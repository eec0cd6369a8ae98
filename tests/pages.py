"""Sample pages used by the CLI and golden-file tests."""

from tagsmith import attrs as A
from tagsmith import html as H
from tagsmith import hx
from tagsmith.csrf import csrf_input
from tagsmith.dom_model import comment, null, null_, txt


def signup(email: str = "a&b@example.com", invalid: bool = False):
    return H.html(
        [A.lang("en")],
        [
            H.head([], [H.title([], "Sign up"), H.meta([A.charset("utf-8")])]),
            H.body(
                [],
                [
                    comment("form"),
                    H.form(
                        [A.method("post"), A.action("/signup"), hx.hx_post("/signup")],
                        [
                            csrf_input("tok\"en"),
                            H.label([A.for_("e")], [txt("Email")]),
                            H.input(
                                [
                                    A.name("e"),
                                    A.id("e"),
                                    A.value("%s", email),
                                    A.required(),
                                    A.class_("error") if invalid else null_,
                                ]
                            ),
                            null([H.button([A.type("submit")], [txt("Go")])]),
                        ],
                    ),
                ],
            ),
        ],
    )


greeting = H.p([], [txt("Hello")])
