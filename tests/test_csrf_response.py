import unittest

from bs4 import BeautifulSoup

from tagsmith import attrs as A
from tagsmith import html as H
from tagsmith.csrf import csrf_input, csrf_raw
from tagsmith.dom_model import txt
from tagsmith.render import CONTENT_TYPE, Response, respond, to_string


class CsrfTest(unittest.TestCase):
    def test_hidden_input_escapes_token(self) -> None:
        rendered = to_string(csrf_input('a"b<c', field_name="_csrf"))
        self.assertEqual(rendered, '<input type="hidden" name="_csrf" value="a&quot;b&lt;c">')
        field = BeautifulSoup(rendered, "html.parser").find("input")
        self.assertEqual(field["value"], 'a"b<c')

    def test_provider_markup_is_embedded_verbatim(self) -> None:
        tag = '<input type="hidden" name="dream.csrf" value="abc">'
        form = H.form([A.method("post")], [csrf_raw(tag), H.button([], [txt("Send")])])
        self.assertEqual(
            to_string(form),
            f'<form method="post">{tag}<button>Send</button></form>',
        )


class RespondTest(unittest.TestCase):
    def test_respond_returns_utf8_html(self) -> None:
        response = respond(H.p([], [txt("héllo")]))
        self.assertEqual(
            response,
            Response(body="<p>héllo</p>".encode("utf-8"), content_type=CONTENT_TYPE, status=200),
        )
        self.assertEqual(CONTENT_TYPE, "text/html; charset=utf-8")

    def test_respond_status(self) -> None:
        self.assertEqual(respond(H.p([], []), status=404).status, 404)


if __name__ == "__main__":
    unittest.main()
