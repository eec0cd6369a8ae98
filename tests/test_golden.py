from pathlib import Path

from tagsmith.golden import check_golden, write_golden

from tests.pages import greeting, signup

GOLDEN_DIR = Path(__file__).parent / "golden"


def test_signup_page_matches_golden() -> None:
    ok, diff = check_golden(GOLDEN_DIR / "signup.html", signup())
    assert ok, diff


def test_conditional_attribute_shows_in_diff() -> None:
    ok, diff = check_golden(GOLDEN_DIR / "signup.html", signup(invalid=True))
    assert not ok
    assert '+      <input name="e" id="e" value="a&amp;b@example.com" required class="error">' in diff


def test_missing_golden_is_a_mismatch(tmp_path: Path) -> None:
    ok, diff = check_golden(tmp_path / "none.html", greeting)
    assert not ok
    assert "+<p>Hello</p>" in diff


def test_write_then_check(tmp_path: Path) -> None:
    path = write_golden(tmp_path / "nested" / "greeting.html", greeting, indent=4)
    assert path.read_text(encoding="utf-8") == "<p>Hello</p>\n"
    assert check_golden(path, greeting, indent=4) == (True, "")
