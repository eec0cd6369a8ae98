import os
import subprocess
import sys
from pathlib import Path

import pytest

from tagsmith.cli import main


def test_render_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    main(["render", "tests.pages:greeting"])
    assert capsys.readouterr().out == "<p>Hello</p>"


def test_render_callable_target_with_config(tmp_path: Path) -> None:
    config = tmp_path / "render.yaml"
    config.write_text("mode: xml\ndoctype: false\n", encoding="utf-8")
    out = tmp_path / "out" / "signup.html"

    main(["render", "tests.pages:signup", "--config", str(config), "--out", str(out)])

    html = out.read_text(encoding="utf-8")
    assert html.startswith('<html lang="en"><head>')
    assert '<meta charset="utf-8"/>' in html
    assert 'required="required"' in html


def test_render_flags_override_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "render.yaml"
    config.write_text("pretty: false\nindent: 8\n", encoding="utf-8")
    main(["render", "tests.pages:greeting", "--config", str(config), "--pretty", "--indent", "1"])
    assert capsys.readouterr().out == "<p>Hello</p>\n"


def test_render_rejects_bad_config(tmp_path: Path) -> None:
    config = tmp_path / "render.yaml"
    config.write_text("mode: sgml\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "tests.pages:greeting", "--config", str(config)])
    assert "Invalid render config" in str(excinfo.value)


def test_render_rejects_bad_targets() -> None:
    with pytest.raises(SystemExit, match="package.module:attribute"):
        main(["render", "tests.pages"])
    with pytest.raises(SystemExit, match="has no attribute"):
        main(["render", "tests.pages:missing"])
    with pytest.raises(SystemExit, match="is not a node"):
        main(["render", "tests.pages:__doc__"])


def test_catalog_check_passes(capsys: pytest.CaptureFixture[str]) -> None:
    main(["catalog", "check"])
    assert "up to date" in capsys.readouterr().out


def test_catalog_gen_into_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["catalog", "gen", "--out-dir", str(tmp_path)])
    assert "Wrote 3 module(s)" in capsys.readouterr().out
    assert (tmp_path / "hx.py").exists()


def test_catalog_check_fails_on_stale_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["catalog", "gen", "--out-dir", str(tmp_path)])
    (tmp_path / "attrs.py").write_text("# edited\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["catalog", "check", "--out-dir", str(tmp_path)])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "-# edited" in err
    assert "tagsmith catalog gen" in err


def test_golden_update_then_check(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    golden = tmp_path / "greeting.html"
    main(["golden", "tests.pages:greeting", "--file", str(golden), "--update"])
    assert golden.read_text(encoding="utf-8") == "<p>Hello</p>\n"

    main(["golden", "tests.pages:greeting", "--file", str(golden)])
    assert "matches" in capsys.readouterr().out

    golden.write_text("<p>Bye</p>\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["golden", "tests.pages:greeting", "--file", str(golden)])
    assert "+<p>Hello</p>" in capsys.readouterr().err


def test_module_entry_point() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "tagsmith.cli", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert "tagsmith 0.1.0" in result.stdout


def test_render_imports_from_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "tagsmith_cwd_pages.py").write_text(
        "from tagsmith import html as H\n"
        "from tagsmith.dom_model import txt\n"
        "\n"
        'page = H.p([], [txt("From cwd")])\n',
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()
    cleaned = [entry for entry in sys.path if entry not in ("", ".", cwd, str(tmp_path))]
    monkeypatch.setattr(sys, "path", cleaned)
    monkeypatch.delitem(sys.modules, "tagsmith_cwd_pages", raising=False)

    main(["render", "tagsmith_cwd_pages:page"])

    assert capsys.readouterr().out == "<p>From cwd</p>"
    assert sys.path[0] == cwd
