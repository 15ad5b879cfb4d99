import io

from asciishade.output import ConsoleOutput, HtmlOutput
from asciishade.pipeline import CharGrid


def test_console_prints_rows(capsys):
    ConsoleOutput().out(CharGrid(rows=["ab", "cd"]))
    assert capsys.readouterr().out == "ab\ncd\n"


def test_console_custom_stream():
    stream = io.StringIO()
    ConsoleOutput(stream).out(CharGrid(rows=["#"]))
    assert stream.getvalue() == "#\n"


def test_html_writes_escaped_page(tmp_path):
    path = tmp_path / "out.html"
    HtmlOutput(path).out(CharGrid(rows=["<&", "ab"]))
    page = path.read_text(encoding="utf-8")
    assert page.startswith("<!DOCTYPE html>")
    assert "&lt;&amp;\nab" in page
    assert "'Courier New'" in page


def test_html_font_is_configurable(tmp_path):
    output = HtmlOutput(tmp_path / "out.html", font="Menlo")
    assert "'Menlo'" in output.render(CharGrid(rows=["x"]))
