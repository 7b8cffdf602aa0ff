import pytest

from md_to_html.parser import Heading, Plain, Sentence
from md_to_html.services.convert import check_input_size, convert_markdown, normalize_newlines


def test_convert_markdown():
    result = convert_markdown("# Hello World!\nplain line\n**bold**")
    assert result.nodes[0] == Heading(1, [Plain("Hello World!")])
    assert result.html == "<h1>Hello World!</h1>\nplain line\n<b>bold</b>"


def test_windows_newlines_are_normalized():
    assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"
    result = convert_markdown("one\r\ntwo")
    assert result.nodes == [Sentence([Plain("one")]), Sentence([Plain("two")])]


def test_table_rows_with_crlf():
    result = convert_markdown("| A |\r\n|---|\r\n| a |\r\n")
    assert result.html == '<table>\n<tr><th>A</th></tr>\n<tr><td align="left">a</td></tr>\n</table>\n'


def test_input_size_limit(monkeypatch):
    from md_to_html import config

    monkeypatch.setattr(config, "MAX_INPUT_CHARS", 5)
    with pytest.raises(ValueError):
        convert_markdown("123456")
    assert convert_markdown("12345").html == "12345"


def test_zero_limit_disables_check():
    check_input_size("x" * 1000, limit=0)
