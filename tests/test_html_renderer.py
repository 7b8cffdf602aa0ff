import pytest

from md_to_html.parser import (
    Align,
    Bold,
    Heading,
    Italic,
    ListItem,
    ListNode,
    Plain,
    Record,
    Sentence,
    Strikethrough,
    Table,
    Underline,
    parse_document,
)
from md_to_html.services.html_renderer import (
    render_document,
    render_node,
    render_span,
    render_spans,
)


def test_heading_and_sentence():
    assert render_node(Heading(1, [Plain("Hello")])) == "<h1>Hello</h1>"
    assert render_node(Heading(4, [Plain("Deep")])) == "<h4>Deep</h4>"
    assert render_node(Sentence([Plain("Hello")])) == "Hello"


@pytest.mark.parametrize(
    "span, html",
    [
        (Plain("Hello"), "Hello"),
        (Italic([Plain("Hello")]), "<i>Hello</i>"),
        (Bold([Plain("Hello")]), "<b>Hello</b>"),
        (Strikethrough([Plain("Hello")]), "<s>Hello</s>"),
        (Underline([Plain("Hello")]), "<u>Hello</u>"),
    ],
)
def test_span_tags(span, html):
    assert render_span(span) == html


def test_spans_in_order():
    spans = [Plain("Hello"), Bold([Italic([Plain("World!")])])]
    assert render_spans(spans) == "Hello<b><i>World!</i></b>"


def test_plain_text_is_not_escaped():
    assert render_span(Plain("<a href='x'>&</a>")) == "<a href='x'>&</a>"


def test_table():
    table = Table(
        header=Record([[Plain("A")], [Plain("B")]]),
        align=[Align.RIGHT, Align.CENTER],
        records=[Record([[Plain("a")], [Plain("b")]])],
    )
    assert render_node(table) == (
        "<table>\n"
        "<tr><th>A</th><th>B</th></tr>\n"
        '<tr><td align="right">a</td><td align="center">b</td></tr>\n'
        "</table>\n"
    )


def test_table_with_several_rows():
    table = Table(
        header=Record([[Plain("hello")]]),
        align=[Align.LEFT],
        records=[Record([[Plain("hello")]]), Record([[Bold([Plain("world")])]])],
    )
    assert render_node(table) == (
        "<table>\n"
        "<tr><th>hello</th></tr>\n"
        '<tr><td align="left">hello</td></tr>\n'
        '<tr><td align="left"><b>world</b></td></tr>\n'
        "</table>\n"
    )


def test_list_has_no_rendering_rule():
    with pytest.raises(RuntimeError):
        render_node(ListNode([ListItem([Plain("item")])]))


def test_document_joins_nodes_with_newlines():
    nodes = parse_document("# Title\nsome *text*\n**end**")
    assert render_document(nodes) == "<h1>Title</h1>\nsome <i>text</i>\n<b>end</b>"


def test_rendering_is_idempotent():
    nodes = parse_document("# T\n| A | B |\n|:-:|--:|\n| ~~a~~ | __b__ |\ntail")
    assert render_document(nodes) == render_document(nodes)
