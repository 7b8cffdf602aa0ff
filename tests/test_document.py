from md_to_html.parser import (
    Align,
    Bold,
    Heading,
    Plain,
    Record,
    Sentence,
    Table,
    Underline,
    parse_document,
    parse_heading,
    parse_sentence,
)


def test_heading_sentence_and_bold_lines():
    nodes = parse_document("# Hello World!\nplain line\n**bold**")
    assert nodes == [
        Heading(1, [Plain("Hello World!")]),
        Sentence([Plain("plain line")]),
        Sentence([Bold([Plain("bold")])]),
    ]


def test_nested_sentence():
    assert parse_document("__**Hello World!**__") == [
        Sentence([Underline([Bold([Plain("Hello World!")])])])
    ]


def test_heading_levels_and_extra_spaces():
    result = parse_heading("###   Deep title\nrest")
    assert result.token == Heading(3, [Plain("Deep title")])
    assert result.rest == "rest"


def test_heading_requires_space_after_hashes():
    assert parse_heading("#NoSpace") is None
    assert parse_heading("plain") is None
    assert parse_document("#NoSpace") == [Sentence([Plain("#NoSpace")])]


def test_sentence_fails_only_on_empty_input():
    assert parse_sentence("") is None
    result = parse_sentence("\nnext")
    assert result.token == Sentence([Plain("")])
    assert result.rest == "next"


def test_empty_document():
    assert parse_document("") == []


def test_blank_line_becomes_empty_sentence():
    assert parse_document("a\n\nb\n") == [
        Sentence([Plain("a")]),
        Sentence([Plain("")]),
        Sentence([Plain("b")]),
    ]


def test_table_then_sentence():
    nodes = parse_document("| A | B |\n|---|--:|\n| a | b |\nafter")
    assert nodes == [
        Table(
            header=Record([[Plain("A")], [Plain("B")]]),
            align=[Align.LEFT, Align.RIGHT],
            records=[Record([[Plain("a")], [Plain("b")]])],
        ),
        Sentence([Plain("after")]),
    ]


def test_row_that_stops_table_is_reparsed_as_sentence():
    nodes = parse_document("| A | B |\n|---|---|\n| a | b |\n| c |\n")
    assert isinstance(nodes[0], Table)
    assert len(nodes[0].records) == 1
    assert nodes[1:] == [Sentence([Plain("| c |")])]


def test_pipe_lines_without_alignment_are_sentences():
    assert parse_document("| A | B |\n| x | y |\n") == [
        Sentence([Plain("| A | B |")]),
        Sentence([Plain("| x | y |")]),
    ]
