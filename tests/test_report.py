from insightplan.report import (
    DEFAULT_HEADING_KEYWORDS,
    BlockKind,
    ReportBlock,
    blocks_to_text,
    format_report,
    heading_keywords,
    to_markdown,
)


def test_advisory_scenario():
    text = "**Math 🤔**: 61.65%\n- tip one\n1. tip two\nplain line"
    blocks = format_report(text)
    assert [block.kind for block in blocks] == [
        BlockKind.HEADING,
        BlockKind.BULLET,
        BlockKind.NUMBERED_ITEM,
        BlockKind.PLAIN,
    ]
    assert blocks[1] == ReportBlock(BlockKind.BULLET, "tip one")
    assert blocks[2] == ReportBlock(BlockKind.NUMBERED_ITEM, "1. tip two")
    assert blocks[3] == ReportBlock(BlockKind.PLAIN, "plain line")


def test_heading_markers_are_optional():
    text = "General Improvement Tips 💪\n1. Science focus\n- English reading\n• Tips for exams"
    kinds = [block.kind for block in format_report(text)]
    assert kinds == [BlockKind.HEADING] * 4


def test_keyword_must_be_a_whole_word():
    blocks = format_report("Mathematics is fun\nTipping point")
    assert [block.kind for block in blocks] == [BlockKind.PLAIN, BlockKind.PLAIN]


def test_heading_match_is_case_sensitive_by_default():
    assert format_report("- math drills")[0].kind is BlockKind.BULLET
    assert format_report("- math drills", ignore_case=True)[0].kind is BlockKind.HEADING


def test_custom_keywords_replace_defaults():
    text = "**Biology 🌱**: 70.00%\n**Math 🤔**: 61.65%"
    blocks = format_report(text, keywords=["Biology"])
    assert blocks[0].kind is BlockKind.HEADING
    assert blocks[1].kind is BlockKind.PLAIN


def test_heading_keywords_merges_dataset_columns():
    keywords = heading_keywords(["Biology", "Math", " "])
    assert keywords[: len(DEFAULT_HEADING_KEYWORDS)] == list(DEFAULT_HEADING_KEYWORDS)
    assert keywords[-1] == "Biology"
    assert keywords.count("Math") == 1


def test_bullet_payload_strips_marker_and_whitespace():
    blocks = format_report("   -    revise daily\n•flashcards")
    assert blocks == [
        ReportBlock(BlockKind.BULLET, "revise daily"),
        ReportBlock(BlockKind.BULLET, "flashcards"),
    ]


def test_numbered_item_keeps_marker():
    blocks = format_report("  12. practise past papers")
    assert blocks == [ReportBlock(BlockKind.NUMBERED_ITEM, "12. practise past papers")]


def test_unmarked_text_is_plain_and_keeps_line_count():
    text = "First line\n\n  indented line\n**Pro Tip:** sleep well\nlast"
    blocks = format_report(text)
    assert all(block.kind is BlockKind.PLAIN for block in blocks)
    assert len(blocks) == len(text.split("\n"))
    assert blocks[1].text == ""
    assert blocks[2].text == "  indented line"


def test_round_trip_restores_content():
    text = "**Science 🔬**: 57.40%\n- use diagrams\n1. label parts\n\nKeep going!"
    assert blocks_to_text(format_report(text)) == text


def test_crlf_and_degenerate_inputs():
    assert format_report("- a\r\nb\r") == [ReportBlock(BlockKind.BULLET, "a"), ReportBlock(BlockKind.PLAIN, "b")]
    assert format_report("") == []
    assert format_report(None) == []
    assert format_report(42) == []


def test_empty_keyword_set_disables_headings():
    assert format_report("Math 90", keywords=[])[0].kind is BlockKind.PLAIN


def test_to_markdown_renders_rules_and_headings():
    blocks = format_report("**Math 🤔**: 61.65%\n- tip one\n---")
    rendered = to_markdown(blocks).split("\n\n")
    assert rendered[0] == "#### Math 🤔: 61.65%"
    assert rendered[1] == "- 🔹 tip one"
    assert rendered[2] == "---"
