from studybud.utils.markdown_blocks import render_lines


def test_headings():
    blocks = render_lines("# Title\n## Section\n### Detail")

    assert [(b.type, b.level, b.text) for b in blocks] == [
        ("heading", 1, "Title"),
        ("heading", 2, "Section"),
        ("heading", 3, "Detail"),
    ]


def test_labeled_items():
    dash, numbered = render_lines("- **Neuron** - a nerve cell\n1. **Synapse**: the gap between neurons")

    assert (dash.type, dash.label, dash.text) == ("labeled_item", "Neuron", "a nerve cell")
    assert (numbered.type, numbered.label, numbered.text) == ("labeled_item", "Synapse", "the gap between neurons")


def test_bullets_numbers_spacers_and_paragraphs():
    blocks = render_lines("- plain bullet\n2. second step\n\nJust text")

    assert [b.type for b in blocks] == ["bullet", "numbered", "spacer", "paragraph"]
    assert blocks[0].text == "plain bullet"
    assert blocks[1].text == "2. second step"
    assert blocks[3].text == "Just text"


def test_unclosed_bold_falls_back_to_bullet():
    (block,) = render_lines("- **not closed")

    assert block.type == "bullet"
    assert block.text == "**not closed"


def test_empty_text():
    assert render_lines("") == []
