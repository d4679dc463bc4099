import pytest

from buildblocks import get_blocks, replace_blocks
from buildblocks.models import Block

PAGE = (
    "<html>\n"
    "<head>\n"
    "    <!-- build:css css/site.css -->\n"
    '    <link rel="stylesheet" href="css/normalize.css">\n'
    '    <link rel="stylesheet" href="css/main.css">\n'
    "    <!-- endbuild -->\n"
    "</head>\n"
    "<body>\n"
    "<!-- build:js js/app.js -->\n"
    '<script src="a.js" defer></script>\n'
    "<!-- endbuild -->\n"
    "</body>\n"
    "</html>\n"
)


def _identity(block):
    return "\n".join(block.raw)


def test_identity_round_trip():
    assert replace_blocks(PAGE, get_blocks(PAGE), _identity) == PAGE


def test_identity_round_trip_crlf():
    crlf = PAGE.replace("\n", "\r\n")
    assert replace_blocks(crlf, get_blocks(crlf), _identity) == crlf


def test_identity_round_trip_without_blocks():
    text = "<p>plain</p>\n"
    assert replace_blocks(text, get_blocks(text), _identity) == text


def test_replace_with_built_tags():
    def render(block):
        if block.type == "css":
            return f'{block.indent}<link rel="stylesheet" href="{block.dest}">'
        return f'<script src="{block.dest}" defer></script>'

    out = replace_blocks(PAGE, get_blocks(PAGE), render)

    assert out == (
        "<html>\n"
        "<head>\n"
        '    <link rel="stylesheet" href="css/site.css">\n'
        "</head>\n"
        "<body>\n"
        '<script src="js/app.js" defer></script>\n'
        "</body>\n"
        "</html>\n"
    )


def test_unclosed_block_rejected():
    with pytest.raises(ValueError, match="never closed"):
        replace_blocks(PAGE, [Block(type="js", dest="x.js", line_start=1)], _identity)


def test_out_of_order_blocks_rejected():
    blocks = get_blocks(PAGE)
    with pytest.raises(ValueError, match="out of order"):
        replace_blocks(PAGE, list(reversed(blocks)), _identity)


def test_identity_round_trip_mixed_line_endings():
    text = (
        "<p>\r\n"
        "<!-- build:js a.js -->\n"
        '<script src="a.js"></script>\r\n'
        "<!-- endbuild -->\n"
        "</p>"
    )
    assert replace_blocks(text, get_blocks(text), _identity) == text


def test_rendered_lines_take_endings_of_replaced_span():
    text = (
        "<head>\r\n"
        "<!-- build:js a.js -->\r\n"
        '<script src="a.js"></script>\n'
        "<!-- endbuild -->\r\n"
        "</head>\n"
    )
    out = replace_blocks(text, get_blocks(text), lambda b: "<x>\n<y>\n<z>\n<w>")
    assert out == "<head>\r\n<x>\r\n<y>\n<z>\r\n<w>\r\n</head>\n"


def test_single_line_block_expanded_uses_document_newline():
    text = '<a>\r\n<!-- build:js a.js --><script src="a.js"></script><!-- endbuild -->\r\n<b>'
    out = replace_blocks(text, get_blocks(text), lambda b: "<x>\n<y>")
    assert out == "<a>\r\n<x>\r\n<y>\r\n<b>"
