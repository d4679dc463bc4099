# buildblocks/transform.py
import re
from typing import Callable, List, Sequence, Tuple

from .models import Block
from .utils.text import detect_newline, split_lines

_LINE_BREAK_RE = re.compile(r"(\r?\n)")


def _split_keep_endings(content: str) -> List[Tuple[str, str]]:
    """(text, line ending) pairs, numbered the same way the scanner numbers lines."""
    parts = _LINE_BREAK_RE.split(content)
    parts.append("")  # the last line has no ending
    return list(zip(parts[0::2], parts[1::2]))


def replace_blocks(content: str, blocks: Sequence[Block], render: Callable[[Block], str]) -> str:
    """
    Rebuilds `content` with each block's source lines, start annotation
    through end annotation, replaced by `render(block)`.

    `blocks` must come from scanning `content` (document order, closed,
    non-overlapping). Lines outside the blocks keep their own endings. The
    rendered lines take the endings of the lines they replace, in order; the
    last rendered line takes the ending of the end annotation line. Rendering
    each block as its own raw lines therefore gives the document back
    unchanged, whatever mix of CRLF and LF it uses.
    """
    lines = _split_keep_endings(content)
    fallback = detect_newline(content)
    out: List[str] = []
    cursor = 0
    for block in blocks:
        if block.line_end is None:
            raise ValueError(f"build:{block.type} block for '{block.dest}' was never closed")
        if block.line_start < cursor or block.line_end >= len(lines):
            raise ValueError(
                f"build:{block.type} block for '{block.dest}' (lines {block.line_start + 1}-"
                f"{block.line_end + 1}) is out of order or outside the document"
            )
        out.extend(text + ending for text, ending in lines[cursor:block.line_start])

        endings = [ending for _, ending in lines[block.line_start:block.line_end + 1]]
        rendered = split_lines(render(block))
        for i, text in enumerate(rendered):
            if i == len(rendered) - 1:
                ending = endings[-1]
            elif i < len(endings) - 1:
                ending = endings[i]
            else:
                ending = fallback
            out.append(text + ending)
        cursor = block.line_end + 1
    out.extend(text + ending for text, ending in lines[cursor:])
    return "".join(out)
