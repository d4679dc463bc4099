# buildblocks/scan/scanner.py

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .._logging import NoopLogger, resolve_logger
from ..errors import BlockAttributeConflict, ScanError, UnsupportedDirective
from ..grammar import (
    StartMatch,
    has_async,
    has_defer,
    match_asset,
    match_conditional_end,
    match_conditional_start,
    match_end,
    match_main,
    match_media,
    match_start,
)
from ..models import Block, Idle, InBlock, ScanFailure, ScanResult, ScanState, ScanSuccess
from ..utils.text import split_lines

IDLE = Idle()

_MIXED_MESSAGES = {
    "defer": "You are not supposed to mix deferred and non-deferred scripts in one block.",
    "async": "You are not supposed to mix asynced and non-asynced scripts in one block.",
}


def _open_block(start: StartMatch, index: int) -> Block:
    block = Block(
        type=start.type,
        dest=start.dest,
        indent=start.indent,
        start_index=start.index,
        line_start=index,
    )
    if start.alternate_path:
        block.search_path.append(start.alternate_path)
    return block


def _copy_block(block: Block) -> Block:
    return replace(
        block,
        search_path=list(block.search_path),
        src=list(block.src),
        raw=list(block.raw),
    )


def _apply_uniform(block: Block, attribute: str, observed: bool, index: int, line: str) -> None:
    """The first asset line fixes the value; any later asset line must agree."""
    field_name = "async_" if attribute == "async" else attribute
    prior = getattr(block, field_name)
    if prior is not None and prior != observed:
        raise BlockAttributeConflict(
            attribute, _MIXED_MESSAGES[attribute], line_no=index + 1, line=line
        )
    setattr(block, field_name, observed)


def _capture_asset(block: Block, line: str, index: int) -> None:
    asset = match_asset(line)
    if not asset:
        return
    block.src.append(asset.value)

    # No check that every asset of the block agrees on media; the last one wins.
    media = match_media(line)
    if media:
        block.media = media

    _apply_uniform(block, "defer", has_defer(line), index, line)
    _apply_uniform(block, "async", has_async(line), index, line)

    if match_main(line) is not None:
        raise UnsupportedDirective(
            "data-main", "require.js blocks are no more supported.", line_no=index + 1, line=line
        )


def advance(
    state: ScanState,
    line: str,
    index: int,
    log=None,
) -> Tuple[ScanState, Optional[Block]]:
    """
    Feed one line to the scanner.

    Returns the next state and, when this line carried the end annotation of
    an open block, the finished block. `index` is the zero-based line number.
    The block held by `state` is never modified; the line is applied to a copy.
    Raises ScanError subclasses for malformed asset lines.
    """
    log = log or NoopLogger()

    start = match_start(line)
    if start:
        if isinstance(state, InBlock):
            log.warning(
                "Discarding build:%s block opened on line %d: new build:%s block starts on line %d",
                state.block.type, state.block.line_start + 1, start.type, index + 1,
            )
        state = InBlock(_open_block(start, index))
        log.debug("Opened build:%s block for '%s' on line %d", start.type, start.dest, index + 1)

    if not isinstance(state, InBlock):
        return state, None

    block = _copy_block(state.block)

    cond_start = match_conditional_start(line)
    if cond_start:
        block.conditional_start = cond_start
    cond_end = match_conditional_end(line)
    if cond_end:
        block.conditional_end = cond_end

    _capture_asset(block, line, index)
    block.raw.append(line)

    end = match_end(line)
    if end:
        block.end_index = end.end - len(line)
        block.line_end = index
        log.debug(
            "Closed build:%s block for '%s' on line %d (%d assets)",
            block.type, block.dest, index + 1, len(block.src),
        )
        return IDLE, block

    return InBlock(block), None


def scan_lines(lines: Iterable[str], *, logger=None, log: bool = False) -> ScanResult:
    """
    Scan already-split lines for build blocks.

    Returns ScanSuccess with the finished blocks in document order, or
    ScanFailure carrying the first error met. A start annotation that is
    never closed produces no block.
    """
    lg = resolve_logger(logger, enabled=log, name="scan")
    state: ScanState = IDLE
    blocks: List[Block] = []
    try:
        for index, line in enumerate(lines):
            state, finished = advance(state, line, index, lg)
            if finished is not None:
                blocks.append(finished)
    except ScanError as e:
        lg.warning("Scan failed: %s", e)
        return ScanFailure(e)

    if isinstance(state, InBlock):
        lg.debug(
            "build:%s block opened on line %d has no endbuild; dropped",
            state.block.type, state.block.line_start + 1,
        )
    return ScanSuccess(blocks)


def scan(text: str, *, logger=None, log: bool = False) -> ScanResult:
    """Split `text` into lines and scan it. See scan_lines."""
    return scan_lines(split_lines(text), logger=logger, log=log)


def get_blocks(text: str, *, logger=None, log: bool = False) -> List[Block]:
    """
    Like scan, but returns the block list directly and raises the
    ScanError of a malformed document.
    """
    return scan(text, logger=logger, log=log).unwrap()
