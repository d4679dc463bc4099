from .document import Document, load_document
from .errors import BlockAttributeConflict, ScanError, UnsupportedDirective
from .grammar import (
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
from .models import Block, Idle, InBlock, ScanFailure, ScanResult, ScanSuccess
from .scan import advance, get_blocks, scan, scan_lines
from .transform import replace_blocks
from .utils.text import split_lines

__all__ = [
    "scan",
    "scan_lines",
    "get_blocks",
    "advance",
    "load_document",
    "Document",
    "replace_blocks",
    "split_lines",
    "Block",
    "ScanResult",
    "ScanSuccess",
    "ScanFailure",
    "Idle",
    "InBlock",
    "match_start",
    "match_end",
    "match_conditional_start",
    "match_conditional_end",
    "match_asset",
    "match_media",
    "match_main",
    "has_defer",
    "has_async",
    "ScanError",
    "BlockAttributeConflict",
    "UnsupportedDirective",
]
