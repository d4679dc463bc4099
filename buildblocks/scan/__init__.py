from .scanner import advance, get_blocks, scan, scan_lines

__all__ = [
    "scan",
    "scan_lines",
    "get_blocks",
    "advance",
]
