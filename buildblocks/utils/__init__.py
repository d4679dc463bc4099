# buildblocks/utils/__init__.py
from .text import detect_newline, split_lines

__all__ = [
    "split_lines",
    "detect_newline",
]
