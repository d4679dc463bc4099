# buildblocks/grammar.py
"""
Matchers for the build-directive annotation grammar.

Each term of the grammar has its own compiled pattern and a matcher that
returns a small frozen record (or None when the line does not match):

    <!-- build:<type>(<alt path>) <dest> -->     match_start
    <!-- endbuild -->                            match_end
    <!--[if ...]> / <![endif]-->                 match_conditional_start / match_conditional_end
    href="..." / src="..."                       match_asset
    media="..."                                  match_media
    defer / async                                has_defer / has_async
    data-main="..."                              match_main

All matching is case-sensitive and operates on a single line.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

# Groups: indent, type, alternate search path, destination.
START_RE = re.compile(
    r"(?P<indent>^\s+)?<!--\s*build:(?P<type>[A-Za-z0-9_]+)"
    r"(?:\((?P<alt>[^)]+)\))?"
    r"\s+(?P<dest>\S+)\s*-->"
)
END_RE = re.compile(r"<!--\s*endbuild\s*-->")

CONDITIONAL_START_RE = re.compile(r"(<!--\[if.*\]>)(<!-->)?( -->)?")
CONDITIONAL_END_RE = re.compile(r"(<!--\s?)?(<!\[endif\]-->)")

ASSET_RE = re.compile(r"""(?P<attr>href|src)=["'](?P<value>[^'"]+)["']""")
MEDIA_RE = re.compile(r"""media=['"](?P<value>[^'"]+)['"]""")
MAIN_RE = re.compile(r"""data-main=['"](?P<value>[^'"]+)['"]""")


def _flag_pattern(word: str) -> re.Pattern[str]:
    # A bare attribute token: `defer`, `defer="defer"`, `defer>` ... but not `deferred` or `x.defer.js`.
    return re.compile(rf"(?<=\s){word}(?=[\s=>/]|$)")


DEFER_RE = _flag_pattern("defer")
ASYNC_RE = _flag_pattern("async")


@dataclass(frozen=True)
class StartMatch:
    type: str
    dest: str
    indent: str
    alternate_path: Optional[str]
    index: int        # offset of the match within the line


@dataclass(frozen=True)
class EndMatch:
    start: int        # offset of "<!--"
    end: int          # offset just past "-->"


@dataclass(frozen=True)
class AssetMatch:
    attribute: str    # "href" or "src"
    value: str


def match_start(line: str) -> Optional[StartMatch]:
    m = START_RE.search(line)
    if not m:
        return None
    return StartMatch(
        type=m.group("type"),
        dest=m.group("dest"),
        indent=m.group("indent") or "",
        alternate_path=m.group("alt"),
        index=m.start(),
    )


def match_end(line: str) -> Optional[EndMatch]:
    m = END_RE.search(line)
    if not m:
        return None
    return EndMatch(start=m.start(), end=m.end())


def match_conditional_start(line: str) -> Optional[List[str]]:
    """Return every IE conditional opener on the line, or None."""
    found = [m.group(0) for m in CONDITIONAL_START_RE.finditer(line)]
    return found or None


def match_conditional_end(line: str) -> Optional[List[str]]:
    """Return every IE conditional closer on the line, or None."""
    found = [m.group(0) for m in CONDITIONAL_END_RE.finditer(line)]
    return found or None


def match_asset(line: str) -> Optional[AssetMatch]:
    m = ASSET_RE.search(line)
    if not m:
        return None
    return AssetMatch(attribute=m.group("attr"), value=m.group("value"))


def match_media(line: str) -> Optional[str]:
    m = MEDIA_RE.search(line)
    return m.group("value") if m else None


def match_main(line: str) -> Optional[str]:
    m = MAIN_RE.search(line)
    return m.group("value") if m else None


def has_defer(line: str) -> bool:
    return DEFER_RE.search(line) is not None


def has_async(line: str) -> bool:
    return ASYNC_RE.search(line) is not None
