# buildblocks/document.py
import os
from dataclasses import dataclass, field
from typing import List

from ._logging import resolve_logger
from .models import Block, ScanResult
from .scan import scan


@dataclass
class Document:
    """
    A parsed HTML document: where it lives, its text, and the build blocks
    found in it.

    `search_path` is where downstream tooling should look for referenced
    assets by default. It starts as the document's own directory; blocks
    may add an alternate path of their own.
    """

    path: str
    dir: str
    name: str
    content: str
    result: ScanResult
    search_path: List[str] = field(default_factory=list)

    @property
    def blocks(self) -> List[Block]:
        """The scanned blocks. Raises the scan's error if the document is malformed."""
        return self.result.unwrap()


def load_document(filepath: str, *, encoding: str = "utf-8", logger=None, log: bool = False) -> Document:
    """
    Reads `filepath` in full and scans it for build blocks.
    I/O and decoding errors propagate; scan errors are kept on `result`.
    """
    lg = resolve_logger(logger, enabled=log, name="document")
    directory = os.path.dirname(filepath) or "."
    name = os.path.basename(filepath)

    with open(filepath, "r", encoding=encoding, newline="") as f:
        content = f.read()
    lg.debug("Read %d characters from %s", len(content), filepath)

    result = scan(content, logger=logger, log=log)
    if result.ok:
        lg.info("%s: %d build block(s)", name, len(result.blocks))
    else:
        lg.error("%s: %s", name, result.error)

    return Document(
        path=filepath,
        dir=directory,
        name=name,
        content=content,
        result=result,
        search_path=[directory],
    )
