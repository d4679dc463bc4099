from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Block:
    """One build region, from its start annotation through its end annotation."""

    type: str
    dest: str
    indent: str = ""
    start_index: int = 0
    end_index: Optional[int] = None
    search_path: List[str] = field(default_factory=list)
    src: List[str] = field(default_factory=list)
    raw: List[str] = field(default_factory=list)
    media: Optional[str] = None
    defer: Optional[bool] = None
    async_: Optional[bool] = None    # `async` is a keyword
    conditional_start: Optional[List[str]] = None
    conditional_end: Optional[List[str]] = None
    line_start: int = 0              # zero-based line of the start annotation
    line_end: Optional[int] = None   # zero-based line of the end annotation

    def to_dict(self) -> Dict[str, Any]:
        """
        Return the block as a plain record keyed the way downstream build
        tooling expects (camelCase). Optional attributes are only present
        when they were observed.
        """
        record: Dict[str, Any] = {
            "type": self.type,
            "dest": self.dest,
            "searchPath": list(self.search_path),
            "src": list(self.src),
            "raw": list(self.raw),
            "indent": self.indent,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }
        optional = {
            "media": self.media,
            "defer": self.defer,
            "async": self.async_,
            "conditionalStart": self.conditional_start,
            "conditionalEnd": self.conditional_end,
        }
        record.update({k: v for k, v in optional.items() if v is not None})
        return record
