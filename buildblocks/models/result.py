from dataclasses import dataclass, field
from typing import List, Union

from ..errors import ScanError
from .block import Block


@dataclass(frozen=True)
class ScanSuccess:
    blocks: List[Block] = field(default_factory=list)

    ok = True

    def unwrap(self) -> List[Block]:
        return self.blocks


@dataclass(frozen=True)
class ScanFailure:
    """A malformed document. `error` says which line and why."""

    error: ScanError

    ok = False

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self) -> List[Block]:
        raise self.error


ScanResult = Union[ScanSuccess, ScanFailure]
