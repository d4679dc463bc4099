from dataclasses import dataclass
from typing import Union

from .block import Block


@dataclass(frozen=True)
class Idle:
    """Between blocks: no start annotation is open."""


@dataclass(frozen=True)
class InBlock:
    """A start annotation has been seen; `block` is collecting lines."""

    block: Block


ScanState = Union[Idle, InBlock]
