from .block import Block
from .result import ScanFailure, ScanResult, ScanSuccess
from .state import Idle, InBlock, ScanState

__all__ = ["Block", "ScanResult", "ScanSuccess", "ScanFailure", "ScanState", "Idle", "InBlock"]
