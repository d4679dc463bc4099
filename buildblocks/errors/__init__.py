from .scan import BlockAttributeConflict, ScanError, UnsupportedDirective

__all__ = ["ScanError", "BlockAttributeConflict", "UnsupportedDirective"]
