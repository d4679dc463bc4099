from typing import Optional


class ScanError(Exception):
    """A document could not be scanned. Carries the offending line when known."""

    def __init__(self, message: str, *, line_no: Optional[int] = None, line: Optional[str] = None):
        self.message = message
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"{message} (line {line_no})"
        super().__init__(message)


class BlockAttributeConflict(ScanError):
    """Asset lines of one block disagree on `defer` or `async`."""

    def __init__(self, attribute: str, message: str, **kwargs):
        self.attribute = attribute
        super().__init__(message, **kwargs)


class UnsupportedDirective(ScanError):
    """An asset line uses a directive form that is no longer supported (`data-main`)."""

    def __init__(self, directive: str, message: str, **kwargs):
        self.directive = directive
        super().__init__(message, **kwargs)
