from typing import List, Optional


def split_lines(content: Optional[str]) -> List[str]:
    """
    Normalizes CRLF line endings to LF and splits the text into lines.
    Empty input yields a single empty line.
    """
    if content is None:
        return [""]
    return content.replace("\r\n", "\n").split("\n")


def detect_newline(content: str) -> str:
    """Returns '\\r\\n' if the text uses CRLF anywhere, else '\\n'."""
    if content and "\r\n" in content:
        return "\r\n"
    return "\n"
