"""Newline trimming helpers used when assembling generated source."""

NEWLINE_CHARS = "\r\n"


def trim_newline(text: str) -> str:
    """Strip CR/LF characters from both ends, leaving other whitespace intact."""
    return text.strip(NEWLINE_CHARS)
